"""Structured logging setup."""

import logging

import structlog

from subedit.utils.config import get_settings


def setup_logging(level: str | None = None) -> None:
    """Configure structlog for console output.

    Args:
        level: Minimum level name; defaults to the configured log_level

    Raises:
        ValueError: If the level name is unknown
    """
    name = (level or get_settings().log_level).upper()
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        raise ValueError(f"Unknown log level: {name}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(levels[name]),
        cache_logger_on_first_use=True,
    )
