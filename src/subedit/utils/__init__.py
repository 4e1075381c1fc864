"""Utility modules."""

from subedit.utils.config import Settings, get_settings
from subedit.utils.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
