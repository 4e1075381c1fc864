"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Editor settings loaded from environment variables.

    Attributes:
        default_cue_length_ms: Length of a new cue when no stop time is given
        default_format: Format tag used when a document is opened without one
        ass_default_style: Style name written into new ASS dialogue lines
        log_level: Minimum level passed through by setup_logging
    """

    default_cue_length_ms: int = Field(default=1000, ge=0)
    default_format: str = "vtt"
    ass_default_style: str = "Default"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SUBEDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached editor settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached for performance. Use get_settings.cache_clear()
        to reload settings in tests.
    """
    return Settings()
