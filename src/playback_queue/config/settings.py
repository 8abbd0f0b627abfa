"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen after
initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.constants import PlaylistConstants, SyncConstants
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import PlaylistMaxSize, SyncIntervalSeconds


class PlaylistSettings(BaseModel):
    """Playback queue configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    max_size: PlaylistMaxSize = Field(
        default=PlaylistConstants.MAX_SIZE,
        validation_alias=AliasChoices("max_size", "size", "window"),
    )
    strip_previous_payload: bool = True
    truncate_on_open: bool = True


class SyncSettings(BaseModel):
    """Remote reconciliation configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    checkpoint_after_push: bool = True
    interval_seconds: SyncIntervalSeconds = Field(
        default=SyncConstants.DEFAULT_INTERVAL_SECONDS,
        validation_alias=AliasChoices("interval_seconds", "interval"),
    )


class Settings(BaseSettings):
    """Application settings container.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - PLAYLIST__MAX_SIZE, PLAYLIST__TRUNCATE_ON_OPEN, etc. (nested)
    - SYNC__CHECKPOINT_AFTER_PUSH, SYNC__INTERVAL_SECONDS (nested)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    playlist: PlaylistSettings = Field(default_factory=PlaylistSettings)
    sync: SyncSettings = Field(default_factory=SyncSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
