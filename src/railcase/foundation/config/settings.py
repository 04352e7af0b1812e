"""Environment-based configuration using pydantic-settings.

Example:
    >>> from railcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.bridge.capture_traceback
    False

    # Or with environment variables:
    # RAILCASE_LOG_LEVEL=DEBUG
    # RAILCASE_BRIDGE_CAPTURE_TRACEBACK=true
    # RAILCASE_CONCURRENCY_DEFAULT_LIMIT=8
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration for the ``railcase`` logger tree."""

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class BridgeSettings(BaseSettings):
    """Behaviour of the exception-capturing async bridge."""

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_BRIDGE_",
        extra="ignore",
    )

    capture_traceback: bool = Field(
        default=False,
        description="Store the formatted traceback in BoundaryError.details",
    )
    log_captured: bool = Field(default=True, description="Log each captured exception at DEBUG")


class ConcurrencySettings(BaseSettings):
    """Defaults for the fan-out helpers in railcase.runtime.parallel."""

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_CONCURRENCY_",
        extra="ignore",
    )

    default_limit: PositiveInt | None = Field(
        default=None,
        description="Max tasks in flight for sequence_par and friends; None means unbounded",
    )


class Settings(BaseSettings):
    """Root settings for railcase.

    Loads configuration from environment variables with RAILCASE_ prefix.
    Supports nested configuration and .env files.
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    bridge: BridgeSettings = Field(default_factory=BridgeSettings)
    concurrency: ConcurrencySettings = Field(default_factory=ConcurrencySettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the global settings instance (cached)."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
