"""Configuration management using pydantic-settings."""

from .settings import (
    BridgeSettings,
    ConcurrencySettings,
    LoggingSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BridgeSettings",
    "ConcurrencySettings",
    "LoggingSettings",
    "Settings",
    "clear_settings_cache",
    "get_settings",
]
