"""Configuration management using pydantic-settings."""

from .settings import (
    FlowcaseSettings,
    LiftSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "FlowcaseSettings",
    "LiftSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
