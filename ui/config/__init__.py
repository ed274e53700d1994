"""Configuration management."""

from .paths import AppPaths
from .settings import (
    ApiSettings,
    AppSettings,
    DisplaySettings,
    SettingsManager,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "DisplaySettings",
    "AppPaths",
    "SettingsManager",
    "get_settings",
]
