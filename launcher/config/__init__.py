"""Configuration package for launcher settings."""

from launcher.config.settings import (
    DEFAULT_TEST_COMMAND,
    LauncherSettings,
    load_settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "DEFAULT_TEST_COMMAND",
    "LauncherSettings",
    "load_settings",
    "get_settings",
    "reset_settings",
]
