"""
Launcher settings using Pydantic Settings.

Loads configuration from environment variables with validation.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


DEFAULT_TEST_COMMAND = "npx jest --config jest.config.local.js"


class LauncherSettings(BaseSettings):
    """
    Launcher settings loaded from environment variables.

    Values come from the process environment or the project's .env file.
    The .env file is shared with the application under test, so unknown
    keys are ignored rather than rejected.
    """

    # Child process
    LAUNCHER_COMMAND: str = Field(
        default=DEFAULT_TEST_COMMAND,
        description="Test command line, split shell-style and run without a shell"
    )
    LAUNCHER_ENV_FILE: str = Field(
        default=".env",
        description="dotenv file whose variables are passed to the test command"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="colored")

    @field_validator("LAUNCHER_COMMAND", "LAUNCHER_ENV_FILE", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        """Strip surrounding whitespace from string values."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("LOG_LEVEL", "LOG_FORMAT")
    @classmethod
    def normalize_logging_options(cls, v: str, info) -> str:
        """Upper-case the level and lower-case the format name."""
        v = v.strip()
        if info.field_name == "LOG_LEVEL":
            return v.upper() or "INFO"
        return v.lower()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


def load_settings() -> LauncherSettings:
    """
    Load settings from the environment and .env.

    An unreadable .env (bad encoding, permissions) falls back to the
    process environment alone.
    """
    try:
        return LauncherSettings()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read .env for launcher settings: {e}")
        return LauncherSettings(_env_file=None)


def get_settings() -> LauncherSettings:
    """Get settings instance (lazy loading)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


_settings: LauncherSettings | None = None
