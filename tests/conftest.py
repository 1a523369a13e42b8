"""
Pytest configuration and shared fixtures.

Every test runs in a scratch working directory with launcher-related
variables cleared, so a developer's real .env never leaks in.
"""

import logging
import shlex
import sys
from pathlib import Path
from typing import Callable

import pytest

from launcher.config.settings import LauncherSettings, reset_settings
from launcher.core.logger import ROOT_LOGGER_NAME


ISOLATED_VARIABLES = (
    "LAUNCHER_COMMAND",
    "LAUNCHER_ENV_FILE",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "NODE_ENV",
    "DOCKER_ENV",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Run each test from an empty directory with a clean launcher environment.

    Yields:
        Path: The working directory used by the test
    """
    for name in ISOLATED_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers = list(package_logger.handlers)
    saved_level = package_logger.level

    yield tmp_path

    package_logger.handlers[:] = saved_handlers
    package_logger.setLevel(saved_level)
    reset_settings()


@pytest.fixture
def write_env_file(tmp_path) -> Callable[..., Path]:
    """Write a dotenv file into the working directory and return its path."""
    def _write(content: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def python_command() -> Callable[..., str]:
    """Build a command line that runs a Python snippet in a fresh interpreter."""
    def _build(code: str, *args: str) -> str:
        return shlex.join([sys.executable, "-c", code, *args])
    return _build


@pytest.fixture
def make_settings(tmp_path) -> Callable[..., LauncherSettings]:
    """Create settings for a given command without reading any .env file."""
    def _make(command: str, env_file: str = ".env", **overrides) -> LauncherSettings:
        return LauncherSettings(
            _env_file=None,
            LAUNCHER_COMMAND=command,
            LAUNCHER_ENV_FILE=str(tmp_path / env_file),
            LOG_FORMAT="simple",
            **overrides,
        )
    return _make
