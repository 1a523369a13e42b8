"""
Integration test launcher.

Loads the project's env file, forces test mode, runs the integration test
command with inherited output, and exits with the command's status.
"""

import sys
from typing import Optional

from launcher.config.settings import LauncherSettings, get_settings
from launcher.core.environment import build_child_environment, load_env_file
from launcher.core.logger import get_logger, setup_logging
from launcher.core.runner import parse_command, run_command
from launcher.shared.exceptions import SpawnFailureError

logger = get_logger(__name__)


def main(settings: Optional[LauncherSettings] = None) -> int:
    """
    Run the integration tests once.

    Args:
        settings: Launcher settings (loaded from the environment if omitted)

    Returns:
        The test command's exit code, or 1 if it could not be run
    """
    if settings is None:
        settings = get_settings()

    setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

    loaded = load_env_file(settings.LAUNCHER_ENV_FILE)
    environment = build_child_environment(loaded)

    logger.info("Running integration tests...")

    try:
        args = parse_command(settings.LAUNCHER_COMMAND)
        exit_code = run_command(args, environment)
    except SpawnFailureError as e:
        logger.error(f"Test execution failed: {e!r}")
        return e.exit_code

    logger.debug(f"Test result: {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
