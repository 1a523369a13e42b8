"""
Child process environment.

Reads the project's dotenv file and merges it with the current environment
and the fixed test-mode flags.
"""

import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from launcher.core.logger import get_logger

logger = get_logger(__name__)


# Always applied last; nothing loaded or inherited can change these.
FORCED_ENVIRONMENT: Dict[str, str] = {
    "NODE_ENV": "test",
    "DOCKER_ENV": "true",
}


def load_env_file(path: Union[str, Path]) -> Dict[str, str]:
    """
    Parse a dotenv file into a mapping.

    A missing or unreadable file is not an error: the launcher continues
    with the variables it already has. Values are taken literally, without
    ${VAR} expansion. Keys declared without a value are skipped.

    Args:
        path: dotenv file path, relative paths resolve against the cwd

    Returns:
        Variables defined in the file
    """
    env_path = Path(path)
    if not env_path.is_file():
        logger.debug(f"No env file at {env_path}, using existing environment")
        return {}

    try:
        values = dotenv_values(env_path, encoding="utf-8", interpolate=False)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read env file {env_path}: {e}")
        return {}

    loaded = {key: value for key, value in values.items() if value is not None}
    logger.debug(f"Loaded {len(loaded)} variables from {env_path}")
    return loaded


def build_child_environment(
    loaded: Mapping[str, str],
    base: Optional[Mapping[str, str]] = None,
    overrides: Mapping[str, str] = FORCED_ENVIRONMENT,
) -> Dict[str, str]:
    """
    Merge environment layers for the test command.

    Precedence, lowest first: values from the env file, the inherited
    environment, then the overrides. None of the inputs are modified.

    Args:
        loaded: Variables read from the env file
        base: Inherited environment (defaults to os.environ)
        overrides: Variables that always win

    Returns:
        New environment mapping
    """
    if base is None:
        base = os.environ

    environment = dict(loaded)
    environment.update(base)
    environment.update(overrides)
    return environment
