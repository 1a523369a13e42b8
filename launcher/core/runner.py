"""
Synchronous execution of the test command.

The child shares the launcher's stdin, stdout and stderr, and the launcher
blocks until it exits.
"""

import os
import shlex
import subprocess
from typing import List, Mapping, Optional, Sequence

from launcher.core.logger import get_logger
from launcher.shared.exceptions import SpawnFailureError

logger = get_logger(__name__)


def parse_command(command_line: str) -> List[str]:
    """Split a command line into arguments, shell-style."""
    try:
        args = shlex.split(command_line)
    except ValueError as e:
        raise SpawnFailureError(f"Invalid test command {command_line!r}: {e}") from e

    if not args:
        raise SpawnFailureError("No test command configured")
    return args


def resolve_exit_code(returncode: Optional[int], command: Optional[Sequence[str]] = None) -> int:
    """
    Turn a child status into the launcher's exit code.

    Args:
        returncode: Status reported for the child; None counts as success
        command: Command the status belongs to, for error reporting

    Returns:
        Exit code to propagate

    Raises:
        SpawnFailureError: If the child was terminated by a signal
    """
    if returncode is None:
        return 0
    if returncode < 0:
        raise SpawnFailureError(
            f"Test command terminated by signal {-returncode}",
            command=command
        )
    return returncode


def run_command(
    args: Sequence[str],
    env: Mapping[str, str],
    cwd: Optional[str] = None,
) -> int:
    """
    Run a command to completion with inherited standard streams.

    Args:
        args: Program and arguments (no shell is involved)
        env: Complete environment for the child
        cwd: Working directory (defaults to the current one)

    Returns:
        The child's exit code

    Raises:
        SpawnFailureError: If the process could not be started or managed
    """
    command = list(args)
    if not command:
        raise SpawnFailureError("No test command configured")

    working_dir = cwd or os.getcwd()
    logger.debug(f"Spawning {shlex.join(command)} in {working_dir}")

    try:
        completed = subprocess.run(
            command,
            env=dict(env),
            cwd=working_dir,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise SpawnFailureError(
            f"Could not run {shlex.join(command)}: {e}",
            command=command
        ) from e
    except KeyboardInterrupt as e:
        raise SpawnFailureError(
            f"Interrupted while running {shlex.join(command)}",
            command=command
        ) from e

    return resolve_exit_code(completed.returncode, command)
