"""
Custom exception classes for the launcher.

All custom exceptions inherit from base LauncherException so the entry point
can turn them into a process exit code in one place.
"""

from typing import Optional, Sequence


class LauncherException(Exception):
    """
    Base launcher exception.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Error message
        code: Error code
        exit_code: Process exit code reported when this error ends the run
    """

    def __init__(
        self,
        message: str,
        code: str = "LAUNCHER_ERROR",
        exit_code: int = 1
    ):
        """
        Initialize LauncherException.

        Args:
            message: Error message
            code: Error code
            exit_code: Process exit code
        """
        self.message = message
        self.code = code
        self.exit_code = exit_code
        super().__init__(self.message)


# Process Exceptions

class SpawnFailureError(LauncherException):
    """The test command could not be started or did not report a usable status."""

    def __init__(
        self,
        message: str = "Failed to spawn test command",
        command: Optional[Sequence[str]] = None
    ):
        self.command = list(command) if command is not None else None
        super().__init__(message=message, code="SPAWN_FAILURE", exit_code=1)
