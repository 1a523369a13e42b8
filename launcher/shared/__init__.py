"""Shared exception types."""

from launcher.shared.exceptions import LauncherException, SpawnFailureError

__all__ = [
    "LauncherException",
    "SpawnFailureError",
]
