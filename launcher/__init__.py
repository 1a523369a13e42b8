"""Integration test launcher: runs the Jest integration suite in test mode."""

__version__ = "1.0.0"
