"""
Clean, Colored Logging Configuration

Provides readable console output with colors and timestamps. Progress
messages go to stdout and problems go to stderr, so the launcher's own
output interleaves cleanly with the test runner's inherited streams.

Usage:
    from launcher.core.logger import get_logger
    logger = get_logger(__name__)

    # In main.py:
    from launcher.core.logger import setup_logging
    setup_logging()
"""

import logging
import sys
from datetime import datetime, timezone


ROOT_LOGGER_NAME = "launcher"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors and clean structure"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',      # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')

        level_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset_color = self.COLORS['RESET']

        # Clean module name (remove launcher. prefix)
        prefix = f"{ROOT_LOGGER_NAME}."
        module_name = record.name[len(prefix):] if record.name.startswith(prefix) else record.name

        # Format: [TIMESTAMP] LEVEL [MODULE] MESSAGE
        formatted_message = f"{level_color}[{timestamp}] {record.levelname:<8} [{module_name:<12}] {record.getMessage()}{reset_color}"

        if record.exc_info:
            formatted_message += f"\n{self.formatException(record.exc_info)}"

        return formatted_message


class MaxLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def build_formatter(format_type: str) -> logging.Formatter:
    """Return the formatter for a format name ("colored", "simple" or structured)."""
    if format_type == "colored":
        return ColoredFormatter()
    if format_type == "simple":
        return logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    # Default structured format
    return logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s:%(lineno)d] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def setup_logging(level: str = "INFO", format_type: str = "colored") -> logging.Logger:
    """
    Setup launcher logging.

    Safe to call more than once; existing launcher handlers are replaced.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "colored" for console with colors, "simple" for plain
            lines, anything else for the structured format

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = build_formatter(format_type)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(numeric_level)
    stdout_handler.addFilter(MaxLevelFilter(logging.WARNING))
    stdout_handler.setFormatter(formatter)
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(max(numeric_level, logging.WARNING))
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
