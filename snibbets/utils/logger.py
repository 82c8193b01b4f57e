# snibbets/utils/logger.py
"""
Centralized Logging System for Snibbets

Uses loguru with:
- Console output on stderr (stdout is reserved for snippet output)
- Optional rotating log file
"""

import sys
from typing import Any, Optional

from loguru import logger as _loguru_logger

# Export the logger instance directly
logger = _loguru_logger

# Remove default handler
logger.remove()

_current_level = "WARNING"


def setup_logger(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
) -> None:
    """
    Setup the logging system.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to a log file, if file logging is wanted
        rotation: When to rotate the log file
        retention: How long to keep old logs
    """
    global _current_level

    logger.remove()

    _current_level = level.upper()

    logger.add(
        sys.stderr,
        level=_current_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        colorize=True,
        backtrace=False,
        diagnose=False,
    )

    if log_file:
        logger.add(
            log_file,
            level=_current_level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            backtrace=True,
            diagnose=False,
        )

    logger.debug(f"Logging initialized at level {_current_level}")


def log_exception(exc: Exception, context: Optional[dict[str, Any]] = None) -> None:
    """
    Log an exception with context.

    Args:
        exc: The exception to log
        context: Additional context information
    """
    context = context or {}
    logger.opt(exception=exc).error(f"Exception occurred: {type(exc).__name__}: {exc} | {context}")
