"""
================================================================================
Global Logging Configuration
================================================================================

Centralized Loguru setup shared by the test suite and the runner.

Features:
    - One-time stderr sink with a consistent format
    - Optional rotating file sink
    - Worker id prefix when running under pytest-xdist

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[worker]} | "
    "{name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_str: str = DEFAULT_FORMAT,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Safe to call more than once; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a rotating log file
        format_str: Loguru format string
        rotation: File rotation policy
        retention: File retention policy
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger.remove()
    logger.configure(extra={"worker": os.getenv("PYTEST_XDIST_WORKER", "main")})
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=format_str,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level.upper(),
            format=format_str.replace("{level: <8}", "{level}"),
            rotation=rotation,
            retention=retention,
            compression="zip",
            enqueue=True,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def get_logger():
    """Returns the Loguru logger, initializing it with defaults if needed."""
    if not _logger_initialized:
        init_logger()
    return logger


def reset_logger() -> None:
    """Allow init_logger() to reconfigure sinks (used by tests)."""
    global _logger_initialized
    _logger_initialized = False
