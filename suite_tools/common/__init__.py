"""
================================================================================
Suite Tools Common Utilities
================================================================================

Shared logging setup for the test suite and the runner.

Usage:
    from suite_tools.common import init_logger

    init_logger(level="DEBUG", log_file="test-results/logs/run.log")

================================================================================
"""

from .global_config import get_logger, init_logger, reset_logger

__all__ = [
    "get_logger",
    "init_logger",
    "reset_logger",
]
