"""
================================================================================
Suite Tools
================================================================================

Supporting utilities shared by the Swag Labs test suite and `run_tests.py`.

Modules:
    - common: Loguru logging setup
    - report_tools: Allure attachments and report generation

Example:
    from suite_tools.common import init_logger
    from suite_tools.report_tools.allure_utils import attach_file

    init_logger(level="DEBUG")
    attach_file("test-results/screenshots/login_failure.png", "Failure Screenshot")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
