"""
================================================================================
Test Result Observer
================================================================================

Turns the outcome of a finished UI test into evidence.

Features:
    - Phase reports (setup / call) kept on the test item for fixtures
    - Screenshot, trace and "Error Details" attachments on failure
    - Success screenshot and trace when their mode is ALWAYS
    - Capture always happens before the session is torn down

A failure in a setup fixture (login, filling the cart) counts the same as a
failure in the test body.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional

import pytest
from loguru import logger

from suite_tools.report_tools.allure_utils import attach_error_details, attach_file

from .artifacts import timestamped_name
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader


phase_report_key = pytest.StashKey[dict]()

# Phases whose failure is evidence-worthy, in the order they run
OBSERVED_PHASES = ("setup", "call")


def record_phase_report(item: Any, report: Any) -> None:
    """Keep a phase report on the item, keyed by phase name."""
    item.stash.setdefault(phase_report_key, {})[report.when] = report


def outcome_report(item: Any) -> Optional[Any]:
    """
    Pick the report that decides the test outcome.

    The first failed setup/call report wins; otherwise the call report, or
    the setup report when the test never reached its body (skipped in setup).
    """
    reports = item.stash.get(phase_report_key, {})
    for when in OBSERVED_PHASES:
        report = reports.get(when)
        if report is not None and report.failed:
            return report
    return reports.get("call") or reports.get("setup")


def artifact_base_name(item: Any) -> str:
    """`<Class>.<test>` for class-based tests, `<module>.<test>` otherwise."""
    cls = item.cls.__name__ if item.cls else item.module.__name__.rsplit(".", 1)[-1]
    return f"{cls}.{item.name}"


async def capture_outcome(
    item: Any,
    manager: BrowserManager,
    screenshot_mode: Optional[str] = None,
    trace_mode: Optional[str] = None,
) -> None:
    """
    Capture screenshots and traces for the finished test. Never raises.

    Args:
        item: The pytest item whose phase reports were recorded
        manager: The test's browser session, still live
        screenshot_mode: OFF / ON_FAILURE / ALWAYS (defaults to config)
        trace_mode: OFF / ON_FAILURE / ALWAYS (defaults to config)
    """
    report = outcome_report(item)
    if report is None:
        return

    config = ConfigLoader()
    screenshot_mode = str(
        screenshot_mode or config.get("artifacts.screenshot_mode", "ON_FAILURE")
    ).upper()
    trace_mode = str(trace_mode or config.get("artifacts.trace_mode", "ON_FAILURE")).upper()
    name = artifact_base_name(item)

    if report.failed:
        logger.error(f"❌ Test FAILED in {report.when}: {name}")
        if screenshot_mode != "OFF":
            path = await manager.capture_screenshot(timestamped_name(f"{name}_failure"))
            attach_file(path, "Failure Screenshot")
        trace = await manager.capture_trace(timestamped_name(f"{name}_failure"))
        attach_file(trace, "Failure Trace")
        attach_error_details(name, report.longreprtext)
    elif report.passed:
        logger.info(f"✅ Test PASSED: {name}")
        if screenshot_mode == "ALWAYS":
            path = await manager.capture_screenshot(timestamped_name(f"{name}_success"))
            attach_file(path, "Success Screenshot")
        if trace_mode == "ALWAYS":
            trace = await manager.capture_trace(timestamped_name(f"{name}_success"))
            attach_file(trace, "Trace")
    else:
        logger.info(f"⏭️ Test SKIPPED: {name}")


async def finish_session(item: Any, manager: BrowserManager) -> bool:
    """
    Capture evidence for the finished test, then tear its session down.

    Returns:
        True if teardown finished within its deadline
    """
    await capture_outcome(item, manager)
    logger.info(f"Tearing down test: {item.nodeid}")
    return await manager.teardown_with_deadline()


__all__ = [
    "phase_report_key",
    "record_phase_report",
    "outcome_report",
    "artifact_base_name",
    "capture_outcome",
    "finish_session",
]
