"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers for UI test evidence and a small post-run processor.

Features:
- Screenshot / trace / text attachments that never fail the test
- Error details attachment for failed tests
- Result summary and HTML report generation for the runner

================================================================================
"""

import json
import subprocess
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

_FILE_TYPES = {
    ".png": allure.attachment_type.PNG,
    ".webm": allure.attachment_type.WEBM,
    ".zip": None,
}


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_file(path: Optional[Union[str, Path]], name: str) -> bool:
    """
    Attach an artifact file (screenshot, trace, video) to the Allure report.

    Missing files and attach errors are logged, never raised.

    Args:
        path: File to attach; None is ignored
        name: Attachment name

    Returns:
        True if the file was attached
    """
    if path is None:
        return False

    path = Path(path)
    if not path.exists():
        logger.warning(f"Artifact not found, nothing to attach: {path}")
        return False

    try:
        attachment_type = _FILE_TYPES.get(path.suffix.lower())
        if attachment_type is None:
            allure.attach.file(str(path), name=name, extension=path.suffix.lstrip("."))
        else:
            allure.attach.file(str(path), name=name, attachment_type=attachment_type)
        logger.info(f"Attached to Allure report: {path.name}")
        return True
    except Exception as e:
        logger.error(f"Failed to attach {path} to Allure: {e}")
        return False


def format_error_details(test_name: str, error: Union[BaseException, str]) -> str:
    """Render test name, error message and traceback as plain text."""
    if isinstance(error, BaseException):
        message = str(error)
        stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    else:
        message = error.strip().splitlines()[-1] if error.strip() else ""
        stack = error
    return f"Test: {test_name}\nError: {message}\nStack Trace:\n{stack}"


def attach_error_details(test_name: str, error: Union[BaseException, str]) -> None:
    """
    Attach failure details for a test.

    Args:
        test_name: Test identifier
        error: The exception raised by the test, or pytest's failure text
    """
    attach_text(format_error_details(test_name, error), name="Error Details")


# ================================================================================
# Report Processing
# ================================================================================

@dataclass
class TestResultSummary:
    """Summary of test execution results."""
    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    broken: int = 0
    skipped: int = 0
    unknown: int = 0
    duration_ms: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def pass_rate(self) -> float:
        """Calculate pass rate percentage."""
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "broken": self.broken,
            "skipped": self.skipped,
            "unknown": self.unknown,
            "pass_rate": f"{self.pass_rate:.2f}%",
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp,
        }


class AllureReportProcessor:
    """Reads allure-results and renders the HTML report."""

    def __init__(self, results_dir: Path, report_dir: Optional[Path] = None):
        self.results_dir = Path(results_dir)
        self.report_dir = Path(report_dir or self.results_dir.parent / "allure-report")

    def parse_results(self) -> List[Dict[str, Any]]:
        """Load every `*-result.json` file; unreadable files are skipped."""
        results = []
        for result_file in self.results_dir.glob("*-result.json"):
            try:
                with open(result_file, encoding="utf-8") as f:
                    results.append(json.load(f))
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to parse {result_file}: {e}")
        return results

    def generate_summary(self) -> TestResultSummary:
        summary = TestResultSummary()
        for result in self.parse_results():
            summary.total += 1
            status = result.get("status", "unknown")
            if status in ("passed", "failed", "broken", "skipped"):
                setattr(summary, status, getattr(summary, status) + 1)
            else:
                summary.unknown += 1
            summary.duration_ms += result.get("stop", 0) - result.get("start", 0)
        return summary

    def generate_report(self) -> bool:
        """
        Generate Allure HTML report.

        Returns:
            True if successful
        """
        cmd = [
            "allure", "generate",
            str(self.results_dir),
            "-o", str(self.report_dir),
            "--clean",
        ]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Please install Allure to generate reports.")
            return False

        if result.returncode != 0:
            logger.error(f"Report generation failed: {result.stderr}")
            return False

        logger.info(f"Report generated at {self.report_dir}")
        return True

    def log_summary(self) -> TestResultSummary:
        summary = self.generate_summary()
        logger.info(
            f"Total: {summary.total} | Passed: {summary.passed} | Failed: {summary.failed} | "
            f"Broken: {summary.broken} | Skipped: {summary.skipped} | "
            f"Pass rate: {summary.pass_rate:.2f}% | Duration: {summary.duration_ms / 1000:.2f}s"
        )
        return summary


__all__ = [
    "AllureReportProcessor",
    "TestResultSummary",
    "attach_error_details",
    "attach_file",
    "attach_text",
    "format_error_details",
]
