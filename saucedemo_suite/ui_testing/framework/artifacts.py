"""
================================================================================
Test Artifacts
================================================================================

Artifact directory layout and naming for screenshots, videos and traces.

    <root>/screenshots/<name>.png
    <root>/videos/<generated by Playwright>.webm
    <root>/traces/<name>.zip

Directories are created once at suite start. Cleaning up files from a
previous run is the run-boundary hook's job, not the session manager's.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Union

from loguru import logger


DEFAULT_ARTIFACTS_ROOT = Path("test-results")

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class ArtifactPaths:
    """Fixed artifact directories under a common root."""

    root: Path = DEFAULT_ARTIFACTS_ROOT

    @property
    def screenshots_dir(self) -> Path:
        return self.root / "screenshots"

    @property
    def videos_dir(self) -> Path:
        return self.root / "videos"

    @property
    def traces_dir(self) -> Path:
        return self.root / "traces"

    def screenshot_path(self, name: str) -> Path:
        return self.screenshots_dir / f"{name}.png"

    def trace_path(self, name: str) -> Path:
        return self.traces_dir / f"{name}.zip"

    def ensure(self) -> "ArtifactPaths":
        """Create all artifact directories."""
        for directory in (self.screenshots_dir, self.videos_dir, self.traces_dir):
            directory.mkdir(parents=True, exist_ok=True)
        return self


def safe_name(name: str) -> str:
    """Turn a test id into a file-name friendly string."""
    return _UNSAFE_CHARS.sub("_", name).strip("_") or "artifact"


def timestamped_name(base: str, when: datetime = None) -> str:
    """
    Build a unique-per-second artifact name.

    >>> timestamped_name("LoginTest.test_login", datetime(2024, 1, 2, 3, 4, 5))
    'LoginTest.test_login_20240102_030405'
    """
    when = when or datetime.now()
    return f"{safe_name(base)}_{when.strftime('%Y%m%d_%H%M%S')}"


def prepare_artifact_dirs(
    root: Union[str, Path] = DEFAULT_ARTIFACTS_ROOT,
    clean: bool = False,
) -> ArtifactPaths:
    """
    Create the artifact directories at suite start.

    Args:
        root: Artifacts root directory
        clean: Delete screenshots and traces left over from a previous run

    Returns:
        The prepared ArtifactPaths
    """
    paths = ArtifactPaths(Path(root)).ensure()

    if clean:
        removed = 0
        for directory, pattern in (
            (paths.screenshots_dir, "*.png"),
            (paths.traces_dir, "*.zip"),
        ):
            for stale in directory.glob(pattern):
                try:
                    stale.unlink()
                    removed += 1
                except OSError as e:
                    logger.debug(f"Could not delete {stale.name}: {e}")
        logger.info(f"Deleted {removed} artifacts from previous run")

    logger.info(f"Test result directories ready under: {paths.root}")
    return paths


__all__ = [
    "ArtifactPaths",
    "DEFAULT_ARTIFACTS_ROOT",
    "prepare_artifact_dirs",
    "safe_name",
    "timestamped_name",
]
