"""
================================================================================
Browser Engine Profiles
================================================================================

Per-engine launch policy for the browser session factory.

Each engine family carries its own:
    - stability flags for headed runs on platforms with known issues (macOS)
    - teardown budget (seconds) used by the bounded teardown

Adding an engine means adding a row to the tables below.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from loguru import logger


class BrowserEngine(str, Enum):
    """Supported Playwright engine families. CHROMIUM is the primary engine."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


PRIMARY_ENGINE = BrowserEngine.CHROMIUM

# Platforms where headed browsers need extra flags to stay stable
HEADED_COMPAT_PLATFORMS = ("darwin",)

# Firefox and WebKit refuse to start on unknown switches.
HEADED_COMPAT_ARGS: Dict[BrowserEngine, Tuple[str, ...]] = {
    BrowserEngine.CHROMIUM: (
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--disable-web-security",
        "--disable-features=VizDisplayCompositor",
        "--disable-background-timer-throttling",
        "--disable-backgrounding-occluded-windows",
        "--disable-renderer-backgrounding",
        "--disable-field-trial-config",
        "--disable-ipc-flooding-protection",
        "--no-first-run",
        "--no-default-browser-check",
        "--disable-default-apps",
        "--disable-popup-blocking",
        "--disable-translate",
        "--disable-extensions",
        "--disable-sync",
        "--disable-background-mode",
    ),
    BrowserEngine.FIREFOX: (),
    BrowserEngine.WEBKIT: (),
}

# Teardown budgets in seconds. Firefox and WebKit are slower to close.
TEARDOWN_BUDGETS: Dict[BrowserEngine, float] = {
    BrowserEngine.CHROMIUM: 3.0,
    BrowserEngine.FIREFOX: 4.0,
    BrowserEngine.WEBKIT: 4.0,
}
DEFAULT_TEARDOWN_BUDGET = 5.0

# Headed Chromium on macOS runs more reliably on an installed Google Chrome
MAC_CHROME_PATH = Path("/Applications/Google Chrome.app/Contents/MacOS/Google Chrome")


def resolve_engine(name: Any) -> BrowserEngine:
    """
    Map an engine name to a BrowserEngine.

    Unknown or empty names fall back to the primary engine with a warning.
    """
    if isinstance(name, BrowserEngine):
        return name
    try:
        return BrowserEngine(str(name).strip().lower())
    except ValueError:
        logger.warning(
            f"Unknown browser engine '{name}', falling back to {PRIMARY_ENGINE.value}"
        )
        return PRIMARY_ENGINE


def needs_compat_args(headless: bool, platform: Optional[str] = None) -> bool:
    """Headed runs on a known-problematic platform need stability flags."""
    platform = platform or sys.platform
    return not headless and platform in HEADED_COMPAT_PLATFORMS


def launch_args_for(
    engine: BrowserEngine,
    headless: bool,
    platform: Optional[str] = None,
) -> list[str]:
    """Return the launch arguments for an engine family."""
    if not needs_compat_args(headless, platform):
        return []
    return list(HEADED_COMPAT_ARGS.get(engine, ()))


def build_launch_options(
    engine: BrowserEngine,
    headless: bool,
    slow_mo: int,
    platform: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build keyword arguments for `BrowserType.launch()`.

    Args:
        engine: Engine family being launched
        headless: Run without a visible window
        slow_mo: Delay between actions in milliseconds
        platform: Override of `sys.platform` (used by tests)

    Returns:
        Launch options dictionary
    """
    options: Dict[str, Any] = {"headless": headless, "slow_mo": slow_mo}

    args = launch_args_for(engine, headless, platform)
    if args:
        options["args"] = args
        logger.info(
            f"Applied {len(args)} compatibility arguments for headed {engine.value}"
        )

    if engine is BrowserEngine.CHROMIUM and needs_compat_args(headless, platform):
        if MAC_CHROME_PATH.exists():
            options["executable_path"] = str(MAC_CHROME_PATH)
            logger.info("Using installed Google Chrome for headed run on macOS")
        else:
            logger.warning(
                f"Google Chrome not found at {MAC_CHROME_PATH}. Falling back to Chromium."
            )

    return options


def teardown_budget_for(engine: Optional[BrowserEngine]) -> float:
    """Seconds allowed for a full teardown of a session on this engine."""
    if engine is None:
        return DEFAULT_TEARDOWN_BUDGET
    return min(TEARDOWN_BUDGETS.get(engine, DEFAULT_TEARDOWN_BUDGET), DEFAULT_TEARDOWN_BUDGET)


__all__ = [
    "BrowserEngine",
    "PRIMARY_ENGINE",
    "HEADED_COMPAT_ARGS",
    "TEARDOWN_BUDGETS",
    "DEFAULT_TEARDOWN_BUDGET",
    "resolve_engine",
    "launch_args_for",
    "build_launch_options",
    "teardown_budget_for",
]
