"""
================================================================================
Driver Handle
================================================================================

Process-wide owner of the Playwright driver.

The handle has two states, uninitialized and live. `initialize()` and
`shutdown()` are idempotent and serialized by a lock, so concurrent test
tasks can call them freely. The driver can be re-initialized after shutdown.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Callable, Optional

from loguru import logger
from playwright.async_api import Playwright, async_playwright


class DriverState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LIVE = "live"


class DriverHandle:
    """
    Lazily started, explicitly stopped Playwright driver.

    Usage:
        driver = DriverHandle()
        playwright = await driver.initialize()
        browser = await playwright.chromium.launch()
        ...
        await driver.shutdown()
    """

    def __init__(self, starter: Callable[[], Any] = async_playwright):
        """
        Args:
            starter: Factory returning an object with an async `start()`
                     (defaults to `async_playwright`).
        """
        self._starter = starter
        self._playwright: Optional[Playwright] = None
        self._state = DriverState.UNINITIALIZED
        self._lock = asyncio.Lock()

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def is_live(self) -> bool:
        return self._state is DriverState.LIVE

    @property
    def playwright(self) -> Optional[Playwright]:
        """Live Playwright instance, or None when uninitialized."""
        return self._playwright

    async def initialize(self) -> Playwright:
        """
        Start the driver if it is not live yet.

        Launch errors propagate to the caller and leave the handle
        uninitialized.

        Returns:
            The live Playwright instance
        """
        async with self._lock:
            if self._state is DriverState.LIVE:
                return self._playwright

            self._playwright = await self._starter().start()
            self._state = DriverState.LIVE
            logger.info("Playwright initialized")
            return self._playwright

    async def ensure_live(self) -> Playwright:
        """Alias of `initialize()` used by the session factory."""
        return await self.initialize()

    async def shutdown(self) -> None:
        """
        Stop the driver if it is live. Never raises.

        Failures are logged and the handle is reset to uninitialized either way,
        so a later `initialize()` starts a fresh driver.
        """
        async with self._lock:
            if self._state is DriverState.UNINITIALIZED:
                return

            playwright, self._playwright = self._playwright, None
            self._state = DriverState.UNINITIALIZED
            try:
                await playwright.stop()
                logger.info("Playwright closed")
            except Exception as e:
                logger.error(f"Failed to stop Playwright cleanly: {e}")


# Process-wide default handle shared by every session in this worker
_default_handle: Optional[DriverHandle] = None


def get_driver_handle() -> DriverHandle:
    """Return the process-wide driver handle, creating it on first use."""
    global _default_handle
    if _default_handle is None:
        _default_handle = DriverHandle()
    return _default_handle


__all__ = [
    "DriverHandle",
    "DriverState",
    "get_driver_handle",
]
