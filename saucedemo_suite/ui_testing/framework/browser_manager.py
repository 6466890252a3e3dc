"""
================================================================================
Browser Manager
================================================================================

Per-worker browser session lifecycle for UI tests.

Features:
    - Browser -> Context -> Page creation with precondition checks
    - Engine-aware launch options (see engines.py)
    - Fixed 1920x1080 viewport, optional video and trace recording
    - Failure-isolated teardown in reverse creation order
    - Deadline-bounded teardown that never hangs the run
    - Screenshot and trace capture that never fails a test

Each pytest worker owns one BrowserManager and at most one live session.
The Playwright driver itself is shared through the process-wide DriverHandle.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from loguru import logger
from playwright.async_api import Browser, BrowserContext, Page

from .artifacts import ArtifactPaths
from .driver_handle import DriverHandle, get_driver_handle
from .engines import build_launch_options, teardown_budget_for
from .session_config import SessionConfig


VIEWPORT = {"width": 1920, "height": 1080}


class SessionStateError(RuntimeError):
    """
    Raised when a session resource is used out of order.

    Attributes:
        resource: Name of the missing (or already existing) resource
    """

    def __init__(self, message: str, resource: Optional[str] = None):
        super().__init__(message)
        self.resource = resource

    @classmethod
    def missing(cls, resource: str, call_first: str) -> "SessionStateError":
        return cls(f"{resource} not initialized. Call {call_first} first.", resource)


class BrowserManager:
    """
    Owns the Browser, BrowserContext and Page of one test worker.

    Usage:
        manager = BrowserManager()
        page = await manager.create_session(SessionConfig(engine="firefox"))
        await page.goto("https://www.saucedemo.com")
        ...
        await manager.capture_screenshot("LoginTest_failure_20240101_120000")
        await manager.teardown_with_deadline()

        # Or scoped
        async with manager.session(config) as page:
            await page.goto("https://www.saucedemo.com")
    """

    def __init__(
        self,
        driver: Optional[DriverHandle] = None,
        artifacts: Optional[ArtifactPaths] = None,
        platform: Optional[str] = None,
    ):
        """
        Initialize browser manager.

        Args:
            driver: Driver handle to launch browsers from (process default if None)
            artifacts: Artifact directories for screenshots, videos and traces
            platform: Override of `sys.platform` for launch-argument selection
        """
        self.driver = driver or get_driver_handle()
        self.artifacts = artifacts or ArtifactPaths()
        self._platform = platform

        self._config: Optional[SessionConfig] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._tracing = False

    async def __aenter__(self) -> "BrowserManager":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.teardown_with_deadline()

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def config(self) -> Optional[SessionConfig]:
        """Configuration of the current session, if any."""
        return self._config

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser

    @property
    def context(self) -> Optional[BrowserContext]:
        return self._context

    @property
    def has_session(self) -> bool:
        """True while any session resource is held."""
        return any(r is not None for r in (self._browser, self._context, self._page))

    @property
    def tracing_active(self) -> bool:
        return self._tracing

    @property
    def default_timeout(self) -> Optional[int]:
        """Default action timeout (ms) applied to the current page."""
        if self._page is None or self._config is None:
            return None
        return self._config.timeout

    def current_page(self) -> Page:
        """
        Return the live page for this worker.

        Raises:
            SessionStateError: If no session has been created
        """
        if self._page is None:
            raise SessionStateError.missing("Page", "create_session()")
        return self._page

    # =========================================================================
    # Session Factory
    # =========================================================================

    async def create_session(self, config: Optional[SessionConfig] = None) -> Page:
        """
        Create a Browser -> Context -> Page chain for one test.

        The driver is started if needed. No navigation is performed.

        Args:
            config: Session settings (defaults to SessionConfig())

        Returns:
            The new Page, with its default timeout set

        Raises:
            SessionStateError: If this worker still holds a session
        """
        if self.has_session:
            raise SessionStateError(
                "A browser session is already active for this worker. "
                "Call teardown() before creating a new one.",
                "Page",
            )

        self._config = config or SessionConfig()
        try:
            await self.create_browser()
            await self.create_context()
            return await self.create_page()
        except BaseException:
            # Release whatever part of the chain was created, then re-raise
            await self.teardown()
            raise

    async def create_browser(self) -> Browser:
        """Launch the browser for the current session config."""
        if self._browser is not None:
            raise SessionStateError("Browser already created for this worker.", "Browser")

        config = self._config = self._config or SessionConfig()
        playwright = await self.driver.ensure_live()
        launcher = getattr(playwright, config.engine.value)
        options = build_launch_options(
            config.engine, config.headless, config.slow_mo, self._platform
        )

        self._browser = await launcher.launch(**options)
        logger.info(
            f"Browser {config.engine.value} created with headless: {config.headless} "
            f"(slow motion: {config.slow_mo}ms)"
        )
        return self._browser

    async def create_context(self) -> BrowserContext:
        """Create the browser context, starting video and trace capture if enabled."""
        if self._browser is None:
            raise SessionStateError.missing("Browser", "create_browser()")
        if self._context is not None:
            raise SessionStateError("Browser context already created for this worker.", "BrowserContext")

        config = self._config
        options = {"viewport": dict(VIEWPORT)}
        if config.record_video:
            options["record_video_dir"] = str(self.artifacts.videos_dir)
            options["record_video_size"] = dict(VIEWPORT)

        self._context = await self._browser.new_context(**options)

        if config.record_trace:
            await self._context.tracing.start(screenshots=True, snapshots=True, sources=True)
            self._tracing = True

        logger.info(
            f"Browser context created (video: {config.record_video}, trace: {config.record_trace})"
        )
        return self._context

    async def create_page(self) -> Page:
        """Open the page and apply the default action timeout."""
        if self._context is None:
            raise SessionStateError.missing("Browser context", "create_context()")
        if self._page is not None:
            raise SessionStateError("Page already created for this worker.", "Page")

        page = await self._context.new_page()
        page.set_default_timeout(self._config.timeout)
        self._page = page
        logger.info(f"Page created with timeout: {self._config.timeout}ms")
        return page

    @asynccontextmanager
    async def session(self, config: Optional[SessionConfig] = None) -> AsyncIterator[Page]:
        """Create a session for the duration of an `async with` block."""
        page = await self.create_session(config)
        try:
            yield page
        finally:
            await self.teardown_with_deadline()

    # =========================================================================
    # Teardown Sequencer
    # =========================================================================

    async def teardown(self) -> None:
        """
        Close Page, Context and Browser in that order.

        Each step is isolated: a failure is logged and the next step still runs.
        Never raises. A no-op when no session exists.

        Only the resources held when teardown starts are closed. If a close
        call outlives a deadline, the next session's state is left alone.
        """
        if not self.has_session:
            self._config = None
            logger.debug("No browser session to tear down")
            return

        config = self._config
        page, context, browser = self._page, self._context, self._browser

        await self._close_page(page)
        await self._close_context(context)
        await self._close_browser(browser)
        if self._config is config:
            self._config = None
        logger.info("Browser session closed")

    async def teardown_with_deadline(self, max_duration: Optional[float] = None) -> bool:
        """
        Run `teardown()` within a time budget.

        If the budget runs out, the worker's references are cleared anyway
        and the pending close calls are cancelled. The browser process may
        leak, but the next test can start.

        Args:
            max_duration: Budget in seconds. Defaults to the session's
                          configured deadline, then to the engine budget.

        Returns:
            True if teardown finished within the budget
        """
        if not self.has_session:
            return True

        budget = max_duration
        if budget is None and self._config is not None:
            budget = self._config.teardown_deadline
        if budget is None:
            budget = teardown_budget_for(self._config.engine if self._config else None)

        task = asyncio.ensure_future(self.teardown())
        done, _ = await asyncio.wait({task}, timeout=budget)
        if task in done:
            task.result()
            return True

        task.cancel()
        self._force_clear()
        logger.warning(
            f"Browser teardown did not finish within {budget:.1f}s; "
            f"references cleared, browser process may leak"
        )
        return False

    async def _close_page(self, page: Optional[Page]) -> None:
        if page is None:
            return
        try:
            await page.close()
            logger.info("Page closed")
        except Exception as e:
            logger.error(f"Failed to close page: {e}")
        finally:
            if self._page is page:
                self._page = None

    async def _close_context(self, context: Optional[BrowserContext]) -> None:
        if context is None:
            return
        try:
            if self._tracing and self._context is context:
                try:
                    await context.tracing.stop()
                except Exception as e:
                    logger.warning(f"Failed to stop tracing: {e}")
                finally:
                    if self._context is context:
                        self._tracing = False
            await context.close()
            logger.info("Browser context closed")
        except Exception as e:
            logger.error(f"Failed to close browser context: {e}")
        finally:
            if self._context is context:
                self._context = None

    async def _close_browser(self, browser: Optional[Browser]) -> None:
        if browser is None:
            return
        try:
            await browser.close()
            logger.info("Browser closed")
        except Exception as e:
            logger.error(f"Failed to close browser: {e}")
        finally:
            if self._browser is browser:
                self._browser = None

    def _force_clear(self) -> None:
        self._page = None
        self._context = None
        self._browser = None
        self._tracing = False
        self._config = None

    # =========================================================================
    # Artifact Capture
    # =========================================================================

    async def capture_screenshot(self, name: str) -> Optional[Path]:
        """
        Save a full-page PNG of the current page to `screenshots/<name>.png`.

        Never raises; returns None when nothing was captured.
        """
        page = self._page
        if page is None:
            logger.warning(f"No live page, screenshot '{name}' skipped")
            return None

        path = self.artifacts.screenshot_path(name)
        try:
            await page.screenshot(path=str(path), full_page=True)
        except Exception as e:
            logger.error(f"Failed to take screenshot '{name}': {e}")
            return None

        logger.info(f"Screenshot taken: {path}")
        return path

    async def capture_trace(self, name: str) -> Optional[Path]:
        """
        Stop the active trace and save it to `traces/<name>.zip`.

        Only does something when tracing was enabled for the session.
        Never raises; returns None when nothing was saved.
        """
        context = self._context
        if context is None or not self._tracing:
            logger.debug(f"Tracing not active, trace '{name}' skipped")
            return None

        path = self.artifacts.trace_path(name)
        try:
            await context.tracing.stop(path=str(path))
        except Exception as e:
            logger.error(f"Failed to save trace '{name}': {e}")
            return None
        finally:
            self._tracing = False

        logger.info(f"Trace saved: {path}")
        return path


__all__ = [
    "BrowserManager",
    "SessionStateError",
    "VIEWPORT",
]
