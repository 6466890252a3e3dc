"""
In-memory stand-ins for the Playwright objects the session manager drives.

They record calls into a shared journal so tests can check creation and
teardown order without launching a real browser.
"""

import asyncio
from pathlib import Path

import pytest

from saucedemo_suite.ui_testing.framework.artifacts import ArtifactPaths
from saucedemo_suite.ui_testing.framework.browser_manager import BrowserManager
from saucedemo_suite.ui_testing.framework.config_loader import ConfigLoader
from saucedemo_suite.ui_testing.framework.driver_handle import DriverHandle


async def _hang():
    await asyncio.Event().wait()


class FakeTracing:
    def __init__(self, journal):
        self.journal = journal
        self.start_options = None
        self.stop_paths = []

    async def start(self, **options):
        self.start_options = options
        self.journal.append("tracing.start")

    async def stop(self, path=None):
        self.stop_paths.append(path)
        self.journal.append("tracing.stop")
        if path:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            Path(path).write_bytes(b"PK\x03\x04")


class FakePage:
    def __init__(self, journal, close_error=None, hang_on_close=False):
        self.journal = journal
        self.close_error = close_error
        self.hang_on_close = hang_on_close
        self.screenshot_error = None
        self.timeouts = []
        self.closed = False

    def set_default_timeout(self, timeout):
        self.timeouts.append(timeout)

    async def goto(self, url):
        self.journal.append(f"page.goto {url}")

    async def screenshot(self, path, full_page=False):
        if self.screenshot_error:
            raise self.screenshot_error
        self.journal.append(f"page.screenshot full_page={full_page}")
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        Path(path).write_bytes(b"\x89PNG\r\n\x1a\n")

    async def close(self):
        self.journal.append("page.close")
        if self.hang_on_close:
            await _hang()
        if self.close_error:
            raise self.close_error
        self.closed = True


class FakeContext:
    def __init__(self, journal, options, page_kwargs):
        self.journal = journal
        self.options = options
        self.tracing = FakeTracing(journal)
        self.page_kwargs = page_kwargs
        self.pages = []
        self.close_error = None
        self.closed = False

    async def new_page(self):
        page = FakePage(self.journal, **self.page_kwargs)
        self.pages.append(page)
        self.journal.append("context.new_page")
        return page

    async def close(self):
        self.journal.append("context.close")
        if self.close_error:
            raise self.close_error
        self.closed = True


class FakeBrowser:
    def __init__(self, journal, engine, page_kwargs):
        self.journal = journal
        self.engine = engine
        self.page_kwargs = page_kwargs
        self.contexts = []
        self.closed = False

    async def new_context(self, **options):
        context = FakeContext(self.journal, options, self.page_kwargs)
        self.contexts.append(context)
        self.journal.append("browser.new_context")
        return context

    async def close(self):
        self.journal.append("browser.close")
        self.closed = True


class FakeBrowserType:
    def __init__(self, name, journal):
        self.name = name
        self.journal = journal
        self.launches = []
        self.browsers = []
        self.launch_error = None
        self.page_kwargs = {}

    async def launch(self, **options):
        self.launches.append(options)
        self.journal.append(f"{self.name}.launch")
        if self.launch_error:
            raise self.launch_error
        browser = FakeBrowser(self.journal, self.name, self.page_kwargs)
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, journal):
        self.journal = journal
        self.chromium = FakeBrowserType("chromium", journal)
        self.firefox = FakeBrowserType("firefox", journal)
        self.webkit = FakeBrowserType("webkit", journal)
        self.stop_error = None
        self.stops = 0

    def engine(self, name):
        return getattr(self, name)

    @property
    def last_page(self):
        for browser_type in (self.chromium, self.firefox, self.webkit):
            for browser in reversed(browser_type.browsers):
                for context in reversed(browser.contexts):
                    if context.pages:
                        return context.pages[-1]
        return None

    async def stop(self):
        self.stops += 1
        self.journal.append("playwright.stop")
        if self.stop_error:
            raise self.stop_error


class FakeStarter:
    """Mimics `async_playwright()`: an object with an async `start()`."""

    def __init__(self, playwright, delay=0.0):
        self.playwright = playwright
        self.delay = delay
        self.starts = 0
        self.start_error = None

    def __call__(self):
        return self

    async def start(self):
        self.starts += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.start_error:
            raise self.start_error
        return self.playwright


@pytest.fixture
def journal():
    return []


@pytest.fixture
def fake_playwright(journal):
    return FakePlaywright(journal)


@pytest.fixture
def starter(fake_playwright):
    return FakeStarter(fake_playwright)


@pytest.fixture
def driver(starter):
    return DriverHandle(starter=starter)


@pytest.fixture
def artifacts(tmp_path):
    return ArtifactPaths(tmp_path / "test-results").ensure()


@pytest.fixture
def manager(driver, artifacts):
    return BrowserManager(driver=driver, artifacts=artifacts, platform="linux")


@pytest.fixture
def fresh_config_loader():
    """Drop the ConfigLoader singleton before and after the test."""
    ConfigLoader.reset()
    yield ConfigLoader
    ConfigLoader.reset()
