"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Page resolution from the worker's BrowserManager
    - Logged, Allure-stepped element interactions
    - Navigation and wait helpers

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional, Union

import allure
from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader
from .session_config import DEFAULT_BASE_URL


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"

            @property
            def username_field(self) -> Locator:
                return self.page.locator("[data-test='username']")

            async def enter_username(self, username: str) -> "LoginPage":
                await self.fill(self.username_field, username, "Username field")
                return self
    """

    # Override in subclasses. Every Swag Labs page shares the document title.
    URL_PATH: str = "/"
    PAGE_TITLE: str = "Swag Labs"

    def __init__(
        self,
        source: Union[Page, BrowserManager],
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            source: Playwright Page, or the BrowserManager owning the current page
            base_url: Base URL for the application (defaults to `ui.base_url`)

        Raises:
            SessionStateError: If a BrowserManager without a live page is given
        """
        if isinstance(source, BrowserManager):
            self.manager: Optional[BrowserManager] = source
            self.page = source.current_page()
        else:
            self.manager = None
            self.page = source

        if not base_url:
            base_url = ConfigLoader().get("ui.base_url", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")

    def _peer(self, page_cls):
        """Build another page object over the same page."""
        return page_cls(self.manager or self.page, self.base_url)

    async def _arrive(self, page_cls):
        """Build the page object reached by a navigation and wait for its URL."""
        target = self._peer(page_cls)
        if target.URL_PATH != "/":
            await self.page.wait_for_url(f"**{target.URL_PATH}*")
        return target

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.info(f"Navigated to: {self.url}")

    @allure.step("Wait for page to load")
    async def wait_for_page_load(self, state: str = "load") -> None:
        await self.page.wait_for_load_state(state)
        logger.info(f"Page loaded: {self.page.url}")

    @allure.step("Get page title")
    async def get_page_title(self) -> str:
        title = await self.page.title()
        logger.info(f"Page title: {title}")
        return title

    @allure.step("Get current URL")
    def get_current_url(self) -> str:
        url = self.page.url
        logger.info(f"Current URL: {url}")
        return url

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def click(self, locator: Locator, description: str) -> None:
        with allure.step(f"Click element: {description}"):
            await locator.click()
            logger.info(f"Clicked on: {description}")

    async def fill(self, locator: Locator, value: str, description: str) -> None:
        shown = "*" * len(value) if "password" in description.lower() else value
        with allure.step(f"Fill field '{description}' with value: {shown}"):
            await locator.fill(value)
            logger.info(f"Filled field '{description}' with value: {shown}")

    async def get_text(self, locator: Locator, description: str) -> str:
        text = (await locator.text_content()) or ""
        logger.info(f"Text from '{description}': {text}")
        return text

    async def is_visible(self, locator: Locator, description: str) -> bool:
        visible = await locator.is_visible()
        logger.debug(f"Element '{description}' visibility: {visible}")
        return visible

    async def is_enabled(self, locator: Locator, description: str) -> bool:
        enabled = await locator.is_enabled()
        logger.debug(f"Element '{description}' enabled: {enabled}")
        return enabled

    async def wait_for_visible(self, locator: Locator, description: str) -> None:
        with allure.step(f"Wait for element to be visible: {description}"):
            await locator.wait_for(state="visible")
            logger.info(f"Element '{description}' became visible")

    async def is_displayed_at(self, url_part: str, locator: Locator, description: str) -> bool:
        """
        Wait for the URL to contain `url_part` and the marker element to show up,
        then check the document title.
        """
        try:
            await self.page.wait_for_url(f"**/{url_part}*")
            await locator.wait_for(state="visible")
        except PlaywrightTimeoutError:
            logger.warning(f"Page '{url_part}' not displayed (current URL: {self.page.url})")
            return False

        title = await self.get_page_title()
        if title != self.PAGE_TITLE:
            logger.warning(f"Page '{url_part}' has title '{title}', expected '{self.PAGE_TITLE}'")
            return False

        logger.debug(f"Page '{url_part}' displayed with '{description}'")
        return True

    async def select_option(self, locator: Locator, value: str, description: str) -> None:
        with allure.step(f"Select option '{value}' from dropdown: {description}"):
            await locator.select_option(value)
            logger.info(f"Selected option '{value}' from dropdown '{description}'")

    async def get_attribute(self, locator: Locator, attribute: str, description: str) -> Optional[str]:
        value = await locator.get_attribute(attribute)
        logger.info(f"Attribute '{attribute}' from element '{description}': {value}")
        return value

    async def scroll_into_view(self, locator: Locator, description: str) -> None:
        await locator.scroll_into_view_if_needed()
        logger.debug(f"Scrolled element '{description}' into view")

    async def all_texts(self, locator: Locator, description: str) -> list[str]:
        texts = [t.strip() for t in await locator.all_text_contents()]
        logger.info(f"Texts from '{description}': {texts}")
        return texts

    @staticmethod
    def item_slug(name: str) -> str:
        """Swag Labs button ids use the lower-cased product name with dashes."""
        return name.lower().replace(" ", "-")


__all__ = [
    "BasePage",
]
