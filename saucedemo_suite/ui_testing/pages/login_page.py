"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Swag Labs login screen: credential entry, error banner, accepted-user hints.

================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import allure
from playwright.async_api import Locator

from saucedemo_suite.ui_testing.framework.page_base import BasePage

if TYPE_CHECKING:
    from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/"

    @property
    def username_field(self) -> Locator:
        return self.page.locator("[data-test='username']")

    @property
    def password_field(self) -> Locator:
        return self.page.locator("[data-test='password']")

    @property
    def login_button(self) -> Locator:
        return self.page.locator("[data-test='login-button']")

    @property
    def error_message(self) -> Locator:
        return self.page.locator("[data-test='error']")

    @property
    def error_button(self) -> Locator:
        return self.page.locator(".error-button")

    @property
    def login_logo(self) -> Locator:
        return self.page.locator(".login_logo")

    @property
    def credentials_container(self) -> Locator:
        return self.page.locator("#login_credentials")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        await self.navigate()
        return self

    @allure.step("Enter username: {username}")
    async def enter_username(self, username: str) -> "LoginPage":
        await self.fill(self.username_field, username, "Username field")
        return self

    @allure.step("Enter password")
    async def enter_password(self, password: str) -> "LoginPage":
        await self.fill(self.password_field, password, "Password field")
        return self

    @allure.step("Click login button")
    async def click_login(self) -> "InventoryPage":
        from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage

        await self.click(self.login_button, "Login button")
        return await self._arrive(InventoryPage)

    @allure.step("Login as {username}")
    async def login(self, username: str, password: str) -> "InventoryPage":
        """Submit valid credentials and land on the inventory page."""
        await self.enter_username(username)
        await self.enter_password(password)
        return await self.click_login()

    @allure.step("Login with invalid credentials as {username}")
    async def login_with_invalid_credentials(self, username: str, password: str) -> "LoginPage":
        """Submit credentials expected to be rejected; stays on this page."""
        await self.enter_username(username)
        await self.enter_password(password)
        await self.click(self.login_button, "Login button")
        await self.wait_for_visible(self.error_message, "Error message")
        return self

    @allure.step("Get error message")
    async def get_error_message(self) -> str:
        if await self.is_visible(self.error_message, "Error message"):
            return await self.get_text(self.error_message, "Error message")
        return ""

    async def is_error_message_displayed(self) -> bool:
        return await self.is_visible(self.error_message, "Error message")

    @allure.step("Clear error message")
    async def clear_error_message(self) -> "LoginPage":
        if await self.is_visible(self.error_button, "Error close button"):
            await self.click(self.error_button, "Error close button")
        return self

    @allure.step("Check if login form is displayed")
    async def is_login_form_displayed(self) -> bool:
        return (
            await self.is_visible(self.username_field, "Username field")
            and await self.is_visible(self.password_field, "Password field")
            and await self.is_visible(self.login_button, "Login button")
        )

    async def get_login_logo_text(self) -> str:
        return await self.get_text(self.login_logo, "Login logo")

    async def get_accepted_usernames(self) -> str:
        return await self.get_text(self.credentials_container, "Credentials container")

    async def is_username_field_enabled(self) -> bool:
        return await self.is_enabled(self.username_field, "Username field")

    async def is_password_field_enabled(self) -> bool:
        return await self.is_enabled(self.password_field, "Password field")

    async def is_login_button_enabled(self) -> bool:
        return await self.is_enabled(self.login_button, "Login button")

    @allure.step("Clear login form")
    async def clear_form(self) -> "LoginPage":
        await self.fill(self.username_field, "", "Username field")
        await self.fill(self.password_field, "", "Password field")
        return self
