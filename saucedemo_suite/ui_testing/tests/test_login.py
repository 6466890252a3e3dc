"""
================================================================================
Login Feature UI Tests (Async / Playwright)
================================================================================

Covers the Swag Labs login form:
  - Valid logins for every published account that is allowed in
  - Rejected logins (wrong password, locked out user, empty fields)
  - Error message handling and form state

================================================================================
"""

import allure
import pytest

from saucedemo_suite.ui_testing.pages.login_page import LoginPage


INVALID_CREDENTIALS = "Username and password do not match"


@allure.epic("UI Testing")
@allure.feature("Authentication")
@pytest.mark.login
class TestLogin:
    """Login UI test suite (async)."""

    @allure.story("User Authentication")
    @allure.title("Login succeeds with valid credentials")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_login_success(self, login_page: LoginPage, test_data):
        """Verify a standard user reaches the inventory page."""
        user = test_data["standard_user"]

        with allure.step("Verify login page"):
            assert await login_page.is_login_form_displayed(), "Login form should be displayed"
            assert await login_page.get_login_logo_text() == "Swag Labs"

        with allure.step("Login"):
            inventory = await login_page.login(user["username"], user["password"])

        with allure.step("Verify inventory page loaded"):
            assert await inventory.is_inventory_page_loaded(), "Inventory page should be loaded"
            assert await inventory.get_app_logo_text() == "Swag Labs"

    @allure.story("User Authentication")
    @allure.title("Login fails with invalid password")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_login_invalid_password(self, login_page: LoginPage):
        await login_page.login_with_invalid_credentials("standard_user", "invalid_password")

        assert await login_page.is_error_message_displayed(), "Error message should be displayed"
        assert INVALID_CREDENTIALS in await login_page.get_error_message()
        assert await login_page.is_login_form_displayed(), "User should remain on login page"

    @allure.story("User Authentication")
    @allure.title("Locked out user cannot login")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_login_locked_out_user(self, login_page: LoginPage, test_data):
        user = test_data["locked_out_user"]

        await login_page.login_with_invalid_credentials(user["username"], user["password"])

        assert "Sorry, this user has been locked out" in await login_page.get_error_message()

    @allure.story("Form Validation")
    @allure.title("Login fails with empty fields: {expected_error}")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username, password, expected_error",
        [
            ("", "secret_sauce", "Username is required"),
            ("standard_user", "", "Password is required"),
            ("", "", "Username is required"),
        ],
    )
    async def test_login_empty_fields(self, login_page: LoginPage, username, password, expected_error):
        await login_page.login_with_invalid_credentials(username, password)

        assert await login_page.is_error_message_displayed(), "Error message should be displayed"
        assert expected_error in await login_page.get_error_message()

    @allure.story("User Authentication")
    @allure.title("Login fails for unknown username: {username}")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression
    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["invalid_user", "test_user", "admin", "user123"])
    async def test_login_unknown_usernames(self, login_page: LoginPage, username):
        await login_page.login_with_invalid_credentials(username, "secret_sauce")

        assert INVALID_CREDENTIALS in await login_page.get_error_message()

    @allure.story("Form Validation")
    @allure.title("Error message can be dismissed")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_clear_error_message(self, login_page: LoginPage):
        await login_page.login_with_invalid_credentials("invalid_user", "invalid_password")
        assert await login_page.is_error_message_displayed()

        await login_page.clear_error_message()

        assert not await login_page.is_error_message_displayed(), "Error message should be cleared"

    @allure.story("Form Validation")
    @allure.title("Login form fields are enabled")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_form_fields_enabled(self, login_page: LoginPage):
        assert await login_page.is_username_field_enabled()
        assert await login_page.is_password_field_enabled()
        assert await login_page.is_login_button_enabled()

    @allure.story("User Authentication")
    @allure.title("Special account can login: {account}")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    @pytest.mark.parametrize("account", ["problem_user", "performance_glitch_user"])
    async def test_login_special_accounts(self, login_page: LoginPage, test_data, account):
        user = test_data[account]

        inventory = await login_page.login(user["username"], user["password"])

        assert await inventory.is_inventory_page_loaded(), f"{account} should reach inventory"

    @allure.story("Login Page Content")
    @allure.title("Accepted usernames are listed on the login page")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.asyncio
    async def test_accepted_usernames_displayed(self, login_page: LoginPage):
        usernames = await login_page.get_accepted_usernames()

        for account in ("standard_user", "locked_out_user", "problem_user", "performance_glitch_user"):
            assert account in usernames

    @allure.story("Form Validation")
    @allure.title("Form can be cleared after typing")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.asyncio
    async def test_clear_form(self, login_page: LoginPage):
        await login_page.enter_username("standard_user")
        await login_page.enter_password("secret_sauce")

        await login_page.clear_form()

        assert await login_page.username_field.input_value() == ""
        assert await login_page.password_field.input_value() == ""

    @allure.story("Login Page Content")
    @allure.title("Login page opens on the base URL with the site title")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_open_login_page(self, login_page: LoginPage):
        await login_page.open()

        assert login_page.get_current_url().rstrip("/") == login_page.base_url
        assert await login_page.get_page_title() == login_page.PAGE_TITLE
        assert await login_page.is_login_form_displayed()
