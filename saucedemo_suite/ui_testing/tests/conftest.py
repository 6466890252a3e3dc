"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for the live Swag Labs tests.

Key Features:
- One Playwright driver per worker, shut down at the end of the session
- A fresh Browser -> Context -> Page per test, torn down within a deadline
- Screenshot and trace capture on failure, before teardown starts
- Page Object fixtures and shared test data

================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import Page

from saucedemo_suite.ui_testing.framework.artifacts import ArtifactPaths
from saucedemo_suite.ui_testing.framework.browser_manager import BrowserManager
from saucedemo_suite.ui_testing.framework.config_loader import ConfigLoader
from saucedemo_suite.ui_testing.framework.driver_handle import DriverHandle, get_driver_handle
from saucedemo_suite.ui_testing.framework.result_observer import finish_session, record_phase_report
from saucedemo_suite.ui_testing.framework.session_config import DEFAULT_BASE_URL, SessionConfig
from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage
from saucedemo_suite.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_config(pytestconfig) -> SessionConfig:
    """Session settings from config/config.yaml, overridden by command-line options."""
    config = SessionConfig.from_config(ConfigLoader())
    return config.with_overrides(
        engine=pytestconfig.getoption("--ui-browser"),
        headless=False if pytestconfig.getoption("--ui-headed") else None,
        slow_mo=pytestconfig.getoption("--ui-slowmo"),
    )


@pytest.fixture(scope="session")
def base_url() -> str:
    return ConfigLoader().get("ui.base_url", DEFAULT_BASE_URL)


@pytest.fixture(scope="session")
def artifact_paths() -> ArtifactPaths:
    return ArtifactPaths(Path(ConfigLoader().get("artifacts.root", "test-results"))).ensure()


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
async def driver_handle() -> AsyncGenerator[DriverHandle, None]:
    """
    Session-scoped Playwright driver.

    Started once per worker and stopped after the last test.
    """
    handle = get_driver_handle()
    await handle.initialize()
    yield handle
    await handle.shutdown()


@pytest.fixture
async def browser_manager(
    request: pytest.FixtureRequest,
    driver_handle: DriverHandle,
    ui_config: SessionConfig,
    artifact_paths: ArtifactPaths,
    base_url: str,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser session, opened on the base URL.

    After the test, evidence is captured according to the outcome and the
    session is torn down within the engine's deadline.
    """
    manager = BrowserManager(driver=driver_handle, artifacts=artifact_paths)
    logger.info(f"Starting test: {request.node.nodeid}")
    page = await manager.create_session(ui_config)
    try:
        await page.goto(base_url)
        logger.info(f"Navigated to: {base_url}")
    except Exception:
        await manager.teardown_with_deadline()
        raise

    yield manager

    await finish_session(request.node, manager)


@pytest.fixture
def page(browser_manager: BrowserManager) -> Page:
    """Current page of the test's browser session."""
    return browser_manager.current_page()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(browser_manager: BrowserManager, base_url: str) -> LoginPage:
    return LoginPage(browser_manager, base_url)


@pytest.fixture
async def inventory_page(login_page: LoginPage, test_data) -> InventoryPage:
    """Inventory page after logging in as the standard user."""
    user = test_data["standard_user"]
    inventory = await login_page.login(user["username"], user["password"])
    assert await inventory.is_inventory_page_loaded(), "Login as standard user failed"
    return inventory


# ================================================================================
# Test Result Observer
# ================================================================================

@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase report on the item so fixtures can see the outcome."""
    outcome = yield
    record_phase_report(item, outcome.get_result())


# ================================================================================
# Test Data
# ================================================================================

@pytest.fixture(scope="session")
def test_data():
    """Accounts, products and checkout details published by the demo site."""
    return {
        "standard_user": {"username": "standard_user", "password": "secret_sauce"},
        "locked_out_user": {"username": "locked_out_user", "password": "secret_sauce"},
        "problem_user": {"username": "problem_user", "password": "secret_sauce"},
        "performance_glitch_user": {"username": "performance_glitch_user", "password": "secret_sauce"},
        "products": [
            "Sauce Labs Backpack",
            "Sauce Labs Bike Light",
            "Sauce Labs Bolt T-Shirt",
            "Sauce Labs Fleece Jacket",
            "Sauce Labs Onesie",
            "Test.allTheThings() T-Shirt (Red)",
        ],
        "checkout": {"first_name": "John", "last_name": "Doe", "postal_code": "12345"},
    }
