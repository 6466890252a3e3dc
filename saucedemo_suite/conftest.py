"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the suite markers, tags tests by directory and runs every async
test on the session event loop, so the Playwright driver started by one test
stays usable by the next.

Live-site UI tests are skipped unless `--run-ui` (or RUN_UI=1) is given.

================================================================================
"""

import pytest
import pytest_asyncio


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end purchase flows"
    )
    config.addinivalue_line(
        "markers", "ui: Live-site browser tests"
    )
    config.addinivalue_line(
        "markers", "unit: Fast tests without a browser"
    )

    # Feature markers
    for feature in ("login", "inventory", "product_details", "cart", "checkout", "navigation"):
        config.addinivalue_line(
            "markers", f"{feature}: Tests related to the {feature.replace('_', ' ')} flow"
        )


def pytest_collection_modifyitems(config, items):
    """
    Tag tests by directory, gate UI tests and pin async tests to the session loop.
    """
    run_ui = config.getoption("--run-ui")
    skip_ui = pytest.mark.skip(reason="UI tests need --run-ui (or RUN_UI=1)")
    session_loop = pytest.mark.asyncio(loop_scope="session")

    for item in items:
        parts = item.path.parts

        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)

        if pytest_asyncio.is_async_test(item):
            item.add_marker(session_loop, append=False)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Swag Labs UI Automation Suite",
        f"UI tests: {'enabled' if config.getoption('--run-ui') else 'skipped (use --run-ui)'}",
        "=" * 60,
        "",
    ]
