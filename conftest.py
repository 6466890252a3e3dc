"""
Repository-level pytest configuration.

Responsibilities:
  - Command-line options for the UI suite (browser engine, headed mode, slow-mo)
  - Logging setup from config/config.yaml
  - Run-boundary preparation of the artifact directories

Artifacts from a previous run are removed once per run, by the controller
process only, so results of parallel workers are never wiped mid-run.
"""

from __future__ import annotations

import os

from saucedemo_suite.ui_testing.framework.artifacts import prepare_artifact_dirs
from saucedemo_suite.ui_testing.framework.config_loader import ConfigLoader
from suite_tools.common import init_logger


def pytest_addoption(parser):
    group = parser.getgroup("saucedemo", "Swag Labs UI suite")
    group.addoption(
        "--run-ui",
        action="store_true",
        default=os.getenv("RUN_UI", "").lower() in ("1", "true", "yes"),
        help="Run live-site UI tests (needs installed browsers and network access)",
    )
    group.addoption(
        "--ui-browser",
        default=None,
        help="Browser engine for UI tests: chromium, firefox or webkit",
    )
    group.addoption(
        "--ui-headed",
        action="store_true",
        default=False,
        help="Run UI tests with a visible browser window",
    )
    group.addoption(
        "--ui-slowmo",
        type=int,
        default=None,
        help="Delay between browser actions in milliseconds",
    )


def pytest_sessionstart(session):
    config = ConfigLoader()
    init_logger(
        level=str(config.get("logging.level", "INFO")),
        log_file=config.get("logging.file", None),
    )

    # xdist workers carry `workerinput`; only the controller prepares directories
    if hasattr(session.config, "workerinput"):
        return

    prepare_artifact_dirs(
        root=config.get("artifacts.root", "test-results"),
        clean=config.get("artifacts.clean_on_start", True),
    )
