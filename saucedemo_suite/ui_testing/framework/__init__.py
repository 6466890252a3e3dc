"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based browser session lifecycle for the Swag Labs UI suite.

Components:
    - driver_handle: Process-wide Playwright driver
    - browser_manager: Per-worker session factory, teardown and artifact capture
    - engines: Engine-family launch arguments and teardown budgets
    - session_config: Validated session settings
    - artifacts: Screenshot / video / trace directory layout
    - page_base: Base page object
    - result_observer: Failure and success evidence for finished tests
    - config_loader: YAML + environment configuration

Author: Automation Team
License: MIT
================================================================================
"""

from .artifacts import ArtifactPaths, prepare_artifact_dirs, timestamped_name
from .browser_manager import BrowserManager, SessionStateError
from .config_loader import ConfigLoader, ConfigurationError
from .driver_handle import DriverHandle, get_driver_handle
from .engines import BrowserEngine
from .page_base import BasePage
from .session_config import SessionConfig

__all__ = [
    "ArtifactPaths",
    "BasePage",
    "BrowserEngine",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "DriverHandle",
    "SessionConfig",
    "SessionStateError",
    "get_driver_handle",
    "prepare_artifact_dirs",
    "timestamped_name",
]
