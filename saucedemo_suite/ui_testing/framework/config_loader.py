"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - Base YAML configuration (config/config.yaml)
    - Optional environment overlay (config/{ENV}.yaml), deep-merged
    - Environment variable override (BROWSER_NAME overrides browser.name)
    - Dot notation path access with typed defaults

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path (repository root /config)
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (BROWSER_HEADLESS)
        2. Environment overlay file (config/staging.yaml when ENV=staging)
        3. Base YAML configuration file
        4. Default values passed to get()

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "https://www.saucedemo.com")
        'https://www.saucedemo.com'

        >>> config.get("browser.timeout", 30000)
        30000

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - browser.name -> BROWSER_NAME
        - artifacts.trace_mode -> ARTIFACTS_TRACE_MODE
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton - configuration is loaded once per worker process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load the base configuration and merge the environment overlay."""
        self._config = self._read_yaml(self._config_path)
        if not self._config and not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )

        env = os.getenv("ENVIRONMENT", os.getenv("ENV"))
        if env:
            overlay_path = self._config_path.with_name(f"{env}.yaml")
            overlay = self._read_yaml(overlay_path)
            if overlay:
                self._config = _deep_merge(self._config, overlay)
                logger.debug(f"Merged environment config: {overlay_path}")

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file {path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping at top level"
            )
        logger.debug(f"Loaded configuration from: {path}")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "browser.name")
            default: Default value if key not found. Its type is also used
                     to convert environment variable strings.

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Args:
            section: Section name (e.g., "browser", "artifacts")

        Returns:
            Copy of the section dictionary, or empty dict if not found
        """
        return dict(self._config.get(section, {}) or {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
]
