"""
================================================================================
Session Configuration
================================================================================

Validated per-session settings consumed by the browser session factory.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .config_loader import ConfigLoader
from .engines import BrowserEngine, resolve_engine


# Defaults match config/config.yaml
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_BASE_URL = "https://www.saucedemo.com"


def _mode_enabled(mode: Any) -> bool:
    """Artifact modes are strings like OFF / ON_FAILURE / ALWAYS; anything but OFF enables capture."""
    if isinstance(mode, bool):
        return mode
    return str(mode).strip().upper() not in ("OFF", "FALSE", "0", "")


@dataclass(frozen=True)
class SessionConfig:
    """
    Settings for one Browser -> Context -> Page chain.

    Attributes:
        engine: Engine family; unknown names fall back to chromium
        headless: Run without a visible window
        slow_mo: Delay between actions in milliseconds (>= 0)
        timeout: Default action timeout in milliseconds (> 0)
        record_video: Record a video per context
        record_trace: Start tracing when the context is created
        teardown_deadline: Seconds allowed for teardown; None uses the engine budget
    """

    engine: BrowserEngine = BrowserEngine.CHROMIUM
    headless: bool = True
    slow_mo: int = 0
    timeout: int = DEFAULT_TIMEOUT_MS
    record_video: bool = False
    record_trace: bool = False
    teardown_deadline: Optional[float] = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "engine", resolve_engine(self.engine))
        if isinstance(self.slow_mo, bool) or not isinstance(self.slow_mo, int):
            raise ValueError(f"slow_mo must be an integer, got {self.slow_mo!r}")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, int):
            raise ValueError(f"timeout must be an integer, got {self.timeout!r}")
        if self.slow_mo < 0:
            raise ValueError(f"slow_mo must be >= 0 ms, got {self.slow_mo}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0 ms, got {self.timeout}")
        if self.teardown_deadline is not None and self.teardown_deadline <= 0:
            raise ValueError(
                f"teardown_deadline must be > 0 s, got {self.teardown_deadline}"
            )

    def with_overrides(self, **changes: Any) -> "SessionConfig":
        """Return a copy with the given fields replaced (None values are ignored)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "SessionConfig":
        """Build a session config from the YAML/environment configuration."""
        config = config or ConfigLoader()
        deadline = config.get("teardown.deadline", None)
        return cls(
            engine=config.get("browser.name", BrowserEngine.CHROMIUM.value),
            headless=config.get("browser.headless", True),
            slow_mo=int(config.get("browser.slow_mo", 0)),
            timeout=int(config.get("browser.timeout", DEFAULT_TIMEOUT_MS)),
            record_video=_mode_enabled(config.get("artifacts.video_mode", "OFF")),
            record_trace=_mode_enabled(config.get("artifacts.trace_mode", "ON_FAILURE")),
            teardown_deadline=float(deadline) if deadline is not None else None,
        )


__all__ = [
    "SessionConfig",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_BASE_URL",
]
