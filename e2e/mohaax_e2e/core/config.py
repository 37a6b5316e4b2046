from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .exceptions import ConfigurationMissing

BROWSERS = ("chrome", "firefox", "edge", "safari")


def _truthy(v: Optional[str]) -> bool:
    return (v or "").strip().lower() in ("1", "true", "yes", "y", "on")


class EnvSource:
    """Read-only view over the process environment (after load_dotenv)."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> str:
        v = self._environ.get(key)
        if v is None or not v.strip():
            raise ConfigurationMissing(key)
        return v

    def get_optional(self, key: str, default: Optional[str] = None) -> Optional[str]:
        v = self._environ.get(key)
        if v is None or not v.strip():
            return default
        return v

    def has(self, key: str) -> bool:
        return self.get_optional(key) is not None


@dataclass(frozen=True)
class BrowserSettings:
    name: str = "chrome"
    headless: bool = False
    channel: Optional[str] = None
    slow_mo_ms: int = 0
    trace: bool = False

    @classmethod
    def from_env(cls, source: EnvSource) -> "BrowserSettings":
        name = (source.get_optional("BROWSER", "chrome") or "chrome").lower()
        if name not in BROWSERS:
            raise ValueError(f"BROWSER must be one of {BROWSERS}, got {name!r}")

        is_ci = _truthy(source.get_optional("CI"))
        headless_raw = source.get_optional("PW_HEADLESS")
        headless = _truthy(headless_raw) if headless_raw is not None else is_ci

        return cls(
            name=name,
            headless=headless,
            channel=source.get_optional("PW_CHANNEL"),
            slow_mo_ms=int(source.get_optional("PW_SLOWMO_MS", "0")),
            trace=_truthy(source.get_optional("PW_TRACE")),
        )


@dataclass(frozen=True)
class AppConfig:
    """Everything a run needs, resolved once and passed down explicitly."""

    base_url: str
    app_username: str
    app_password: str
    username_not_verified: str
    password_not_verified: str
    email_registered: str
    register_path: str
    recover_password_path: str
    wait_timeout_sec: float = 10.0
    artifact_dir: Path = Path("artifacts")
    browser: BrowserSettings = field(default_factory=BrowserSettings)

    @classmethod
    def from_env(cls, source: Optional[EnvSource] = None) -> "AppConfig":
        src = source or EnvSource()
        return cls(
            base_url=src.get("BASE_URL"),
            app_username=src.get("APP_USERNAME"),
            app_password=src.get("APP_PASSWORD"),
            username_not_verified=src.get("USERNAME_NOT_VERIFIED"),
            password_not_verified=src.get("PASSWORD_NOT_VERIFIED"),
            email_registered=src.get("EMAIL_REGISTERED"),
            register_path=src.get("REGISTER_PATH"),
            recover_password_path=src.get("RECOVER_PASSWORD_PATH"),
            wait_timeout_sec=float(src.get_optional("WAIT_TIMEOUT_SEC", "10")),
            artifact_dir=Path(src.get_optional("ARTIFACT_DIR", "artifacts")),
            browser=BrowserSettings.from_env(src),
        )
