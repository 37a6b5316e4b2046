from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional
from urllib.parse import urlparse

from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    sync_playwright,
)

from .config import AppConfig, BrowserSettings
from .session import Session

logger = logging.getLogger(__name__)

HEADLESS_VIEWPORT = {"width": 1920, "height": 1080}
NAV_TIMEOUT_MS = 45000


@dataclass
class SessionBundle:
    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page
    session: Session
    trace_path: Optional[Path] = None


def _origin(url: str) -> str:
    p = urlparse(url)
    return f"{p.scheme}://{p.netloc}"


def _engine_and_channel(settings: BrowserSettings) -> tuple[str, Optional[str]]:
    if settings.name == "firefox":
        return "firefox", None
    if settings.name == "safari":
        return "webkit", None
    if settings.name == "edge":
        return "chromium", settings.channel or "msedge"
    return "chromium", settings.channel


def create_session(config: AppConfig, trace_path: Optional[Path] = None) -> SessionBundle:
    """
    One fresh browser + context per scenario, nothing shared across tests.
    Window is maximised when headed; headless gets a fixed desktop viewport.
    """
    settings = config.browser
    engine, channel = _engine_and_channel(settings)

    pw = sync_playwright().start()
    browser: Optional[Browser] = None
    context: Optional[BrowserContext] = None
    try:
        launch_kwargs: Dict[str, Any] = {"headless": settings.headless, "slow_mo": settings.slow_mo_ms}
        if channel:
            launch_kwargs["channel"] = channel
        if engine == "chromium" and not settings.headless:
            launch_kwargs["args"] = ["--start-maximized"]
        browser = getattr(pw, engine).launch(**launch_kwargs)

        context_kwargs: Dict[str, Any] = {}
        if engine == "chromium" and not settings.headless:
            context_kwargs["no_viewport"] = True
        else:
            context_kwargs["viewport"] = HEADLESS_VIEWPORT
        context = browser.new_context(**context_kwargs)

        context.set_default_timeout(int(config.wait_timeout_sec * 1000))
        context.set_default_navigation_timeout(NAV_TIMEOUT_MS)

        # clipboard paste scenario; other engines do not know these permission names
        if engine == "chromium":
            context.grant_permissions(["clipboard-read", "clipboard-write"], origin=_origin(config.base_url))

        if trace_path is not None:
            context.tracing.start(screenshots=True, snapshots=True, sources=True)

        page = context.new_page()
    except BaseException:
        _release(pw, browser, context)
        raise

    logger.info("browser session opened (%s, headless=%s)", settings.name, settings.headless)
    return SessionBundle(
        playwright=pw,
        browser=browser,
        context=context,
        page=page,
        session=Session(page),
        trace_path=trace_path,
    )


def _release(pw: Playwright, browser: Optional[Browser], context: Optional[BrowserContext]) -> None:
    if context is not None:
        try:
            context.close()
        except PlaywrightError as e:
            logger.warning("context close failed: %s", e)
    if browser is not None:
        try:
            browser.close()
        except PlaywrightError as e:
            logger.warning("browser close failed: %s", e)
    pw.stop()


def close_session(bundle: SessionBundle) -> None:
    if bundle.trace_path is not None:
        try:
            bundle.trace_path.parent.mkdir(parents=True, exist_ok=True)
            bundle.context.tracing.stop(path=str(bundle.trace_path))
        except PlaywrightError as e:
            logger.warning("trace not saved to %s: %s", bundle.trace_path, e)
    _release(bundle.playwright, bundle.browser, bundle.context)
    logger.info("browser session closed")


@contextmanager
def open_session(config: AppConfig, trace_path: Optional[Path] = None) -> Iterator[Session]:
    """Scoped session: released on every exit path, including failures and timeouts."""
    bundle = create_session(config, trace_path=trace_path)
    try:
        yield bundle.session
    finally:
        close_session(bundle)
