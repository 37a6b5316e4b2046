from __future__ import annotations

import logging
from typing import Optional

from playwright.sync_api import Locator as PWLocator, Page

from .text import normalize_text
from .types import Locator

logger = logging.getLogger(__name__)

# is_enabled() auto-waits for the element; keep it short so a poll never blocks
_PROBE_TIMEOUT_MS = 500


class Session:
    """
    The browser capability set the pages rely on.
    Every element operation takes a Locator and acts on its first match.
    """

    def __init__(self, page: Page) -> None:
        self.page = page

    def _el(self, locator: Locator) -> PWLocator:
        return self.page.locator(locator.to_playwright()).first

    # --- navigation ---

    def open(self, url: str) -> None:
        logger.debug("open %s", url)
        self.page.goto(url, wait_until="domcontentloaded")

    @property
    def current_url(self) -> str:
        return self.page.url

    # --- observation (never mutates the page) ---

    def is_visible(self, locator: Locator) -> bool:
        return self._el(locator).is_visible()

    def is_clickable(self, locator: Locator) -> bool:
        el = self._el(locator)
        return el.is_visible() and el.is_enabled(timeout=_PROBE_TIMEOUT_MS)

    def text_of(self, locator: Locator) -> str:
        return normalize_text(self._el(locator).inner_text())

    def attribute_of(self, locator: Locator, name: str) -> Optional[str]:
        return self._el(locator).get_attribute(name)

    def value_of(self, locator: Locator) -> str:
        # live value of an input, not its HTML attribute
        return self._el(locator).input_value()

    def validation_message_of(self, locator: Locator) -> str:
        return self._el(locator).evaluate("el => el.validationMessage") or ""

    # --- interaction ---

    def click(self, locator: Locator) -> None:
        logger.debug("click %s", locator)
        self._el(locator).click()

    def clear(self, locator: Locator) -> None:
        self._el(locator).clear()

    def type_text(self, locator: Locator, text: str) -> None:
        if text:
            self._el(locator).press_sequentially(text)

    def press(self, locator: Locator, keys: str) -> None:
        logger.debug("press %s on %s", keys, locator)
        self._el(locator).press(keys)

    def write_clipboard(self, text: str) -> None:
        """Needs clipboard-write permission on the context (granted for chromium)."""
        self.page.evaluate("text => navigator.clipboard.writeText(text)", text)
