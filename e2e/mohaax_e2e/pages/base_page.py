from __future__ import annotations

import logging
from typing import Callable, TypeVar

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from mohaax_e2e.core.exceptions import NavigationTimeout, TimeoutExceeded
from mohaax_e2e.core.session import Session
from mohaax_e2e.core.types import Locator
from mohaax_e2e.core.waits import (
    element_to_be_clickable,
    url_contains,
    visibility_of_element_located,
    wait_until,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 10.0

T = TypeVar("T")


class BasePage:
    """
    Shared plumbing for page contracts: every interaction goes through the
    condition poller with the timeout fixed at construction.
    """

    def __init__(self, session: Session, timeout_sec: float = DEFAULT_TIMEOUT_SEC) -> None:
        self.session = session
        self.timeout_sec = timeout_sec

    def _wait_visible(self, locator: Locator) -> Locator:
        return wait_until(self.session, visibility_of_element_located(locator), self.timeout_sec)

    def _wait_clickable(self, locator: Locator) -> Locator:
        return wait_until(self.session, element_to_be_clickable(locator), self.timeout_sec)

    def _click(self, locator: Locator) -> None:
        self.session.click(self._wait_clickable(locator))

    def _text(self, locator: Locator) -> str:
        return self.session.text_of(self._wait_visible(locator))

    def _fill(self, locator: Locator, value: str) -> None:
        el = self._wait_visible(locator)
        self.session.clear(el)
        self.session.type_text(el, value)

    def _navigation(self, step: Callable[[], T]) -> T:
        try:
            return step()
        except TimeoutExceeded as e:
            if isinstance(e, NavigationTimeout):
                raise
            raise NavigationTimeout(e.description, e.timeout_sec, e.last_error) from e
        except PlaywrightTimeoutError as e:
            # page load or click outlived its own Playwright timeout
            raise NavigationTimeout("page navigation", self.timeout_sec, e) from e

    def wait_for_url_contains(self, fragment: str) -> str:
        return wait_until(self.session, url_contains(fragment), self.timeout_sec)

    @property
    def current_url(self) -> str:
        return self.session.current_url
