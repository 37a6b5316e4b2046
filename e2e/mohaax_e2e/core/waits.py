from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from playwright.sync_api import Error as PlaywrightError

from .exceptions import TimeoutExceeded
from .types import Locator

DEFAULT_INTERVAL_SEC = 0.2


@dataclass(frozen=True)
class Condition:
    description: str
    check: Callable[[Any], Any]


def element_to_be_clickable(locator: Locator) -> Condition:
    return Condition(
        description=f"element to be clickable: {locator}",
        check=lambda s: locator if s.is_clickable(locator) else None,
    )


def visibility_of_element_located(locator: Locator) -> Condition:
    return Condition(
        description=f"visibility of element located by {locator}",
        check=lambda s: locator if s.is_visible(locator) else None,
    )


def url_contains(fragment: str) -> Condition:
    def _check(s) -> Optional[str]:
        url = s.current_url or ""
        return url if fragment in url else None

    return Condition(description=f"url to contain {fragment!r}", check=_check)


def wait_until(session, condition: Condition, timeout_sec: float, interval_sec: float = DEFAULT_INTERVAL_SEC) -> Any:
    """
    Poll condition.check(session) until it returns something truthy and return that.
    Transient Playwright errors (detached node, navigation in flight) count as "not yet".
    """
    end = time.monotonic() + timeout_sec
    last_error: Optional[BaseException] = None
    while True:
        try:
            result = condition.check(session)
            if result:
                return result
        except PlaywrightError as e:
            last_error = e
        if time.monotonic() >= end:
            raise TimeoutExceeded(condition.description, timeout_sec, last_error)
        time.sleep(interval_sec)
