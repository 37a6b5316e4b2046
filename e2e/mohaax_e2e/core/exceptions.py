from __future__ import annotations

from typing import Optional


class E2EError(Exception):
    """Base for every failure raised by the harness."""

    def __init__(self, message: str, label: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.label = label

    def __str__(self) -> str:
        if self.label:
            return f"[{self.label}] {self.message}"
        return self.message


class TimeoutExceeded(E2EError):
    """An expected UI state never appeared within the wait budget."""

    def __init__(self, description: str, timeout_sec: float, last_error: Optional[BaseException] = None) -> None:
        msg = f"Timed out after {timeout_sec:g}s waiting for {description}"
        if last_error is not None:
            msg += f" (last error: {last_error})"
        super().__init__(msg)
        self.description = description
        self.timeout_sec = timeout_sec
        self.last_error = last_error


class NavigationTimeout(TimeoutExceeded):
    """The entry flow of a page (open, click entry control, form shown) stalled."""


class AssertionMismatch(E2EError, AssertionError):
    def __init__(self, label: str, subject: str, expected: str, actual: str, mode: str) -> None:
        super().__init__(
            f"Failure in scenario: {label}. The {subject} is not as expected. "
            f"expected({mode})={expected!r} actual={actual!r}",
            label=label,
        )
        self.subject = subject
        self.expected = expected
        self.actual = actual
        self.mode = mode

    def __str__(self) -> str:
        # the label is already part of the message
        return self.message


class ConfigurationMissing(E2EError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Missing required configuration value: {key}")
        self.key = key


class BrowserFailure(E2EError):
    """A Playwright error that escaped the page contracts, re-raised with the scenario label."""
