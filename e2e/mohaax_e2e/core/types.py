from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import ClassVar, Literal, Mapping, Optional

logger = logging.getLogger(__name__)

TableKind = Literal["login_invalid", "signup_valid", "signup_invalid"]
Strategy = Literal["xpath", "id", "css"]


@dataclass(frozen=True)
class Locator:
    strategy: Strategy
    selector: str

    def to_playwright(self) -> str:
        if self.strategy == "xpath":
            return f"xpath={self.selector}"
        if self.strategy == "id":
            return f"id={self.selector}"
        return self.selector

    def __str__(self) -> str:
        return f"{self.strategy}:{self.selector}"


class OutcomeSelector(str, Enum):
    """
    Which SignUp query a negative registration row checks.
    UNMATCHED is what an unknown key in scenario data resolves to.
    """

    USERNAME_ERROR = "get_username_error_message_text"
    EMAIL_ERROR = "get_email_error_message_text"
    PASSWORD_MISMATCH = "get_password_mismatch_error_text"
    USERNAME_EXISTS = "get_username_exists_message_text"
    EMAIL_EXISTS = "get_email_exists_message_text"
    VOLUTE_EMPTY = "get_volute_empty_field_message_text"
    SERVER_INTERNAL_ERROR = "get_server_internal_error_message_text"
    ALL_FIELDS_REQUIRED = "get_all_fields_required_message_text"
    UNMATCHED = "unmatched"

    @classmethod
    def parse(cls, key: str) -> "OutcomeSelector":
        k = (key or "").strip()
        for member in cls:
            if member is not cls.UNMATCHED and member.value == k:
                return member
        # kept on purpose; pending product-owner review
        logger.warning("Unknown outcome selector %r, falling back to %s", key, cls.UNMATCHED.name)
        return cls.UNMATCHED


def _render(value: str, values: Mapping[str, str]) -> str:
    return value.format_map(values)


@dataclass(frozen=True)
class LoginRow:
    kind: ClassVar[TableKind] = "login_invalid"

    label: str
    username: str
    password: str
    expected: str

    def render(self, values: Mapping[str, str]) -> "LoginRow":
        return replace(
            self,
            username=_render(self.username, values),
            password=_render(self.password, values),
        )


@dataclass(frozen=True)
class RegistrationRow:
    label: str
    username: str
    email: str
    volute: str
    password: str
    repeat_password: str
    expected: str
    outcome: Optional[OutcomeSelector] = None

    @property
    def kind(self) -> TableKind:
        return "signup_valid" if self.outcome is None else "signup_invalid"

    def render(self, values: Mapping[str, str]) -> "RegistrationRow":
        inputs = ("username", "email", "volute", "password", "repeat_password")
        return replace(self, **{name: _render(getattr(self, name), values) for name in inputs})


def template_fields(row) -> dict[str, str]:
    """Input fields of a row that may hold {placeholders}."""
    skip = {"label", "expected", "outcome"}
    return {f.name: getattr(row, f.name) for f in fields(row) if f.name not in skip}


@dataclass(frozen=True)
class ScenarioOutcome:
    label: str
    subject: str
    expected: str
    actual: str
    mode: str
