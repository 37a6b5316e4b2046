from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from mohaax_e2e.core.exceptions import AssertionMismatch
from mohaax_e2e.core.types import OutcomeSelector, ScenarioOutcome
from mohaax_e2e.pages.signup_page import SignUpPage


class MatchMode(str, Enum):
    EXACT = "exact"
    CONTAINS = "contains"


def verify(actual: str, expected: str, mode: MatchMode, label: str, subject: str) -> ScenarioOutcome:
    actual = actual or ""
    ok = actual == expected if mode is MatchMode.EXACT else expected in actual
    if not ok:
        raise AssertionMismatch(label, subject, expected, actual, mode.value)
    return ScenarioOutcome(label=label, subject=subject, expected=expected, actual=actual, mode=mode.value)


OutcomeQuery = Callable[[SignUpPage], str]

# UNMATCHED keeps the catch-all "all fields are required" check of the
# legacy suite. Whether that is intended or hides typos in scenario data is
# still open with the product owner.
DEFAULT_OUTCOME_QUERY: OutcomeQuery = SignUpPage.get_all_fields_required_message_text

OUTCOME_QUERIES: Dict[OutcomeSelector, OutcomeQuery] = {
    OutcomeSelector.USERNAME_ERROR: SignUpPage.get_username_error_message_text,
    OutcomeSelector.EMAIL_ERROR: SignUpPage.get_email_error_message_text,
    OutcomeSelector.PASSWORD_MISMATCH: SignUpPage.get_password_mismatch_error_text,
    OutcomeSelector.USERNAME_EXISTS: SignUpPage.get_username_exists_message_text,
    OutcomeSelector.EMAIL_EXISTS: SignUpPage.get_email_exists_message_text,
    OutcomeSelector.VOLUTE_EMPTY: SignUpPage.get_volute_empty_field_message_text,
    OutcomeSelector.SERVER_INTERNAL_ERROR: SignUpPage.get_server_internal_error_message_text,
    OutcomeSelector.ALL_FIELDS_REQUIRED: SignUpPage.get_all_fields_required_message_text,
    OutcomeSelector.UNMATCHED: DEFAULT_OUTCOME_QUERY,
}

_unmapped = set(OutcomeSelector) - set(OUTCOME_QUERIES)
if _unmapped:
    raise RuntimeError(f"Outcome selectors without a query: {sorted(s.name for s in _unmapped)}")


def resolve_outcome_query(selector: OutcomeSelector) -> OutcomeQuery:
    return OUTCOME_QUERIES[selector]
