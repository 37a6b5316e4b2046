# e2e/mohaax_e2e/flows/signup_flow.py
from __future__ import annotations

import logging

from mohaax_e2e.core.config import AppConfig
from mohaax_e2e.core.session import Session
from mohaax_e2e.core.types import RegistrationRow, ScenarioOutcome
from mohaax_e2e.pages.signup_page import SignUpPage
from mohaax_e2e.selectors import signup_selectors as S

from .outcomes import MatchMode, resolve_outcome_query, verify

logger = logging.getLogger(__name__)


def _open(session: Session, config: AppConfig) -> SignUpPage:
    page = SignUpPage(session, timeout_sec=config.wait_timeout_sec)
    page.navigate(config.base_url)
    return page


def run_registration(row: RegistrationRow, session: Session, config: AppConfig) -> ScenarioOutcome:
    """
    Positive rows (no outcome): success toast must match exactly.
    Negative rows: the outcome selector picks the query, expected text must be contained.
    """
    page = _open(session, config)
    page.enter_credentials(row.username, row.email, row.volute, row.password, row.repeat_password)
    page.submit()

    if row.outcome is None:
        return verify(page.get_success_message_text(), row.expected, MatchMode.EXACT, row.label, "success message")

    query = resolve_outcome_query(row.outcome)
    logger.debug("%s: checking outcome via %s", row.label, query.__name__)
    return verify(query(page), row.expected, MatchMode.CONTAINS, row.label, "error message")


def run_email_validation_message(
    session: Session, config: AppConfig, label: str = "Email without '@' shows browser validation"
) -> ScenarioOutcome:
    """Relies on the browser's HTML5 validation text (English locale)."""
    page = _open(session, config)
    page.enter_credentials("usuario", "123gmail.comasdasd", "1000", "password#123", "password#123")
    message = page.get_email_validation_message()
    return verify(message, S.EMAIL_MISSING_AT_VALIDATION_TEXT, MatchMode.CONTAINS, label, "validation message")
