# e2e/mohaax_e2e/flows/login_flow.py
from __future__ import annotations

import logging

from mohaax_e2e.core.config import AppConfig
from mohaax_e2e.core.session import Session
from mohaax_e2e.core.types import LoginRow, ScenarioOutcome
from mohaax_e2e.pages.login_page import LoginPage
from mohaax_e2e.selectors import login_selectors as L

from .outcomes import MatchMode, verify

logger = logging.getLogger(__name__)

FAILED_ATTEMPTS = 3


def _open(session: Session, config: AppConfig) -> LoginPage:
    page = LoginPage(session, timeout_sec=config.wait_timeout_sec)
    page.navigate(config.base_url)
    return page


def _login(session: Session, config: AppConfig, username: str, password: str) -> LoginPage:
    page = _open(session, config)
    page.enter_credentials(username, password)
    page.submit()
    return page


def run_invalid_login(row: LoginRow, session: Session, config: AppConfig) -> ScenarioOutcome:
    page = _login(session, config, row.username, row.password)
    return verify(page.get_error_message_text(), row.expected, MatchMode.CONTAINS, row.label, "error message")


def run_successful_login(session: Session, config: AppConfig, label: str = "Successful login") -> ScenarioOutcome:
    page = _login(session, config, config.app_username, config.app_password)
    return verify(page.get_success_message_text(), L.SUCCESS_TEXT, MatchMode.EXACT, label, "success message")


def run_unverified_login(session: Session, config: AppConfig, label: str = "Login with unverified user") -> ScenarioOutcome:
    page = _login(session, config, config.username_not_verified, config.password_not_verified)
    return verify(
        page.get_unverified_user_message_text(), L.UNVERIFIED_USER_TEXT, MatchMode.EXACT, label, "verified message"
    )


def run_password_toggle(session: Session, config: AppConfig, label: str = "Password visibility toggle") -> ScenarioOutcome:
    """masked -> unmasked after one toggle -> masked again after the second."""
    page = _open(session, config)
    verify(page.get_password_input_type() or "", L.PASSWORD_TYPE_MASKED, MatchMode.EXACT, label, "initial input type")
    page.toggle_password_visibility()
    verify(page.get_password_input_type() or "", L.PASSWORD_TYPE_UNMASKED, MatchMode.EXACT, label, "input type after one toggle")
    page.toggle_password_visibility()
    return verify(
        page.get_password_input_type() or "", L.PASSWORD_TYPE_MASKED, MatchMode.EXACT, label, "input type after two toggles"
    )


def run_multiple_invalid_attempts(
    session: Session, config: AppConfig, label: str = "Multiple invalid login attempts"
) -> ScenarioOutcome:
    page = _open(session, config)
    for i in range(FAILED_ATTEMPTS):
        page.enter_credentials(config.app_username, f"wrongpassword{i}")
        page.submit()
    # no lockout message: still the plain invalid-credentials text
    return verify(page.get_error_message_text(), L.INVALID_CREDENTIALS_TEXT, MatchMode.EXACT, label, "error message")


def run_copy_paste_password(session: Session, config: AppConfig, label: str = "Copy and paste password") -> ScenarioOutcome:
    page = _open(session, config)
    session.write_clipboard(config.app_password)
    page.paste_password_using_shortcut()
    return verify(page.get_password_input_value(), config.app_password, MatchMode.EXACT, label, "pasted password")


def _assert_url_contains(page: LoginPage, fragment: str, label: str, subject: str) -> ScenarioOutcome:
    page.wait_for_url_contains(fragment)
    logger.debug("landed on %s", page.current_url)
    return verify(page.current_url, fragment, MatchMode.CONTAINS, label, subject)


def run_sign_up_link(session: Session, config: AppConfig, label: str = "Sign up link") -> ScenarioOutcome:
    page = _open(session, config)
    page.click_sign_up_link()
    return _assert_url_contains(page, config.register_path, label, "registration URL")


def run_forgot_password_link(session: Session, config: AppConfig, label: str = "Forgot password link") -> ScenarioOutcome:
    page = _open(session, config)
    page.click_forgot_password_link()
    return _assert_url_contains(page, config.recover_password_path, label, "password recovery URL")
