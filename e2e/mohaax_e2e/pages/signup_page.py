from __future__ import annotations

import logging

from mohaax_e2e.selectors import signup_selectors as S

from .base_page import BasePage

logger = logging.getLogger(__name__)


class SignUpPage(BasePage):
    """Registration form: main page -> login form -> "Regístrate aquí"."""

    def navigate(self, base_url: str) -> None:
        def _steps() -> None:
            self.session.open(base_url)
            self._click(S.MAIN_LOGIN_BUTTON)
            self._click(S.SIGN_UP_LINK)
            self._wait_visible(S.USERNAME_INPUT)

        self._navigation(_steps)
        logger.debug("sign up form ready")

    def enter_credentials(self, username: str, email: str, volute: str, password: str, repeat_password: str) -> None:
        self._fill(S.USERNAME_INPUT, username)
        self._fill(S.EMAIL_INPUT, email)
        self._fill(S.VOLUTE_INPUT, volute)
        self._fill(S.PASSWORD_INPUT, password)
        self._fill(S.REPEAT_PASSWORD_INPUT, repeat_password)

    def submit(self) -> None:
        self._click(S.REGISTER_BUTTON)

    def get_success_message_text(self) -> str:
        return self._text(S.SUCCESS_MESSAGE)

    def get_username_error_message_text(self) -> str:
        return self._text(S.USERNAME_ERROR_MESSAGE)

    def get_email_error_message_text(self) -> str:
        return self._text(S.EMAIL_ERROR_MESSAGE)

    def get_password_mismatch_error_text(self) -> str:
        return self._text(S.PASSWORD_MISMATCH_ERROR)

    def get_username_exists_message_text(self) -> str:
        return self._text(S.USERNAME_EXISTS_MESSAGE)

    def get_email_exists_message_text(self) -> str:
        return self._text(S.EMAIL_EXISTS_MESSAGE)

    def get_all_fields_required_message_text(self) -> str:
        return self._text(S.ALL_FIELDS_REQUIRED_MESSAGE)

    def get_volute_empty_field_message_text(self) -> str:
        return self._text(S.VOLUTE_EMPTY_FIELD_MESSAGE)

    def get_server_internal_error_message_text(self) -> str:
        return self._text(S.SERVER_INTERNAL_ERROR_MESSAGE)

    def get_email_validation_message(self) -> str:
        """
        Browser-native (HTML5) validation text of the email input.
        Focus email, then username, so the browser evaluates the field.
        """
        self._click(S.EMAIL_INPUT)
        self._click(S.USERNAME_INPUT)
        return self.session.validation_message_of(self._wait_visible(S.EMAIL_INPUT))
