from __future__ import annotations

import logging
import platform
from typing import Optional

from mohaax_e2e.selectors import login_selectors as L

from .base_page import BasePage

logger = logging.getLogger(__name__)


def paste_shortcut(os_name: Optional[str] = None) -> str:
    """Control+V on Windows, Meta+V (Command) everywhere else."""
    name = (os_name if os_name is not None else platform.system()).lower()
    # "darwin" contains "win" too, so match the prefix only
    if name.startswith("win"):
        return "Control+V"
    return "Meta+V"


class LoginPage(BasePage):
    """Login form reached from the main page "Iniciar Sesión" button."""

    def navigate(self, base_url: str) -> None:
        def _steps() -> None:
            self.session.open(base_url)
            self._click(L.MAIN_LOGIN_BUTTON)
            self._wait_visible(L.EMAIL_INPUT)

        self._navigation(_steps)
        logger.debug("login form ready")

    def enter_credentials(self, username: str, password: str) -> None:
        self._fill(L.EMAIL_INPUT, username)
        self._fill(L.PASSWORD_INPUT, password)

    def submit(self) -> None:
        self._click(L.SUBMIT_BUTTON)

    # --- outcome queries (valid only after submit) ---

    def get_error_message_text(self) -> str:
        return self._text(L.ERROR_MESSAGE)

    def get_success_message_text(self) -> str:
        return self._text(L.SUCCESS_MESSAGE)

    def get_unverified_user_message_text(self) -> str:
        return self._text(L.UNVERIFIED_USER_MESSAGE)

    # --- links ---

    def click_sign_up_link(self) -> None:
        self._click(L.SIGN_UP_LINK)

    def click_forgot_password_link(self) -> None:
        self._click(L.FORGOT_PASSWORD_LINK)

    # --- password input state ---

    def toggle_password_visibility(self) -> None:
        self._click(L.PASSWORD_TOGGLE_ICON)

    def get_password_input_type(self) -> Optional[str]:
        return self.session.attribute_of(self._wait_visible(L.PASSWORD_INPUT), "type")

    def get_password_input_value(self) -> str:
        return self.session.value_of(self._wait_visible(L.PASSWORD_INPUT))

    def paste_password_using_shortcut(self, os_name: Optional[str] = None) -> None:
        el = self._wait_visible(L.PASSWORD_INPUT)
        self.session.press(el, paste_shortcut(os_name))
