from datetime import datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv

from mohaax_e2e.core.artifacts import safe_name
from mohaax_e2e.core.config import AppConfig, EnvSource
from mohaax_e2e.core.identity import long_suffix, unique_execution_id
from mohaax_e2e.core.playwright_factory import open_session
from mohaax_e2e.core.scenario_loader import scenario_values
from mohaax_e2e.selectors import login_selectors as L
from mohaax_e2e.selectors import signup_selectors as S


@pytest.fixture(scope="session", autouse=True)
def _load_env():
    load_dotenv()


# ---------------------------------------------------------------------------
# live browser (needs BASE_URL and the credentials in .env)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def config():
    if not EnvSource().has("BASE_URL"):
        pytest.skip("BASE_URL is not set; live browser scenarios skipped")
    return AppConfig.from_env()


@pytest.fixture(scope="session")
def execution_id():
    return unique_execution_id()


@pytest.fixture(scope="session")
def values(config, execution_id):
    return scenario_values(config, execution_id, long_suffix())


@pytest.fixture(scope="session")
def artifacts_base_dir(config):
    base = config.artifact_dir
    base.mkdir(parents=True, exist_ok=True)
    return base


@pytest.fixture()
def session(request, config, artifacts_base_dir):
    """
    A fresh browser per test; closed whatever the outcome.
    PW_TRACE=1 additionally writes a Playwright trace per test.
    """
    trace_path = None
    if config.browser.trace:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        name = safe_name(request.node.name)
        trace_path = artifacts_base_dir / name / f"trace_{name}_{ts}.zip"

    with open_session(config, trace_path=trace_path) as s:
        yield s


# ---------------------------------------------------------------------------
# in-memory doubles for the engine tests (no browser)
# ---------------------------------------------------------------------------


class FakeElement:
    def __init__(self, visible=True, enabled=True, text="", attrs=None, value="", appears_after=0, validation=None):
        self.visible = visible
        self.enabled = enabled
        self.text = text
        self.attrs = dict(attrs or {})
        self.value = value
        # number of polls that report "not there yet"
        self.appears_after = appears_after
        self.validation = validation


class FakePage:
    def screenshot(self, path, full_page=False):
        Path(path).write_bytes(b"png")

    def content(self):
        return "<html><body>fake</body></html>"


class FakeSession:
    """Same surface as core.session.Session, backed by a dict of elements."""

    def __init__(self):
        self.elements = {}
        self.on_click = {}
        self.actions = []
        self.current_url = "about:blank"
        self.clipboard = ""
        self.page = FakePage()
        self.polls = 0

    def add(self, locator, **kwargs):
        el = FakeElement(**kwargs)
        self.elements[locator] = el
        return el

    def remove(self, locator):
        self.elements.pop(locator, None)

    def open(self, url):
        self.actions.append(("open", url))
        self.current_url = url

    def is_visible(self, locator):
        self.polls += 1
        el = self.elements.get(locator)
        if el is None:
            return False
        if el.appears_after > 0:
            el.appears_after -= 1
            return False
        return el.visible

    def is_clickable(self, locator):
        return self.is_visible(locator) and self.elements[locator].enabled

    def text_of(self, locator):
        return self.elements[locator].text

    def attribute_of(self, locator, name):
        return self.elements[locator].attrs.get(name)

    def value_of(self, locator):
        return self.elements[locator].value

    def validation_message_of(self, locator):
        el = self.elements[locator]
        return el.validation(el) if el.validation else ""

    def click(self, locator):
        self.actions.append(("click", locator))
        hook = self.on_click.get(locator)
        if hook:
            hook(self)

    def clear(self, locator):
        self.actions.append(("clear", locator))
        self.elements[locator].value = ""

    def type_text(self, locator, text):
        self.actions.append(("type", locator, text))
        self.elements[locator].value += text

    def press(self, locator, keys):
        self.actions.append(("press", locator, keys))
        if keys in ("Control+V", "Meta+V"):
            self.elements[locator].value += self.clipboard

    def write_clipboard(self, text):
        self.clipboard = text


@pytest.fixture()
def fake_session():
    return FakeSession()


@pytest.fixture()
def fake_config(tmp_path):
    return AppConfig(
        base_url="https://mohaax.test/",
        app_username="jugador1",
        app_password="Secreta#1",
        username_not_verified="pendiente",
        password_not_verified="Pendiente#1",
        email_registered="jugador1@gmail.com",
        register_path="/register",
        recover_password_path="/recover-password",
        wait_timeout_sec=0.3,
        artifact_dir=tmp_path / "artifacts",
    )


@pytest.fixture()
def fake_values(fake_config):
    return scenario_values(fake_config, "1700000000_abcdef12", "0123456789abcdef0123456789abcdef")


MAX_USERNAME_LEN = 35


def _show(session, locator, text):
    session.add(locator, text=text)


def _login_submit(config):
    def _hook(s):
        user = s.elements[L.EMAIL_INPUT].value
        pwd = s.elements[L.PASSWORD_INPUT].value
        if user == config.app_username and pwd == config.app_password:
            _show(s, L.SUCCESS_MESSAGE, L.SUCCESS_TEXT)
        elif user == config.username_not_verified and pwd == config.password_not_verified:
            _show(s, L.UNVERIFIED_USER_MESSAGE, L.UNVERIFIED_USER_TEXT)
        else:
            _show(s, L.ERROR_MESSAGE, L.INVALID_CREDENTIALS_TEXT)

    return _hook


def _toggle_password(s):
    el = s.elements[L.PASSWORD_INPUT]
    el.attrs["type"] = "text" if el.attrs.get("type") == "password" else "password"


def _open_login_form(s):
    s.add(L.EMAIL_INPUT)
    s.add(L.PASSWORD_INPUT, attrs={"type": "password"})
    s.add(L.SUBMIT_BUTTON)
    s.add(L.SIGN_UP_LINK)
    s.add(L.FORGOT_PASSWORD_LINK)
    s.add(L.PASSWORD_TOGGLE_ICON)


@pytest.fixture()
def fake_login_app(fake_session, fake_config):
    """Main page + login form behaving like the real one."""
    s = fake_session
    s.add(L.MAIN_LOGIN_BUTTON)
    s.on_click[L.MAIN_LOGIN_BUTTON] = _open_login_form
    s.on_click[L.SUBMIT_BUTTON] = _login_submit(fake_config)
    s.on_click[L.PASSWORD_TOGGLE_ICON] = _toggle_password

    def _goto(path):
        def _hook(sess):
            sess.current_url = fake_config.base_url.rstrip("/") + path

        return _hook

    s.on_click[L.SIGN_UP_LINK] = _goto(fake_config.register_path)
    s.on_click[L.FORGOT_PASSWORD_LINK] = _goto(fake_config.recover_password_path)
    return s


def _email_validation(el):
    if "@" not in el.value:
        return f"Please include an '@' in the email address. '{el.value}' is missing an '@'."
    return ""


def _open_signup_form(s):
    s.add(S.USERNAME_INPUT)
    s.add(S.EMAIL_INPUT, validation=_email_validation)
    s.add(S.VOLUTE_INPUT)
    s.add(S.PASSWORD_INPUT)
    s.add(S.REPEAT_PASSWORD_INPUT)
    s.add(S.REGISTER_BUTTON)


def _signup_submit(config):
    def _hook(s):
        v = {k: s.elements[loc].value for k, loc in (
            ("username", S.USERNAME_INPUT),
            ("email", S.EMAIL_INPUT),
            ("volute", S.VOLUTE_INPUT),
            ("password", S.PASSWORD_INPUT),
            ("repeat", S.REPEAT_PASSWORD_INPUT),
        )}
        if not v["username"]:
            _show(s, S.USERNAME_ERROR_MESSAGE, "Nombre de usuario es obligatorio")
        elif "@" not in v["email"]:
            _show(s, S.EMAIL_ERROR_MESSAGE, "Correo no válido")
        elif v["password"] != v["repeat"]:
            _show(s, S.PASSWORD_MISMATCH_ERROR, "Las contraseñas no coinciden")
        elif not v["volute"]:
            _show(s, S.ALL_FIELDS_REQUIRED_MESSAGE, "Todos los campos son requeridos")
        elif v["username"] == config.app_username:
            _show(s, S.USERNAME_EXISTS_MESSAGE, "Ya hay un jugador con ese nombre")
        elif v["email"] == config.email_registered:
            _show(s, S.EMAIL_EXISTS_MESSAGE, "Ya hay un jugador registrado con ese email")
        elif len(v["username"]) > MAX_USERNAME_LEN:
            _show(s, S.SERVER_INTERNAL_ERROR_MESSAGE, "Hubo un error interno en el servidor")
        else:
            _show(s, S.SUCCESS_MESSAGE, S.SUCCESS_TEXT)

    return _hook


@pytest.fixture()
def fake_signup_app(fake_session, fake_config):
    s = fake_session
    s.add(S.MAIN_LOGIN_BUTTON)
    s.on_click[S.MAIN_LOGIN_BUTTON] = lambda sess: sess.add(S.SIGN_UP_LINK)
    s.on_click[S.SIGN_UP_LINK] = _open_signup_form
    s.on_click[S.REGISTER_BUTTON] = _signup_submit(fake_config)
    return s
