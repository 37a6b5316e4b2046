# e2e/mohaax_e2e/selectors/signup_selectors.py
from mohaax_e2e.core.types import Locator

# Entry path: main page login button -> "Regístrate aquí" inside the login form
MAIN_LOGIN_BUTTON = Locator("xpath", "//button[text()=' Iniciar Sesión']")
SIGN_UP_LINK = Locator("xpath", "//a[contains(text(),'Regístrate aquí')]")

USERNAME_INPUT = Locator("id", "username")
EMAIL_INPUT = Locator("id", "email")
VOLUTE_INPUT = Locator("id", "volute")
PASSWORD_INPUT = Locator("id", "password")
REPEAT_PASSWORD_INPUT = Locator("id", "repeatPassword")
REGISTER_BUTTON = Locator("xpath", "//button[@type='submit']")

SUCCESS_MESSAGE = Locator("xpath", "//div[text()='Usuario Creado Con éxito']")

# Client-side field errors are <span>, server responses are toast <div>s
USERNAME_ERROR_MESSAGE = Locator("xpath", "//span[contains(text(),'Nombre de usuario es obligatorio')]")
EMAIL_ERROR_MESSAGE = Locator("xpath", "//span[contains(text(),'Correo no válido')]")
PASSWORD_MISMATCH_ERROR = Locator("xpath", "//span[contains(text(),'Las contraseñas no coinciden')]")
USERNAME_EXISTS_MESSAGE = Locator("xpath", "//div[contains(text(),'Ya hay un jugador con ese nombre')]")
EMAIL_EXISTS_MESSAGE = Locator("xpath", "//div[contains(text(),'Ya hay un jugador registrado con ese email')]")
ALL_FIELDS_REQUIRED_MESSAGE = Locator("xpath", "//div[contains(text(),'Todos los campos son requeridos')]")
# same toast as ALL_FIELDS_REQUIRED_MESSAGE; the backend has no volute-specific text
VOLUTE_EMPTY_FIELD_MESSAGE = Locator("xpath", "//div[contains(text(),'Todos los campos son requeridos')]")
# e.g. username longer than the column allows
SERVER_INTERNAL_ERROR_MESSAGE = Locator("xpath", "//div[contains(text(),'Hubo un error interno en el servidor')]")

SUCCESS_TEXT = "Usuario Creado Con éxito"
EMAIL_MISSING_AT_VALIDATION_TEXT = "Please include an '@' in the email address."
