# e2e/mohaax_e2e/selectors/login_selectors.py
from mohaax_e2e.core.types import Locator

# Main page: opens the login form (the leading space is in the DOM)
MAIN_LOGIN_BUTTON = Locator("xpath", "//button[text()=' Iniciar Sesión']")

EMAIL_INPUT = Locator("xpath", "//input[@placeholder='Ingresa tu email o Username']")
PASSWORD_INPUT = Locator("xpath", "//input[@placeholder='Ingresa tu contraseña']")
SUBMIT_BUTTON = Locator("xpath", "//button[@type='submit']")

ERROR_MESSAGE = Locator("xpath", "//div[contains(text(),'email o Password Incorrecto')]")
SUCCESS_MESSAGE = Locator("xpath", "//div[text()='Sesión iniciada correctamente']")
UNVERIFIED_USER_MESSAGE = Locator("xpath", "//div[text()='Debes validar tu cuenta para iniciar sesión']")

SIGN_UP_LINK = Locator("xpath", "//a[contains(text(),'Regístrate aquí')]")
FORGOT_PASSWORD_LINK = Locator("xpath", "//a[contains(text(), '¿Olvidaste Tu Contraseña?')]")

# Eye icon next to the password input
PASSWORD_TOGGLE_ICON = Locator(
    "xpath", "//*[local-name()='svg' and @class='text-4xl fill-[#FFFFFF] cursor-pointer']"
)

INVALID_CREDENTIALS_TEXT = "email o Password Incorrecto"
SUCCESS_TEXT = "Sesión iniciada correctamente"
UNVERIFIED_USER_TEXT = "Debes validar tu cuenta para iniciar sesión"

PASSWORD_TYPE_MASKED = "password"
PASSWORD_TYPE_UNMASKED = "text"
