"""
登入流程 Screen Objects（範例）

示範如何用 BaseScreen 建立 Screen Object：
- LaunchScreen.tap_go() 回傳下一個畫面（transition chaining）
- LoginScreen 的輸入與驗證回傳 self（self chaining）
請依照你的 App 實際 UI 修改 locator。
"""

from appium.webdriver.common.appiumby import AppiumBy

from core.appium_element import AppiumElement
from core.base_screen import BaseScreen
from core.enums import ElementState, Icon


class LaunchScreen(BaseScreen):
    """啟動畫面"""

    screen_name = "LaunchScreen"

    GO_BUTTON = (AppiumBy.ACCESSIBILITY_ID, "Go")

    @property
    def go_button(self) -> AppiumElement:
        return AppiumElement(self.driver, self.GO_BUTTON, description="Go button")

    def anchor(self):
        return self.go_button

    def tap_go(self) -> "LoginScreen":
        self.tap(self.go_button, "Tap the 'Go' button")
        return self.go_to(LoginScreen)


class LoginScreen(BaseScreen):
    """登入畫面"""

    screen_name = "LoginScreen"

    USERNAME_FIELD = (AppiumBy.ACCESSIBILITY_ID, "Username")
    PASSWORD_FIELD = (AppiumBy.ACCESSIBILITY_ID, "Password")
    LOGIN_BUTTON = (AppiumBy.ACCESSIBILITY_ID, "Login")
    ERROR_ALERT = (AppiumBy.ACCESSIBILITY_ID, "Error")

    @property
    def username_field(self) -> AppiumElement:
        return AppiumElement(self.driver, self.USERNAME_FIELD, description="Username text field")

    @property
    def password_field(self) -> AppiumElement:
        return AppiumElement(self.driver, self.PASSWORD_FIELD, description="Password text field")

    @property
    def login_button(self) -> AppiumElement:
        return AppiumElement(self.driver, self.LOGIN_BUTTON, description="Login button")

    @property
    def error_alert(self) -> AppiumElement:
        return AppiumElement(self.driver, self.ERROR_ALERT, description="Error alert")

    def anchor(self):
        return self.login_button

    # ── 操作 ──

    def enter_username(self, username: str) -> "LoginScreen":
        self.run_activity(
            Icon.STEP, "Enter username into the usernameTextField",
            lambda: self.username_field.type_text(username),
        )
        return self

    def enter_password(self, password: str) -> "LoginScreen":
        self.run_activity(
            Icon.STEP, "Enter password into the passwordTextField",
            lambda: self.password_field.type_text(password),
        )
        return self

    def tap_login(self) -> "LoginScreen":
        self.tap(self.login_button, "Tap the Login button")
        return self

    def login(self, username: str, password: str) -> "LoginScreen":
        """完整的登入流程"""
        return self.enter_username(username).enter_password(password).tap_login()

    # ── 驗證 ──

    def login_button_is_enabled(self, expected: bool = True) -> bool:
        return self.is_in_state(self.login_button, ElementState.ENABLED, expected)

    def assert_login_button_is_enabled(self, expected: bool = True) -> "LoginScreen":
        return self.assert_state(self.login_button, ElementState.ENABLED, expected)

    def assert_error_alert_exists(self, expected: bool = True) -> "LoginScreen":
        return self.assert_state(self.error_alert, ElementState.EXISTS, expected)
