"""
有 tab bar 的 Screen Objects（範例）

HomeScreen / ProfileScreen 都多繼承 TabBarMixin：
    HomeScreen(driver).select(Tabs.PROFILE, go_to=ProfileScreen).assert_tab_is_selected(Tabs.PROFILE)
請依照你的 App 實際 UI 修改 locator。
"""

from appium.webdriver.common.appiumby import AppiumBy

from core.appium_element import AppiumElement
from core.base_screen import BaseScreen
from core.tab_bar import TabBarMixin


class HomeScreen(TabBarMixin, BaseScreen):
    """首頁"""

    screen_name = "HomeScreen"

    WELCOME_LABEL = (AppiumBy.ACCESSIBILITY_ID, "Welcome")

    @property
    def welcome_label(self) -> AppiumElement:
        return AppiumElement(self.driver, self.WELCOME_LABEL, description="Welcome label",
                             platform=self.platform)

    def anchor(self):
        return self.welcome_label


class ProfileScreen(TabBarMixin, BaseScreen):
    """個人資料頁"""

    screen_name = "ProfileScreen"

    NAME_FIELD = (AppiumBy.ACCESSIBILITY_ID, "Name")

    @property
    def name_field(self) -> AppiumElement:
        return AppiumElement(self.driver, self.NAME_FIELD, description="Name text field",
                             platform=self.platform)

    def anchor(self):
        return self.name_field
