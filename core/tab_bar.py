"""
Tab bar 元件

有 tab bar 的畫面多繼承 TabBarMixin 即可：

    class HomeScreen(TabBarMixin, BaseScreen):
        screen_name = "HomeScreen"

    # Transition chaining：切換後回傳目標畫面
    profile = HomeScreen(driver).select(Tabs.PROFILE, go_to=ProfileScreen)

    # Self chaining：留在同一個畫面物件
    HomeScreen(driver).select(Tabs.SETTINGS).assert_tab_is_selected(Tabs.SETTINGS)

選取狀態的驗證都包在 selected 狀態的 activity 裡，標題例如：
    ☑️ - HomeScreen - Verifying if the 'Profile' tab is selected
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from appium.webdriver.common.appiumby import AppiumBy

from config.config import Config
from core.appium_element import AppiumElement
from core.base_screen import BaseScreen
from core.enums import ElementState
from core.timeouts import Timeout

S = TypeVar("S", bound=BaseScreen)


class TabBarMixin:
    """
    提供 tab 切換與選取狀態驗證，需與 BaseScreen 一起使用。

    tab 可以是任何 value 為按鈕 label 的 Enum（預設見 core.enums.Tabs）。
    """

    platform: str | None = None

    def tab_locator(self, tab: Enum) -> tuple:
        """tab 按鈕的 locator；iOS 限定在 tab bar 底下，Android 以 content-desc 查找"""
        platform = (self.platform or Config.PLATFORM).lower()
        if platform == "ios":
            return (
                AppiumBy.IOS_CLASS_CHAIN,
                f'**/XCUIElementTypeTabBar/XCUIElementTypeButton[`label == "{tab.value}"`]',
            )
        return (AppiumBy.ACCESSIBILITY_ID, tab.value)

    def tab_element(self, tab: Enum) -> AppiumElement:
        return AppiumElement(
            self.driver, self.tab_locator(tab),
            description=f"'{tab.value}' tab", platform=self.platform,
        )

    def select(self, tab: Enum, go_to: type[S] | None = None):
        """
        點擊 tab。

        Args:
            tab: 要切換的分頁
            go_to: 切換後出現的畫面類別；None 時回傳 self

        Returns:
            go_to 的新實例，或 self
        """
        self.tap(self.tab_element(tab), f"Tap '{tab.value}' tab")
        if go_to is None:
            return self
        return self.go_to(go_to)

    def tab_is_selected(self, tab: Enum, expected: bool = True,
                        timeout: Timeout = Timeout.NORMAL) -> bool:
        """回傳 tab 是否在 timeout 內進入預期的選取狀態（不回報）"""
        return self.is_in_state(self.tab_element(tab), ElementState.SELECTED, expected, timeout)

    def assert_tab_is_selected(self, tab: Enum, expected: bool = True,
                               timeout: Timeout = Timeout.NORMAL):
        """驗證 tab 選取狀態並回報，回傳 self"""
        return self.assert_state(self.tab_element(tab), ElementState.SELECTED, expected, timeout)
