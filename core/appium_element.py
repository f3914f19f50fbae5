"""
Appium 介面卡

把已建立好的 Appium driver 包成引擎需要的 ElementHandle / ElementQuery / BoundedWait。
本模組只「讀取」元素狀態與執行點擊 / 輸入，不負責建立 driver 或啟動 App。

用法：
    from appium.webdriver.common.appiumby import AppiumBy
    from core.appium_element import AppiumElement, appium_query, ios_predicate_locator

    login = AppiumElement(driver, (AppiumBy.ACCESSIBILITY_ID, "Login"), description="Login button")
    assert_element_state(login, ElementState.ENABLED)

    # predicate 直接推給 XCUITest 執行
    locator = ios_predicate_locator(label_containing("Log", "in"), "XCUIElementTypeButton")
    buttons = appium_query(driver, locator, name="login buttons")

    # 其他平台：先抓候選，再在本地用 predicate 縮小
    texts = appium_query(driver, (AppiumBy.CLASS_NAME, "android.widget.TextView"))
    title = texts.label_containing("Welcome").first_match
"""

from __future__ import annotations

from appium.webdriver.common.appiumby import AppiumBy
from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.common.actions import interaction
from selenium.webdriver.common.actions.action_builder import ActionBuilder
from selenium.webdriver.common.actions.pointer_input import PointerInput
from selenium.webdriver.support.ui import WebDriverWait

from config.config import Config, ConfigValidationError
from core.predicate import Predicate
from core.query import ElementQuery
from utils.logger import logger

# 各平台的屬性名稱（iOS: XCUITest，Android: UiAutomator2）
_ATTRIBUTES = {
    "ios": {
        "label": "label",
        "value": "value",
        "placeholder_value": "placeholderValue",
        "identifier": "name",
        "hittable": "hittable",
        "focused": "hasFocus",
    },
    "android": {
        "label": "contentDescription",
        "value": "text",
        "placeholder_value": "hint",
        "identifier": "resourceId",
        "hittable": "clickable",
        "focused": "focused",
    },
}

_LOOKUP_ERRORS = (NoSuchElementException, StaleElementReferenceException)


def _platform_attributes(platform: str) -> dict:
    try:
        return _ATTRIBUTES[platform]
    except KeyError:
        raise ConfigValidationError(
            [f"PLATFORM={platform} 不支援，僅限 {', '.join(_ATTRIBUTES)}"]
        ) from None


class AppiumElement:
    """
    lazy 解析的 Appium 元素

    每次讀取都重新 find_elements(*locator)[index]，
    找不到或元素已失效時視為「不存在」，而不是拋例外。
    """

    def __init__(self, driver, locator: tuple, index: int = 0,
                 description: str = "", platform: str | None = None):
        self.driver = driver
        self.locator = locator
        self.index = index
        self._description = description
        self.platform = (platform or Config.PLATFORM).lower()
        self._attributes = _platform_attributes(self.platform)

    def resolve(self):
        """回傳目前的 WebElement，找不到時回傳 None"""
        try:
            elements = self.driver.find_elements(*self.locator)
        except _LOOKUP_ERRORS:
            return None
        if self.index < len(elements):
            return elements[self.index]
        return None

    def _read(self, reader, default):
        element = self.resolve()
        if element is None:
            return default
        try:
            return reader(element)
        except _LOOKUP_ERRORS:
            return default

    def _attribute(self, key: str) -> str | None:
        return self._read(lambda el: el.get_attribute(self._attributes[key]), None)

    def _flag(self, key: str) -> bool:
        return str(self._attribute(key)).lower() == "true"

    # ── ElementHandle ──

    @property
    def description(self) -> str:
        if self._description:
            return self._description
        by, value = self.locator
        suffix = f"[{self.index}]" if self.index else ""
        return f"{by}='{value}'{suffix}"

    @property
    def exists(self) -> bool:
        return self.resolve() is not None

    @property
    def is_hittable(self) -> bool:
        return self._read(lambda el: el.is_displayed(), False) and self._flag("hittable")

    @property
    def is_enabled(self) -> bool:
        return self._read(lambda el: el.is_enabled(), False)

    @property
    def is_selected(self) -> bool:
        return self._read(lambda el: el.is_selected(), False)

    @property
    def has_focus(self) -> bool:
        return self._flag("focused")

    @property
    def label(self) -> str | None:
        return self._attribute("label")

    @property
    def value(self) -> str | None:
        return self._attribute("value")

    @property
    def placeholder_value(self) -> str | None:
        return self._attribute("placeholder_value")

    @property
    def identifier(self) -> str | None:
        return self._attribute("identifier")

    # ── 操作 ──

    def click(self) -> None:
        element = self.resolve()
        if element is None:
            raise NoSuchElementException(f"找不到元素: {self.description}")
        logger.info(f"點擊元素: {self.description}")
        element.click()

    def type_text(self, text: str) -> None:
        """清除後輸入文字"""
        element = self.resolve()
        if element is None:
            raise NoSuchElementException(f"找不到元素: {self.description}")
        logger.info(f"輸入文字: '{text}' -> {self.description}")
        element.clear()
        element.send_keys(text)

    def force_tap_with_offset(self, dx: float = 0.5, dy: float = 0.5) -> None:
        """
        依元素範圍的相對位置點擊，不檢查元素是否可點擊。

        Args:
            dx: 水平位置，0.0 為左邊界、1.0 為右邊界，預設 0.5（中心）
            dy: 垂直位置，0.0 為上邊界、1.0 為下邊界，預設 0.5（中心）

        用法：
            element.force_tap_with_offset()            # 點中心
            element.force_tap_with_offset(0.2, 0.8)    # 點左下附近
        """
        element = self.resolve()
        if element is None:
            raise NoSuchElementException(f"找不到元素: {self.description}")
        rect = element.rect
        x = int(rect["x"] + rect["width"] * dx)
        y = int(rect["y"] + rect["height"] * dy)
        logger.info(f"強制點擊 ({x}, {y}) -> {self.description}")

        finger = PointerInput(interaction.POINTER_TOUCH, "finger")
        actions = ActionBuilder(self.driver, mouse=finger)
        actions.pointer_action.move_to_location(x, y)
        actions.pointer_action.pointer_down()
        actions.pointer_action.pause(0.1)
        actions.pointer_action.pointer_up()
        actions.perform()

    def __repr__(self) -> str:
        return f"AppiumElement({self.description})"


class ResolvedAppiumElement(AppiumElement):
    """
    已由 find_elements 取得的單一 WebElement

    直接讀這個 WebElement，不再重新查找；appium_query 每次取值都會重新
    find_elements 一次，再把整批結果包成這個類別，所以結果仍是即時的。
    元素失效時讀值回傳預設值（與 AppiumElement 相同）。
    """

    def __init__(self, web_element, driver, locator: tuple, index: int = 0,
                 description: str = "", platform: str | None = None):
        super().__init__(driver, locator, index=index, description=description,
                         platform=platform)
        self.web_element = web_element

    def resolve(self):
        return self.web_element


def appium_query(driver, locator: tuple, name: str = "",
                 platform: str | None = None) -> ElementQuery:
    """以 locator 的所有結果為來源建立 ElementQuery"""

    def source() -> list[ResolvedAppiumElement]:
        try:
            web_elements = driver.find_elements(*locator)
        except _LOOKUP_ERRORS:
            return []
        return [
            ResolvedAppiumElement(web_element, driver, locator, index=i, platform=platform)
            for i, web_element in enumerate(web_elements)
        ]

    return ElementQuery(source, name=name or f"{locator[0]}='{locator[1]}'")


def ios_predicate_locator(predicate: Predicate, element_type: str | None = None) -> tuple:
    """
    把 Predicate 轉成 -ios predicate string locator。

    Args:
        predicate: 要推給 XCUITest 的條件
        element_type: 限定元素類型，例如 "XCUIElementTypeButton"
    """
    expression = predicate.to_ios_predicate()
    if element_type:
        expression = f"type == '{element_type}' AND ({expression})"
    return (AppiumBy.IOS_PREDICATE, expression)


class WebDriverBoundedWait:
    """
    以 selenium WebDriverWait 實作的有界等待

    可取代預設的 PollingWait，沿用 selenium 的輪詢與例外忽略機制。
    """

    def __init__(self, driver, poll_frequency: float | None = None):
        self.driver = driver
        self.poll_frequency = poll_frequency if poll_frequency is not None else Config.POLL_INTERVAL

    def __call__(self, condition, timeout) -> bool:
        seconds = getattr(timeout, "seconds", timeout)
        wait = WebDriverWait(
            self.driver, seconds,
            poll_frequency=self.poll_frequency,
            ignored_exceptions=_LOOKUP_ERRORS,
        )
        try:
            wait.until(lambda _driver: condition())
            return True
        except TimeoutException:
            logger.debug(f"[Wait] WebDriverWait 逾時 ({timeout})")
            return False
