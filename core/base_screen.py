"""
Screen Object 基底類別

所有 Screen Object 都繼承此類。與一般 Page Object 不同的是：
- 每個 Screen 有明確的 screen_name，出現在所有 activity 標題中
- 建立時自動驗證畫面已出現（anchor 元素存在）
- 驗證方法回傳 self，可串接

兩種串接寫法都支援：

    # Transition chaining：動作回傳下一個畫面
    LaunchScreen(driver).tap_go().login("user", "pwd")

    # Self chaining：動作回傳自己
    (LoginScreen(driver)
        .enter_username("user")
        .assert_state(login_button, ElementState.ENABLED)
        .assert_property(error_label, Property.LABEL, "", expected=False))
"""

from __future__ import annotations

from typing import Callable, TypeVar

from core.activity import (
    ActivityTrace,
    run_activity,
    run_property_activity,
    run_state_activity,
)
from core.element import ElementHandle
from core.element_assertions import assert_element_property, assert_element_state
from core.enums import ElementState, Icon, Property
from core.reporting import (
    FailureKind,
    Location,
    ReportingSink,
    caller_location_outside,
    default_sink,
)
from core.timeouts import Timeout
from core.waiter import BoundedWait, wait_for_state

T = TypeVar("T")
S = TypeVar("S", bound="BaseScreen")


class BaseScreen:
    """
    Screen Object 基底類別

    子類別需設定 screen_name，並可覆寫 anchor() 回傳此畫面獨有的元素。
    """

    screen_name: str = ""

    def __init__(self, driver=None, *, sink: ReportingSink | None = None,
                 trace: ActivityTrace | None = None,
                 bounded_wait: BoundedWait | None = None,
                 verify: bool = True):
        self.driver = driver
        self.sink = sink or default_sink
        self.trace = trace
        self.bounded_wait = bounded_wait
        if verify:
            self.visible()

    def anchor(self) -> ElementHandle | None:
        """此畫面獨有的元素；None 表示不驗證畫面是否出現"""
        return None

    def visible(self) -> None:
        """以 anchor 元素確認畫面已出現（LOADING 逾時）"""
        anchor = self.anchor()
        if anchor is None:
            return
        location = self._caller_location()

        def verify():
            present = wait_for_state(anchor, ElementState.EXISTS, True, Timeout.LOADING,
                                     bounded_wait=self.bounded_wait)
            self.sink.report(
                present, f"{Icon.ERROR} {self.screen_name} is not present", location,
                None if present else FailureKind.STATE_MISMATCH,
            )

        self.run_activity(Icon.SCREEN, "Verifying if the screen is present", verify)

    def _caller_location(self) -> Location:
        """第一個不在任何 Screen 方法裡的呼叫點（建立畫面、串接、子類別 __init__ 都會略過）"""
        return caller_location_outside(self, (BaseScreen,))

    # ── Activity ──

    def run_activity(self, icon: Icon, named: str, body: Callable[[], T]) -> T:
        return run_activity(icon, named, body, screen_name=self.screen_name, trace=self.trace)

    def tap(self, element, named: str = "") -> None:
        """點擊元素（元素需提供 click()）"""
        self.run_activity(
            Icon.STEP, named or f"Tap the '{element.description}'", element.click,
        )

    def force_tap(self, element, dx: float = 0.5, dy: float = 0.5, named: str = "") -> None:
        """依相對位置強制點擊（元素需提供 force_tap_with_offset()）"""
        self.run_activity(
            Icon.STEP, named or f"Force tap the '{element.description}'",
            lambda: element.force_tap_with_offset(dx, dy),
        )

    def go_to(self, screen_cls: type[S]) -> S:
        """建立下一個畫面，沿用同一組 sink / trace / bounded_wait"""
        return screen_cls(
            self.driver, sink=self.sink, trace=self.trace, bounded_wait=self.bounded_wait,
        )

    # ── 驗證 ──

    def is_in_state(self, element: ElementHandle,
                    state: ElementState = ElementState.EXISTS,
                    expected: bool = True,
                    timeout: Timeout = Timeout.NORMAL) -> bool:
        """回傳元素是否在 timeout 內進入預期狀態（不回報）"""
        return run_state_activity(
            element.description, state, expected,
            lambda: wait_for_state(element, state, expected, timeout,
                                   bounded_wait=self.bounded_wait),
            screen_name=self.screen_name, trace=self.trace,
        )

    def assert_state(self, element: ElementHandle,
                     state: ElementState = ElementState.EXISTS,
                     expected: bool = True,
                     timeout: Timeout = Timeout.NORMAL,
                     location: Location | None = None):
        """驗證元素狀態並回報，回傳 self 以便串接"""
        location = location or self._caller_location()
        run_state_activity(
            element.description, state, expected,
            lambda: assert_element_state(
                element, state, expected, timeout,
                location=location, sink=self.sink, bounded_wait=self.bounded_wait,
            ),
            screen_name=self.screen_name, trace=self.trace,
        )
        return self

    def assert_property(self, element: ElementHandle, prop: Property, equal_to: str,
                        expected: bool = True,
                        timeout: Timeout = Timeout.NORMAL,
                        location: Location | None = None):
        """驗證元素屬性並回報，回傳 self 以便串接"""
        location = location or self._caller_location()
        run_property_activity(
            element.description, prop, equal_to, expected,
            lambda: assert_element_property(
                element, prop, equal_to, expected, timeout,
                location=location, sink=self.sink, bounded_wait=self.bounded_wait,
            ),
            screen_name=self.screen_name, trace=self.trace,
        )
        return self
