"""
Activity Scope — 巢狀的步驟追蹤

每個操作都包在一個 activity 裡，讓 log 與 Allure 報告呈現「誰在驗證什麼」：

    ☑️ - LoginScreen - Verifying if the Login button is enabled
        🔹 - LoginScreen - Tap the 'Login' button

用法：
    from core.activity import run_activity, run_state_activity

    run_activity(Icon.STEP, "Tap the 'Go' button", go_button.click, screen_name="LaunchScreen")

    ok = run_state_activity(
        "Login button", ElementState.ENABLED, True,
        lambda: wait_for_state(login, ElementState.ENABLED),
        screen_name="LoginScreen",
    )

activity 只影響追蹤紀錄：body 的回傳值與例外原樣傳出。
巢狀順序嚴格後進先出，即使 body 內遞迴建立新的 activity 也一樣。
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar

from core.enums import ElementState, Icon, Property
from core.phrases import property_activity_phrase, state_activity_phrase
from utils.allure_helper import step_scope
from utils.logger import logger

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class ActivityRecord:
    """一個進行中的 activity，進入時建立，離開時從堆疊移除"""
    icon: Icon
    description: str
    parent: ActivityRecord | None = None
    depth: int = 0

    @property
    def title(self) -> str:
        return f"{self.icon} - {self.description}"


class ActivityTrace:
    """
    activity 堆疊

    entered / exited 依發生順序保留歷史，方便檢查巢狀是否正確。
    """

    def __init__(self, max_history: int = 500):
        self._stack: list[ActivityRecord] = []
        self.entered: list[ActivityRecord] = []
        self.exited: list[ActivityRecord] = []
        self._max_history = max_history

    @property
    def current(self) -> ActivityRecord | None:
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    @contextmanager
    def scope(self, icon: Icon, description: str) -> Iterator[ActivityRecord]:
        record = ActivityRecord(
            icon=icon, description=description,
            parent=self.current, depth=self.depth,
        )
        self._stack.append(record)
        self._remember(self.entered, record)
        logger.info(record.title, extra={"activity_depth": record.depth})
        try:
            with step_scope(record.title):
                yield record
        finally:
            popped = self._stack.pop()
            self._remember(self.exited, popped)
            if popped is not record:
                raise RuntimeError(
                    f"Activity 巢狀錯亂: 預期離開 '{record.title}'，實際 '{popped.title}'"
                )

    def run(self, icon: Icon, description: str, body: Callable[[], T]) -> T:
        with self.scope(icon, description):
            return body()

    def clear(self) -> None:
        self._stack.clear()
        self.entered.clear()
        self.exited.clear()

    def _remember(self, history: list[ActivityRecord], record: ActivityRecord) -> None:
        history.append(record)
        if len(history) > self._max_history:
            del history[: len(history) - self._max_history]


# 全域單例
activity_trace = ActivityTrace()


def _describe(screen_name: str, named: str) -> str:
    return f"{screen_name} - {named}" if screen_name else named


def run_activity(icon: Icon, named: str, body: Callable[[], T], *,
                 screen_name: str = "", trace: ActivityTrace | None = None) -> T:
    """一般步驟（點擊、輸入、切換畫面…）"""
    trace = trace or activity_trace
    return trace.run(icon, _describe(screen_name, named), body)


def run_state_activity(element_description: str, state: ElementState, expected: bool,
                       body: Callable[[], T], *, screen_name: str = "",
                       trace: ActivityTrace | None = None) -> T:
    """元素狀態驗證步驟，標題由狀態表自動產生"""
    phrase = state_activity_phrase(state, expected)
    named = f"Verifying if the {element_description} {phrase}"
    return run_activity(Icon.ASSERT, named, body, screen_name=screen_name, trace=trace)


def run_property_activity(element_description: str, prop: Property, equal_to: str,
                          expected: bool, body: Callable[[], T], *,
                          screen_name: str = "",
                          trace: ActivityTrace | None = None) -> T:
    """元素屬性驗證步驟"""
    phrase = property_activity_phrase(prop, equal_to, expected)
    named = f"Verifying if the {element_description} {phrase}"
    return run_activity(Icon.ASSERT, named, body, screen_name=screen_name, trace=trace)


def run_test_activity(named: str, body: Callable[[], T], *,
                      trace: ActivityTrace | None = None) -> T:
    """
    測試層級的步驟，把一段測試流程包成最外層 activity。

        def test_login(driver):
            run_test_activity("Login with valid credentials",
                              lambda: LaunchScreen(driver).tap_go().login("jane", "pwd"))
    """
    return run_activity(Icon.TEST, named, body, trace=trace)
