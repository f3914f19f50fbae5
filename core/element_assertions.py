"""
元素狀態 / 屬性斷言

把 ConditionWaiter 的 bool 結果轉成一次明確的 pass/fail 回報：

    from core.element_assertions import assert_element_state, assert_element_property

    assert_element_state(login_button)                                     # 存在
    assert_element_state(spinner, ElementState.EXISTS, expected=False)     # 已消失（不空等）
    assert_element_state(submit, ElementState.ENABLED, timeout=Timeout.LOADING)
    assert_element_property(title, Property.LABEL, "Welcome")
    assert_element_property(field, Property.VALUE, "Jane Doe", expected=False)

每次呼叫只回報一次；失敗訊息包含精確的狀態描述與呼叫點。
"""

from __future__ import annotations

from typing import Callable

from core.element import ElementHandle, element_property, element_state
from core.enums import ElementState, Icon, Property
from core.phrases import (
    property_failure_message,
    property_type_mismatch_message,
    state_failure_phrase,
)
from core.reporting import (
    AssertionEvent,
    FailureKind,
    Location,
    ReportingSink,
    caller_location,
    default_sink,
)
from core.timeouts import Timeout
from core.waiter import BoundedWait, wait_for_condition


def assert_state(
    state: ElementState,
    expected: bool,
    timeout: Timeout,
    check: Callable[[], bool],
    description: str,
    *,
    location: Location | None = None,
    sink: ReportingSink | None = None,
    bounded_wait: BoundedWait | None = None,
) -> AssertionEvent:
    """
    等待 check() 等於 expected，並回報結果。

    已經是錯誤狀態時不會先回報失敗，而是在 timeout 內繼續等待；
    已經是正確狀態時不等待（快速路徑）。
    """
    location = location or caller_location()
    sink = sink or default_sink

    satisfied = wait_for_condition(check, expected, timeout, slow=False,
                                   bounded_wait=bounded_wait)
    message = f"{Icon.ERROR} - The {description} {state_failure_phrase(state, expected)}"
    return sink.report(satisfied, message, location,
                       None if satisfied else FailureKind.STATE_MISMATCH)


def assert_property(
    prop: Property,
    equal_to: str,
    expected: bool,
    timeout: Timeout,
    actual_provider: Callable[[], str | None],
    *,
    location: Location | None = None,
    sink: ReportingSink | None = None,
    bounded_wait: BoundedWait | None = None,
) -> AssertionEvent:
    """
    等待屬性值等於（expected=True）或不等於（expected=False）equal_to。

    actual_provider() 一開始就拿不到字串時立即回報 PROPERTY_TYPE_MISMATCH，不等待。
    輪詢期間每次都重新讀值，失敗訊息帶最後一次讀到的值。
    """
    location = location or caller_location()
    sink = sink or default_sink

    initial = actual_provider()
    if not isinstance(initial, str):
        return sink.report(
            False, f"{Icon.ERROR} {property_type_mismatch_message(prop)}",
            location, FailureKind.PROPERTY_TYPE_MISMATCH,
        )

    actual = initial
    reuse_initial = True

    def check() -> bool:
        # 快速路徑直接用型別檢查時讀到的值，輪詢時才重新讀
        nonlocal actual, reuse_initial
        if reuse_initial:
            reuse_initial = False
        else:
            actual = actual_provider()
        return actual == equal_to

    satisfied = wait_for_condition(check, expected, timeout, slow=False,
                                   bounded_wait=bounded_wait)
    message = f"{Icon.ERROR} " + property_failure_message(prop, equal_to, actual, expected)
    return sink.report(satisfied, message, location,
                       None if satisfied else FailureKind.PROPERTY_MISMATCH)


def assert_element_state(
    element: ElementHandle,
    state: ElementState = ElementState.EXISTS,
    expected: bool = True,
    timeout: Timeout = Timeout.NORMAL,
    *,
    location: Location | None = None,
    sink: ReportingSink | None = None,
    bounded_wait: BoundedWait | None = None,
) -> AssertionEvent:
    """元素版本的 assert_state，用 element.description 組訊息"""
    return assert_state(
        state, expected, timeout,
        lambda: element_state(element, state),
        element.description,
        location=location or caller_location(),
        sink=sink,
        bounded_wait=bounded_wait,
    )


def assert_element_property(
    element: ElementHandle,
    prop: Property,
    equal_to: str,
    expected: bool = True,
    timeout: Timeout = Timeout.NORMAL,
    *,
    location: Location | None = None,
    sink: ReportingSink | None = None,
    bounded_wait: BoundedWait | None = None,
) -> AssertionEvent:
    """元素版本的 assert_property"""
    return assert_property(
        prop, equal_to, expected, timeout,
        lambda: element_property(element, prop),
        location=location or caller_location(),
        sink=sink,
        bounded_wait=bounded_wait,
    )
