"""
Condition Waiter — 有時限的條件等待（含快速路徑）

    from core.waiter import wait_for_condition, wait_for_state

    # 元素已經消失時立即回傳 True，不用空等整個 timeout
    gone = wait_for_state(spinner, ElementState.EXISTS, expected=False)

    # slow=True：跳過快速路徑，一律交給有界等待
    ok = wait_for_condition(lambda: cart.count == 3, True, Timeout.SHORT, slow=True)

狀態流程：
    Init → FastCheck → Satisfied
                     → Polling → Satisfied / TimedOut
    slow=True 時跳過 FastCheck。

兩個函式都只回傳 bool，不拋例外，也不會自動重試；重試由呼叫端決定。
"""

from __future__ import annotations

from typing import Callable

from core.element import ElementHandle, element_state
from core.enums import ElementState
from core.timeouts import Timeout
from utils.logger import logger
from utils.wait_helper import PollingWait

BoundedWait = Callable[[Callable[[], bool], Timeout], bool]

default_bounded_wait: BoundedWait = PollingWait()


def wait_for_condition(
    check: Callable[[], bool],
    expected: bool,
    timeout: Timeout,
    slow: bool = False,
    bounded_wait: BoundedWait | None = None,
) -> bool:
    """
    等待 check() 的結果等於 expected。

    Args:
        check: 無副作用、可重複呼叫的條件
        expected: 期望的布林結果
        timeout: 最長等待時間
        slow: True 時不做快速檢查，直接進入有界等待
        bounded_wait: 有界等待實作，預設為 PollingWait

    Returns:
        逾時前成立回傳 True，否則 False
    """
    if not slow:
        try:
            if bool(check()) == expected:
                return True
        except Exception as e:
            logger.debug(f"[Waiter] 快速檢查失敗，改為輪詢: {e}")

    wait = bounded_wait or default_bounded_wait
    return wait(lambda: bool(check()) == expected, timeout)


def wait_for_state(
    element: ElementHandle,
    state: ElementState = ElementState.EXISTS,
    expected: bool = True,
    timeout: Timeout = Timeout.NORMAL,
    slow: bool = False,
    bounded_wait: BoundedWait | None = None,
) -> bool:
    """
    等待元素進入指定狀態。

    兩種反向驗證的寫法差別：
        assert not wait_for_state(el)              → 一定等滿 timeout
        assert wait_for_state(el, expected=False)  → 條件成立當下就回傳
    """
    return wait_for_condition(
        lambda: element_state(element, state),
        expected,
        timeout,
        slow=slow,
        bounded_wait=bounded_wait,
    )
