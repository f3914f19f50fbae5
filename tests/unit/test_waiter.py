"""
core.waiter 單元測試
驗證快速路徑、slow 模式、輪詢結果與元素狀態等待。
"""

import time

import pytest

from core.enums import ElementState
from core.timeouts import Timeout
from core.waiter import wait_for_condition, wait_for_state
from utils.wait_helper import PollingWait


@pytest.mark.unit
class TestFastPath:
    """條件已成立時不進入有界等待"""

    @pytest.mark.unit
    @pytest.mark.parametrize("expected", [True, False])
    def test_already_satisfied_skips_bounded_wait(self, counting_wait, expected):
        calls = {"n": 0}

        def check():
            calls["n"] += 1
            return expected

        wait = counting_wait(result=False)
        assert wait_for_condition(check, expected, Timeout.NORMAL, bounded_wait=wait) is True
        assert wait.call_count == 0
        assert calls["n"] == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("state", list(ElementState))
    @pytest.mark.parametrize("expected", [True, False])
    def test_every_state_short_circuits(self, make_element, counting_wait, state, expected):
        el = make_element(
            exists=expected, is_hittable=expected, is_enabled=expected,
            is_selected=expected, has_focus=expected,
        )
        wait = counting_wait(result=False)
        assert wait_for_state(el, state, expected, Timeout.LOADING, bounded_wait=wait) is True
        assert wait.call_count == 0

    @pytest.mark.unit
    def test_negative_assertion_returns_without_full_timeout(self, make_element):
        """元素已不存在時，expected=False 立即回傳"""
        el = make_element(exists=False)
        start = time.monotonic()
        assert wait_for_state(el, ElementState.EXISTS, False, Timeout.LOADING) is True
        assert time.monotonic() - start < 1.0

    @pytest.mark.unit
    def test_mismatch_falls_through_to_bounded_wait(self, counting_wait):
        wait = counting_wait(result=True)
        assert wait_for_condition(lambda: False, True, Timeout.SHORT, bounded_wait=wait) is True
        assert wait.calls == [Timeout.SHORT]

    @pytest.mark.unit
    def test_fast_check_exception_falls_through(self, counting_wait):
        """快速檢查拋例外時改為輪詢，不往外拋"""
        def boom():
            raise RuntimeError("stale element")

        wait = counting_wait(result=False)
        assert wait_for_condition(boom, True, Timeout.SHORT, bounded_wait=wait) is False
        assert wait.call_count == 1


@pytest.mark.unit
class TestSlowMode:
    """slow=True 一律交給有界等待"""

    @pytest.mark.unit
    def test_slow_skips_fast_check(self, counting_wait):
        calls = {"n": 0}

        def check():
            calls["n"] += 1
            return True

        wait = counting_wait(result=True)
        assert wait_for_condition(check, True, Timeout.SHORT, slow=True, bounded_wait=wait)
        assert wait.call_count == 1
        assert calls["n"] == 0

    @pytest.mark.unit
    def test_condition_flips_before_timeout(self):
        """條件在 timeout 前變為成立 → True"""
        start = time.monotonic()

        def check():
            return time.monotonic() - start >= 0.2

        result = wait_for_condition(
            check, True, Timeout.of(2), slow=True,
            bounded_wait=PollingWait(interval=0.05),
        )
        assert result is True
        assert time.monotonic() - start < 2

    @pytest.mark.unit
    def test_never_satisfied_returns_false_after_timeout(self):
        start = time.monotonic()
        result = wait_for_condition(
            lambda: False, True, Timeout.of(0.3),
            bounded_wait=PollingWait(interval=0.05),
        )
        assert result is False
        assert time.monotonic() - start >= 0.3

    @pytest.mark.unit
    def test_waiter_compares_with_expected(self, counting_wait):
        """傳給有界等待的條件是「check() == expected」"""
        wait = counting_wait()
        assert wait_for_condition(lambda: False, False, Timeout.SHORT, slow=True,
                                  bounded_wait=wait) is True
        assert wait_for_condition(lambda: True, False, Timeout.SHORT, slow=True,
                                  bounded_wait=wait) is False


@pytest.mark.unit
class TestWaitForState:
    """wait_for_state"""

    @pytest.mark.unit
    def test_element_appears_during_wait(self, make_element):
        el = make_element(exists=False)
        start = time.monotonic()

        def appear_later(condition, timeout):
            return PollingWait(interval=0.05)(
                lambda: (setattr(el, "exists", time.monotonic() - start > 0.1) or condition()),
                timeout,
            )

        assert wait_for_state(el, ElementState.EXISTS, True, Timeout.of(1),
                              bounded_wait=appear_later) is True

    @pytest.mark.unit
    def test_defaults_to_exists_true(self, make_element, counting_wait):
        wait = counting_wait(result=False)
        assert wait_for_state(make_element(exists=True), bounded_wait=wait) is True
        assert wait_for_state(make_element(exists=False), bounded_wait=wait) is False
        assert wait.calls == [Timeout.NORMAL]
