"""
core.element_assertions 單元測試
驗證狀態 / 屬性斷言：快速路徑、逾時失敗訊息、型別不符立即回報、每次只回報一次。
"""

import time

import pytest

from core.element_assertions import (
    assert_element_property,
    assert_element_state,
    assert_property,
    assert_state,
)
from core.enums import ElementState, Property
from core.exceptions import PropertyMismatchError, StateMismatchError
from core.reporting import FailureKind, Location
from core.timeouts import Timeout
from utils.wait_helper import PollingWait

LOC = Location("login_test.py", 7)


@pytest.mark.unit
class TestAssertState:
    """assert_state / assert_element_state"""

    @pytest.mark.unit
    def test_pass_without_waiting(self, recording_sink, counting_wait):
        wait = counting_wait(result=False)
        event = assert_state(ElementState.EXISTS, True, Timeout.NORMAL, lambda: True,
                             "Login button", location=LOC, sink=recording_sink,
                             bounded_wait=wait)
        assert event.passed
        assert wait.call_count == 0
        assert len(recording_sink.events) == 1
        assert recording_sink.last.location == LOC

    @pytest.mark.unit
    def test_failure_message_from_table(self, recording_sink, counting_wait):
        event = assert_state(ElementState.ENABLED, True, Timeout.SHORT, lambda: False,
                             "Login button", location=LOC, sink=recording_sink,
                             bounded_wait=counting_wait(result=False))
        assert not event.passed
        assert event.kind is FailureKind.STATE_MISMATCH
        assert event.message == "❌ - The Login button is disabled"

    @pytest.mark.unit
    def test_negative_failure_describes_actual(self, recording_sink, counting_wait):
        event = assert_state(ElementState.EXISTS, False, Timeout.SHORT, lambda: True,
                             "spinner", location=LOC, sink=recording_sink,
                             bounded_wait=counting_wait(result=False))
        assert event.message == "❌ - The spinner exists"

    @pytest.mark.unit
    def test_waits_when_initially_wrong(self, recording_sink, counting_wait):
        wait = counting_wait(result=True)
        event = assert_state(ElementState.SELECTED, True, Timeout.SHORT, lambda: False,
                             "tab", location=LOC, sink=recording_sink, bounded_wait=wait)
        assert event.passed
        assert wait.calls == [Timeout.SHORT]

    @pytest.mark.unit
    def test_element_version_uses_description(self, make_element, recording_sink, counting_wait):
        el = make_element(description="Error alert", exists=True)
        event = assert_element_state(el, ElementState.EXISTS, False, Timeout.SHORT,
                                     sink=recording_sink,
                                     bounded_wait=counting_wait(result=False))
        assert event.message == "❌ - The Error alert exists"
        assert event.location.file == __file__

    @pytest.mark.unit
    def test_default_sink_raises(self, make_element, counting_wait):
        el = make_element(description="Login button", exists=False)
        with pytest.raises(StateMismatchError, match="doesn't exist"):
            assert_element_state(el, bounded_wait=counting_wait(result=False))


@pytest.mark.unit
class TestAssertProperty:
    """assert_property / assert_element_property"""

    @pytest.mark.unit
    def test_equal_passes_without_wait(self, recording_sink, counting_wait):
        wait = counting_wait(result=False)
        event = assert_property(Property.LABEL, "Go", True, Timeout.NORMAL, lambda: "Go",
                                location=LOC, sink=recording_sink, bounded_wait=wait)
        assert event.passed
        assert wait.call_count == 0

    @pytest.mark.unit
    def test_passing_assertion_reads_value_once(self, make_element, recording_sink,
                                                counting_wait):
        el = make_element(label="Go")
        event = assert_element_property(el, Property.LABEL, "Go", sink=recording_sink,
                                        bounded_wait=counting_wait(result=False))
        assert event.passed
        assert el.reads["label"] == 1

    @pytest.mark.unit
    def test_polling_reads_fresh_value(self, recording_sink, counting_wait):
        reads = []

        def provider():
            reads.append("Stop")
            return "Stop"

        event = assert_property(Property.LABEL, "Go", True, Timeout.SHORT, provider,
                                location=LOC, sink=recording_sink,
                                bounded_wait=counting_wait())
        assert not event.passed
        assert len(reads) == 2

    @pytest.mark.unit
    def test_mismatch_fails_after_timeout_with_both_values(self, recording_sink):
        start = time.monotonic()
        event = assert_property(Property.LABEL, "Go", True, Timeout.of(0.3), lambda: "Stop",
                                location=LOC, sink=recording_sink,
                                bounded_wait=PollingWait(interval=0.05))
        assert time.monotonic() - start >= 0.3
        assert not event.passed
        assert event.kind is FailureKind.PROPERTY_MISMATCH
        assert "Go" in event.message and "Stop" in event.message

    @pytest.mark.unit
    def test_inequality(self, recording_sink, counting_wait):
        event = assert_property(Property.VALUE, "Jane Doe", False, Timeout.SHORT,
                                lambda: "John", location=LOC, sink=recording_sink,
                                bounded_wait=counting_wait(result=False))
        assert event.passed

    @pytest.mark.unit
    def test_inequality_failure_message(self, recording_sink, counting_wait):
        event = assert_property(Property.VALUE, "Jane Doe", False, Timeout.SHORT,
                                lambda: "Jane Doe", location=LOC, sink=recording_sink,
                                bounded_wait=counting_wait())
        assert not event.passed
        assert "not to be equal 'Jane Doe'" in event.message

    @pytest.mark.unit
    def test_value_changes_during_wait(self, recording_sink):
        values = iter(["Loading", "Loading", "Done"])
        last = {"v": "Loading"}

        def provider():
            last["v"] = next(values, last["v"])
            return last["v"]

        event = assert_property(Property.LABEL, "Done", True, Timeout.of(1), provider,
                                location=LOC, sink=recording_sink,
                                bounded_wait=PollingWait(interval=0.01))
        assert event.passed

    @pytest.mark.unit
    def test_last_observed_value_in_message(self, recording_sink):
        values = iter(["A", "B", "C"])
        last = {"v": "A"}

        def provider():
            last["v"] = next(values, last["v"])
            return last["v"]

        event = assert_property(Property.LABEL, "Z", True, Timeout.of(0.2), provider,
                                location=LOC, sink=recording_sink,
                                bounded_wait=PollingWait(interval=0.01))
        assert "found 'C'" in event.message

    @pytest.mark.unit
    @pytest.mark.parametrize("actual", [None, 42, b"bytes"])
    def test_type_mismatch_reported_immediately(self, recording_sink, counting_wait, actual):
        wait = counting_wait(result=True)
        event = assert_property(Property.VALUE, "1", True, Timeout.LOADING, lambda: actual,
                                location=LOC, sink=recording_sink, bounded_wait=wait)
        assert not event.passed
        assert event.kind is FailureKind.PROPERTY_TYPE_MISMATCH
        assert wait.call_count == 0
        assert len(recording_sink.events) == 1

    @pytest.mark.unit
    def test_element_version(self, make_element, recording_sink, counting_wait):
        el = make_element(placeholder_value="Email")
        event = assert_element_property(el, Property.PLACEHOLDER_VALUE, "Email",
                                        sink=recording_sink,
                                        bounded_wait=counting_wait(result=False))
        assert event.passed

    @pytest.mark.unit
    def test_element_non_string_value(self, make_element, recording_sink, counting_wait):
        el = make_element(value=3.5)
        event = assert_element_property(el, Property.VALUE, "3.5", sink=recording_sink,
                                        bounded_wait=counting_wait(result=True))
        assert event.kind is FailureKind.PROPERTY_TYPE_MISMATCH

    @pytest.mark.unit
    def test_default_sink_raises(self, make_element, counting_wait):
        el = make_element(label="Stop")
        with pytest.raises(PropertyMismatchError, match="found 'Stop'"):
            assert_element_property(el, Property.LABEL, "Go",
                                    bounded_wait=counting_wait(result=False))
