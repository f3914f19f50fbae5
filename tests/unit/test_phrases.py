"""
core.phrases 單元測試
訊息表必須涵蓋所有 (狀態, 預期) 組合，且兩張表語意相反。
"""

import itertools

import pytest

from core.enums import ElementState, Property
from core.phrases import (
    ACTIVITY_STATE_PHRASES,
    FAILURE_STATE_PHRASES,
    property_activity_phrase,
    property_failure_message,
    property_type_mismatch_message,
    state_activity_phrase,
    state_failure_phrase,
)

ALL_PAIRS = list(itertools.product(ElementState, [True, False]))


@pytest.mark.unit
class TestStateTables:
    """狀態訊息表"""

    @pytest.mark.unit
    def test_tables_are_exhaustive(self):
        assert set(ACTIVITY_STATE_PHRASES) == set(ALL_PAIRS)
        assert set(FAILURE_STATE_PHRASES) == set(ALL_PAIRS)

    @pytest.mark.unit
    @pytest.mark.parametrize("state,expected", ALL_PAIRS)
    def test_failure_describes_opposite_of_expectation(self, state, expected):
        """失敗訊息 = 相反預期的 activity 描述"""
        assert state_failure_phrase(state, expected) == state_activity_phrase(state, not expected)

    @pytest.mark.unit
    def test_known_phrases(self):
        assert state_failure_phrase(ElementState.EXISTS, False) == "exists"
        assert state_failure_phrase(ElementState.EXISTS, True) == "doesn't exist"
        assert state_failure_phrase(ElementState.ENABLED, True) == "is disabled"
        assert state_activity_phrase(ElementState.FOCUSED, False) == "has no focus"
        assert state_activity_phrase(ElementState.HITTABLE, False) == "isn't hittable"

    @pytest.mark.unit
    def test_unknown_key_is_not_defaulted(self):
        with pytest.raises(KeyError):
            state_failure_phrase("exists", True)


@pytest.mark.unit
class TestPropertyPhrases:
    """屬性訊息"""

    @pytest.mark.unit
    def test_activity_phrase(self):
        assert property_activity_phrase(Property.LABEL, "Go", True) == "label is equal to Go"
        assert property_activity_phrase(Property.VALUE, "x", False) == "value isn't equal to x"

    @pytest.mark.unit
    def test_failure_message_contains_both_values(self):
        msg = property_failure_message(Property.LABEL, "Go", "Stop", True)
        assert "'Go'" in msg and "'Stop'" in msg
        assert msg == "Expected label to be equal 'Go', but found 'Stop'."

    @pytest.mark.unit
    def test_failure_message_negated(self):
        msg = property_failure_message(Property.PLACEHOLDER_VALUE, "Email", "Email", False)
        assert msg.startswith("Expected placeholderValue not to be equal 'Email'")

    @pytest.mark.unit
    def test_type_mismatch_message(self):
        assert "'value'" in property_type_mismatch_message(Property.VALUE)
