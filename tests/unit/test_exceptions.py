"""
core/exceptions.py 單元測試

驗證自訂例外體系的繼承關係、訊息格式、context 欄位。
"""

import pytest

from core.exceptions import (
    ElementAssertionError,
    EmptyCriteriaError,
    InvalidCombinatorError,
    InvalidPatternError,
    InvalidTimeoutError,
    PredicateError,
    PropertyMismatchError,
    PropertyTypeMismatchError,
    ScreenVerifyError,
    StateMismatchError,
)
from core.reporting import Location


@pytest.mark.unit
class TestExceptionHierarchy:
    """測試例外繼承關係"""

    @pytest.mark.unit
    def test_all_inherit_from_base(self):
        """所有例外都繼承 ScreenVerifyError"""
        classes = [
            InvalidTimeoutError, PredicateError, EmptyCriteriaError,
            InvalidCombinatorError, InvalidPatternError, ElementAssertionError, StateMismatchError,
            PropertyMismatchError, PropertyTypeMismatchError,
        ]
        for cls in classes:
            assert issubclass(cls, ScreenVerifyError), f"{cls.__name__} 未繼承 ScreenVerifyError"

    @pytest.mark.unit
    def test_construction_errors_are_value_errors(self):
        """建構參數錯誤同時是 ValueError"""
        assert issubclass(InvalidTimeoutError, ValueError)
        assert issubclass(EmptyCriteriaError, PredicateError)
        assert issubclass(InvalidCombinatorError, ValueError)

    @pytest.mark.unit
    def test_assertion_errors_are_assertion_errors(self):
        """斷言失敗同時是 AssertionError，pytest 直接顯示為 failure"""
        for cls in (StateMismatchError, PropertyMismatchError, PropertyTypeMismatchError):
            assert issubclass(cls, ElementAssertionError)
            assert issubclass(cls, AssertionError)

    @pytest.mark.unit
    def test_catch_base_catches_all(self):
        """catch ScreenVerifyError 能攔截所有子類別"""
        with pytest.raises(ScreenVerifyError):
            raise InvalidTimeoutError("normal", 0)

        with pytest.raises(ScreenVerifyError):
            raise EmptyCriteriaError("label")

        with pytest.raises(ScreenVerifyError):
            raise StateMismatchError("The Login button doesn't exist")


@pytest.mark.unit
class TestExceptionMessages:
    """測試例外訊息格式"""

    @pytest.mark.unit
    def test_invalid_timeout(self):
        e = InvalidTimeoutError("loading", -1)
        assert "loading" in str(e)
        assert "-1" in str(e)

    @pytest.mark.unit
    def test_empty_criteria_with_field(self):
        assert "label" in str(EmptyCriteriaError("label"))

    @pytest.mark.unit
    def test_empty_criteria_without_field(self):
        assert "至少需要一段文字" in str(EmptyCriteriaError())

    @pytest.mark.unit
    def test_invalid_combinator(self):
        e = InvalidCombinatorError("NOT", 2)
        assert "NOT" in str(e)
        assert "2" in str(e)

    @pytest.mark.unit
    def test_invalid_pattern(self):
        e = InvalidPatternError("Log[in", "unterminated character set")
        assert isinstance(e, ValueError)
        assert "Log[in" in str(e)
        assert e.context == {"pattern": "Log[in", "reason": "unterminated character set"}

    @pytest.mark.unit
    def test_assertion_message_unchanged(self):
        e = PropertyMismatchError("Expected label to be equal 'Go', but found 'Stop'.")
        assert str(e) == "Expected label to be equal 'Go', but found 'Stop'."


@pytest.mark.unit
class TestExceptionContext:
    """測試 context 欄位"""

    @pytest.mark.unit
    def test_base_context_default_empty(self):
        """ScreenVerifyError context 預設空 dict"""
        assert ScreenVerifyError("test").context == {}

    @pytest.mark.unit
    def test_timeout_context(self):
        e = InvalidTimeoutError("short", 0)
        assert e.context == {"name": "short", "seconds": 0}

    @pytest.mark.unit
    def test_combinator_context(self):
        e = InvalidCombinatorError("NOT", 3)
        assert e.context["count"] == 3

    @pytest.mark.unit
    def test_assertion_location(self):
        loc = Location("test_login.py", 12)
        e = StateMismatchError("x", location=loc)
        assert e.location == loc
        assert e.context["location"] == loc
