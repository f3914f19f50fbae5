"""
core — 框架核心

統一匯出所有核心元件，方便外部 import。

用法：
    from core import BaseScreen, ElementState, Property, Timeout
    from core import label_containing, wait_for_state, assert_element_state
    from core import activity_trace, SoftSink
    from core import StateMismatchError, PropertyTypeMismatchError
"""

from core.activity import (
    ActivityRecord,
    ActivityTrace,
    activity_trace,
    run_activity,
    run_property_activity,
    run_state_activity,
    run_test_activity,
)
from core.base_screen import BaseScreen
from core.element import ElementHandle, element_field, element_property, element_state
from core.element_assertions import (
    assert_element_property,
    assert_element_state,
    assert_property,
    assert_state,
)
from core.enums import Combinator, ElementState, Field, Icon, MatchMode, Property, Tabs
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
from core.predicate import (
    Criterion,
    Predicate,
    build_predicate,
    identifier_containing,
    label_containing,
    label_matching,
    placeholder_containing,
    placeholder_matching,
    value_containing,
    value_matching,
)
from core.query import ElementQuery, QueriedElement
from core.reporting import (
    AssertionEvent,
    AssertSink,
    FailureKind,
    Location,
    RecordingSink,
    SoftSink,
    caller_location,
    caller_location_outside,
    default_sink,
)
from core.timeouts import Timeout
from core.waiter import wait_for_condition, wait_for_state

__all__ = [
    # Screen
    "BaseScreen",
    # Enums / Timeout
    "ElementState",
    "Property",
    "Field",
    "MatchMode",
    "Combinator",
    "Icon",
    "Tabs",
    "Timeout",
    # Element / Query
    "ElementHandle",
    "element_state",
    "element_field",
    "element_property",
    "ElementQuery",
    "QueriedElement",
    # Predicate
    "Criterion",
    "Predicate",
    "build_predicate",
    "label_containing",
    "label_matching",
    "value_containing",
    "value_matching",
    "placeholder_containing",
    "placeholder_matching",
    "identifier_containing",
    # Wait / Assert
    "wait_for_condition",
    "wait_for_state",
    "assert_state",
    "assert_property",
    "assert_element_state",
    "assert_element_property",
    # Reporting / Activity
    "AssertionEvent",
    "AssertSink",
    "SoftSink",
    "RecordingSink",
    "FailureKind",
    "Location",
    "caller_location",
    "caller_location_outside",
    "default_sink",
    "ActivityRecord",
    "ActivityTrace",
    "activity_trace",
    "run_activity",
    "run_state_activity",
    "run_property_activity",
    "run_test_activity",
    # Exceptions
    "ScreenVerifyError",
    "InvalidTimeoutError",
    "PredicateError",
    "EmptyCriteriaError",
    "InvalidCombinatorError",
    "InvalidPatternError",
    "ElementAssertionError",
    "StateMismatchError",
    "PropertyMismatchError",
    "PropertyTypeMismatchError",
]
