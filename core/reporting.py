"""
Reporting Sink — 斷言結果的出口

元素斷言不直接 raise，而是把 (passed, message, location) 交給 sink，
由 sink 決定如何呈現：

    AssertSink     失敗時拋出對應的 ElementAssertionError（預設，等同 hard assert）
    SoftSink       收集所有失敗，離開 with 時一次拋出
    RecordingSink  只記錄，不拋出（給單元測試或自訂報表用）

用法：
    from core.reporting import SoftSink

    with SoftSink() as sink:
        assert_element_state(title, sink=sink)
        assert_element_property(price, Property.LABEL, "$10", sink=sink)
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from core.exceptions import (
    ElementAssertionError,
    PropertyMismatchError,
    PropertyTypeMismatchError,
    StateMismatchError,
)
from utils.allure_helper import attach_text
from utils.logger import logger


class FailureKind(Enum):
    STATE_MISMATCH = "state_mismatch"
    PROPERTY_MISMATCH = "property_mismatch"
    PROPERTY_TYPE_MISMATCH = "property_type_mismatch"


@dataclass(frozen=True)
class Location:
    """斷言呼叫點"""
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


def caller_location(depth: int = 1) -> Location:
    """
    取得呼叫端位置。

    Args:
        depth: 往上幾層；1 = 呼叫 caller_location() 的函式的呼叫者
    """
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame else None
        for _ in range(depth):
            if target is None or target.f_back is None:
                break
            target = target.f_back
        if target is None:
            return Location("<unknown>", 0)
        return Location(target.f_code.co_filename, target.f_lineno)
    finally:
        del frame


def caller_location_outside(instance, also_skip: tuple[type, ...] = ()) -> Location:
    """
    取得第一個不屬於 instance（或 also_skip 類別實例）方法的呼叫端位置。

    子類別覆寫 __init__ 再呼叫 super().__init__() 時，
    中間經過幾層都一樣指向建立物件的那一行。
    """
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame else None
        while target is not None:
            owner = target.f_locals.get("self")
            if owner is not instance and not isinstance(owner, also_skip):
                break
            target = target.f_back
        if target is None:
            return Location("<unknown>", 0)
        return Location(target.f_code.co_filename, target.f_lineno)
    finally:
        del frame


@dataclass(frozen=True)
class AssertionEvent:
    """單次斷言結果"""
    passed: bool
    message: str
    location: Location
    kind: FailureKind | None = None


class ReportingSink(Protocol):
    def report(self, passed: bool, message: str, location: Location,
               kind: FailureKind | None = None) -> AssertionEvent: ...


_ERROR_TYPES: dict[FailureKind | None, type[ElementAssertionError]] = {
    FailureKind.STATE_MISMATCH: StateMismatchError,
    FailureKind.PROPERTY_MISMATCH: PropertyMismatchError,
    FailureKind.PROPERTY_TYPE_MISMATCH: PropertyTypeMismatchError,
    None: ElementAssertionError,
}


def _log_event(event: AssertionEvent) -> None:
    if event.passed:
        logger.debug(f"[Assert] 通過 @ {event.location}")
    else:
        logger.error(f"[Assert] {event.message} @ {event.location}")
        attach_text(f"{event.message}\n{event.location}", name="斷言失敗")


class RecordingSink:
    """只記錄結果，不中斷測試"""

    def __init__(self, max_events: int | None = None):
        self.events: list[AssertionEvent] = []
        self._max_events = max_events

    def report(self, passed: bool, message: str, location: Location,
               kind: FailureKind | None = None) -> AssertionEvent:
        event = AssertionEvent(passed, message, location, kind)
        self.events.append(event)
        if self._max_events and len(self.events) > self._max_events:
            self.events = self.events[-self._max_events:]
        _log_event(event)
        return event

    @property
    def failures(self) -> list[AssertionEvent]:
        return [e for e in self.events if not e.passed]

    @property
    def last(self) -> AssertionEvent | None:
        return self.events[-1] if self.events else None


class AssertSink(RecordingSink):
    """失敗時立即拋出 ElementAssertionError 子類別"""

    def report(self, passed: bool, message: str, location: Location,
               kind: FailureKind | None = None) -> AssertionEvent:
        event = super().report(passed, message, location, kind)
        if not passed:
            raise _ERROR_TYPES[kind](f"{message} ({location})", location=location)
        return event


class SoftSink(RecordingSink):
    """
    Soft 版本：收集所有失敗，離開 with 時才一次拋出

        with SoftSink() as sink:
            ...
    """

    def __enter__(self) -> SoftSink:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            return
        failures = self.failures
        if failures:
            summary = f"Soft Assert: {len(failures)} 項失敗\n"
            for i, event in enumerate(failures, 1):
                summary += f"  {i}. {event.message} ({event.location})\n"
            raise AssertionError(summary)

    @property
    def failure_count(self) -> int:
        return len(self.failures)


default_sink = AssertSink(max_events=500)
