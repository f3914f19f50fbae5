"""
Predicate Builder — 可組合的元素文字比對條件

把一串文字片段轉成單一 Predicate，用來從元素集合中篩選：

    from core.predicate import label_containing, build_predicate

    # label 同時包含 "Log" 與 "in"
    p = label_containing("Log", "in")

    # label 包含 "Cancel" 或 "Abort"，不分大小寫
    p = label_containing("Cancel", "Abort", combinator=Combinator.OR, case_sensitive=False)

    # label 不包含 "Beta"
    p = label_containing("Beta", combinator=Combinator.NOT)

    # 等價的通用寫法
    p = build_predicate(Field.LABEL, MatchMode.CONTAINS, ["Log", "in"])

    p(element)               # 單一元素是否符合
    p.filter(elements)       # 篩選集合（只會縮小，不會放大）
    p.to_ios_predicate()     # "label CONTAINS 'Log' AND label CONTAINS 'in'"

比對規則：
    CONTAINS — 子字串比對
    MATCHES  — 整串 regex 比對（與 NSPredicate MATCHES 相同，需完整吻合）
    欄位值為 None（屬性不存在）時任何條件都不成立。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field as dataclass_field
from typing import Iterable, Sequence

from core.element import ElementHandle, element_field
from core.enums import Combinator, Field, MatchMode
from core.exceptions import EmptyCriteriaError, InvalidCombinatorError, InvalidPatternError


@dataclass(frozen=True)
class Criterion:
    """
    單一比對片段

    MATCHES 的 regex 在建立時就編譯，寫錯的 pattern 立即拋 InvalidPatternError，
    不會拖到等待時才被當成「尚未成立」而空等到逾時。
    """
    field: Field
    mode: MatchMode
    text: str
    case_sensitive: bool = True
    _pattern: re.Pattern | None = dataclass_field(
        default=None, init=False, repr=False, compare=False,
    )

    def __post_init__(self):
        if self.mode is not MatchMode.MATCHES:
            return
        flags = 0 if self.case_sensitive else re.IGNORECASE
        try:
            pattern = re.compile(self.text, flags)
        except re.error as e:
            raise InvalidPatternError(self.text, str(e)) from e
        object.__setattr__(self, "_pattern", pattern)

    def matches(self, value: str | None) -> bool:
        if value is None:
            return False
        if self.mode is MatchMode.CONTAINS:
            if self.case_sensitive:
                return self.text in value
            return self.text.casefold() in value.casefold()
        return self._pattern.fullmatch(value) is not None

    def to_ios_predicate(self) -> str:
        case_mode = "" if self.case_sensitive else "[c]"
        escaped = self.text.replace("\\", "\\\\").replace("'", "\\'")
        return f"{self.field.value} {self.mode.value}{case_mode} '{escaped}'"


@dataclass(frozen=True)
class Predicate:
    """
    以 Combinator 組合的一組 Criterion，建立後不可變。

    AND 遇到第一個不符就回傳 False；OR 遇到第一個符合就回傳 True；
    NOT 只包一個 Criterion，取其反值。
    """
    criteria: tuple[Criterion, ...]
    combinator: Combinator = Combinator.AND

    def __post_init__(self):
        if not self.criteria:
            raise EmptyCriteriaError()
        if self.combinator is Combinator.NOT and len(self.criteria) != 1:
            raise InvalidCombinatorError(self.combinator.value, len(self.criteria))

    def matches_value(self, value: str | None) -> bool:
        """對單一欄位值求值（所有 Criterion 都比對同一個欄位時使用）"""
        return self._evaluate(lambda criterion: criterion.matches(value))

    def __call__(self, element: ElementHandle) -> bool:
        return self._evaluate(
            lambda criterion: criterion.matches(element_field(element, criterion.field))
        )

    def filter(self, elements: Iterable[ElementHandle]) -> list[ElementHandle]:
        """保留符合的元素，順序不變"""
        return [element for element in elements if self(element)]

    def to_ios_predicate(self) -> str:
        """轉成 XCUITest 的 NSPredicate 字串，可直接給 -ios predicate string locator"""
        parts = [criterion.to_ios_predicate() for criterion in self.criteria]
        if self.combinator is Combinator.NOT:
            return f"NOT ({parts[0]})"
        if len(parts) == 1:
            return parts[0]
        return f" {self.combinator.value} ".join(f"({part})" for part in parts)

    def _evaluate(self, check) -> bool:
        if self.combinator is Combinator.NOT:
            return not check(self.criteria[0])
        if self.combinator is Combinator.OR:
            return any(check(criterion) for criterion in self.criteria)
        return all(check(criterion) for criterion in self.criteria)


def build_predicate(
    field: Field,
    mode: MatchMode,
    texts: Sequence[str],
    combinator: Combinator = Combinator.AND,
    case_sensitive: bool = True,
) -> Predicate:
    """
    建立 Predicate。

    Args:
        field: 要比對的元素欄位
        mode: CONTAINS 或 MATCHES
        texts: 比對文字（至少一段），每段成為一個 Criterion
        combinator: AND / OR / NOT（NOT 只能搭配一段文字）
        case_sensitive: False 時所有 Criterion 都不分大小寫

    Raises:
        EmptyCriteriaError: texts 為空
        InvalidCombinatorError: NOT 搭配多段文字
        InvalidPatternError: MATCHES 模式的 regex 無法編譯
    """
    if isinstance(texts, str):
        texts = [texts]
    if not texts:
        raise EmptyCriteriaError(field.value)
    criteria = tuple(
        Criterion(field=field, mode=mode, text=text, case_sensitive=case_sensitive)
        for text in texts
    )
    return Predicate(criteria=criteria, combinator=combinator)


# ── 各欄位的便捷寫法 ──

def label_containing(*texts: str, combinator: Combinator = Combinator.AND,
                     case_sensitive: bool = True) -> Predicate:
    """label 包含所給文字，例：label_containing("1", "2", case_sensitive=False)"""
    return build_predicate(Field.LABEL, MatchMode.CONTAINS, texts, combinator, case_sensitive)


def label_matching(*texts: str, combinator: Combinator = Combinator.AND,
                   case_sensitive: bool = True) -> Predicate:
    return build_predicate(Field.LABEL, MatchMode.MATCHES, texts, combinator, case_sensitive)


def value_containing(*texts: str, combinator: Combinator = Combinator.AND,
                     case_sensitive: bool = True) -> Predicate:
    return build_predicate(Field.VALUE, MatchMode.CONTAINS, texts, combinator, case_sensitive)


def value_matching(*texts: str, combinator: Combinator = Combinator.AND,
                   case_sensitive: bool = True) -> Predicate:
    return build_predicate(Field.VALUE, MatchMode.MATCHES, texts, combinator, case_sensitive)


def placeholder_containing(*texts: str, combinator: Combinator = Combinator.AND,
                           case_sensitive: bool = True) -> Predicate:
    return build_predicate(
        Field.PLACEHOLDER_VALUE, MatchMode.CONTAINS, texts, combinator, case_sensitive,
    )


def placeholder_matching(*texts: str, combinator: Combinator = Combinator.AND,
                         case_sensitive: bool = True) -> Predicate:
    return build_predicate(
        Field.PLACEHOLDER_VALUE, MatchMode.MATCHES, texts, combinator, case_sensitive,
    )


def identifier_containing(*texts: str, combinator: Combinator = Combinator.AND,
                          case_sensitive: bool = True) -> Predicate:
    return build_predicate(Field.IDENTIFIER, MatchMode.CONTAINS, texts, combinator, case_sensitive)
