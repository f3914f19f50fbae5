"""
ElementQuery — 以 Predicate 逐步縮小的元素查詢

查詢是 lazy 的：每次取值都重新向來源要一次元素，所以同一個 query
可以拿來等待「出現」或「消失」。

用法：
    buttons = ElementQuery(lambda: driver_elements("button"), name="buttons")
    login = buttons.label_containing("Log").label_containing("in").first_match

    wait_for_state(login, ElementState.EXISTS)
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from core.element import ElementHandle
from core.enums import Combinator
from core.predicate import (
    Predicate,
    identifier_containing,
    label_containing,
    label_matching,
    placeholder_containing,
    placeholder_matching,
    value_containing,
    value_matching,
)


class ElementQuery:
    """
    元素來源 + 一串 Predicate

    matching() 回傳新的 query，原 query 不受影響；
    每多一個 Predicate 結果只會更少，不會更多。
    """

    def __init__(self, source: Callable[[], Iterable[ElementHandle]],
                 predicates: tuple[Predicate, ...] = (), name: str = "elements"):
        self._source = source
        self._predicates = predicates
        self.name = name

    @property
    def predicates(self) -> tuple[Predicate, ...]:
        return self._predicates

    def matching(self, predicate: Predicate) -> ElementQuery:
        return ElementQuery(self._source, self._predicates + (predicate,), self.name)

    # ── 便捷寫法 ──

    def label_containing(self, *texts: str, combinator: Combinator = Combinator.AND,
                         case_sensitive: bool = True) -> ElementQuery:
        return self.matching(label_containing(*texts, combinator=combinator,
                                              case_sensitive=case_sensitive))

    def label_matching(self, *texts: str, combinator: Combinator = Combinator.AND,
                       case_sensitive: bool = True) -> ElementQuery:
        return self.matching(label_matching(*texts, combinator=combinator,
                                            case_sensitive=case_sensitive))

    def value_containing(self, *texts: str, combinator: Combinator = Combinator.AND,
                         case_sensitive: bool = True) -> ElementQuery:
        return self.matching(value_containing(*texts, combinator=combinator,
                                              case_sensitive=case_sensitive))

    def value_matching(self, *texts: str, combinator: Combinator = Combinator.AND,
                       case_sensitive: bool = True) -> ElementQuery:
        return self.matching(value_matching(*texts, combinator=combinator,
                                            case_sensitive=case_sensitive))

    def placeholder_containing(self, *texts: str, combinator: Combinator = Combinator.AND,
                               case_sensitive: bool = True) -> ElementQuery:
        return self.matching(placeholder_containing(*texts, combinator=combinator,
                                                    case_sensitive=case_sensitive))

    def placeholder_matching(self, *texts: str, combinator: Combinator = Combinator.AND,
                             case_sensitive: bool = True) -> ElementQuery:
        return self.matching(placeholder_matching(*texts, combinator=combinator,
                                                  case_sensitive=case_sensitive))

    def identifier_containing(self, *texts: str, combinator: Combinator = Combinator.AND,
                              case_sensitive: bool = True) -> ElementQuery:
        return self.matching(identifier_containing(*texts, combinator=combinator,
                                                   case_sensitive=case_sensitive))

    # ── 取值 ──

    def all(self) -> list[ElementHandle]:
        elements = list(self._source())
        for predicate in self._predicates:
            elements = predicate.filter(elements)
        return elements

    @property
    def count(self) -> int:
        return len(self.all())

    @property
    def first_match(self) -> QueriedElement:
        return self.element(0)

    def element(self, index: int) -> QueriedElement:
        return QueriedElement(self, index)

    def __iter__(self) -> Iterator[ElementHandle]:
        return iter(self.all())

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"ElementQuery({self.name}, predicates={len(self._predicates)})"


class QueriedElement:
    """
    query 中第 index 個元素的 lazy handle

    每次讀屬性都重新解析；找不到時 exists 等狀態為 False、文字欄位為 None。
    """

    def __init__(self, query: ElementQuery, index: int = 0):
        self._query = query
        self._index = index

    def resolve(self) -> ElementHandle | None:
        elements = self._query.all()
        if self._index < len(elements):
            return elements[self._index]
        return None

    def _read(self, attr: str, default):
        element = self.resolve()
        if element is None:
            return default
        return getattr(element, attr)

    @property
    def description(self) -> str:
        element = self.resolve()
        if element is not None:
            return element.description
        return f"{self._query.name}[{self._index}]"

    @property
    def exists(self) -> bool:
        return self._read("exists", False)

    @property
    def is_hittable(self) -> bool:
        return self._read("is_hittable", False)

    @property
    def is_enabled(self) -> bool:
        return self._read("is_enabled", False)

    @property
    def is_selected(self) -> bool:
        return self._read("is_selected", False)

    @property
    def has_focus(self) -> bool:
        return self._read("has_focus", False)

    @property
    def label(self) -> str | None:
        return self._read("label", None)

    @property
    def value(self) -> object:
        return self._read("value", None)

    @property
    def placeholder_value(self) -> str | None:
        return self._read("placeholder_value", None)

    @property
    def identifier(self) -> str | None:
        return self._read("identifier", None)
