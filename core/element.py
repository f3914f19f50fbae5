"""
ElementHandle — 可查詢狀態的 UI 元素抽象

引擎只透過這個介面讀取元素，不關心背後是 Appium、假物件還是其他 driver。
實作見 core.appium_element.AppiumElement 與 core.query.QueriedElement。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.enums import ElementState, Field, Property


@runtime_checkable
class ElementHandle(Protocol):
    """UI 元素需提供的唯讀能力"""

    @property
    def description(self) -> str: ...

    @property
    def exists(self) -> bool: ...

    @property
    def is_hittable(self) -> bool: ...

    @property
    def is_enabled(self) -> bool: ...

    @property
    def is_selected(self) -> bool: ...

    @property
    def has_focus(self) -> bool: ...

    @property
    def label(self) -> str | None: ...

    @property
    def value(self) -> object: ...

    @property
    def placeholder_value(self) -> str | None: ...

    @property
    def identifier(self) -> str | None: ...


_STATE_ACCESSORS = {
    ElementState.EXISTS: "exists",
    ElementState.HITTABLE: "is_hittable",
    ElementState.ENABLED: "is_enabled",
    ElementState.SELECTED: "is_selected",
    ElementState.FOCUSED: "has_focus",
}

_FIELD_ACCESSORS = {
    Field.LABEL: "label",
    Field.VALUE: "value",
    Field.PLACEHOLDER_VALUE: "placeholder_value",
    Field.IDENTIFIER: "identifier",
}

_PROPERTY_FIELDS = {
    Property.LABEL: Field.LABEL,
    Property.VALUE: Field.VALUE,
    Property.PLACEHOLDER_VALUE: Field.PLACEHOLDER_VALUE,
}


def element_state(element: ElementHandle, state: ElementState) -> bool:
    """讀取元素目前的布林狀態"""
    return bool(getattr(element, _STATE_ACCESSORS[state]))


def element_field(element: ElementHandle, field: Field) -> str | None:
    """讀取元素的文字欄位；值不存在或不是字串時回傳 None"""
    raw = getattr(element, _FIELD_ACCESSORS[field])
    return raw if isinstance(raw, str) else None


def element_property(element: ElementHandle, prop: Property) -> str | None:
    return element_field(element, _PROPERTY_FIELDS[prop])
