"""
共用列舉

ElementState / Property 決定要驗證元素的哪個面向，
Field / MatchMode / Combinator 組成 predicate，
Icon 只是 activity 標題前綴的裝飾，Tabs 是 tab bar 的分頁名稱。
"""

from enum import Enum


class ElementState(Enum):
    """元素的布林狀態，value 為 XCUITest 的屬性名稱"""
    EXISTS = "exists"
    HITTABLE = "isHittable"
    ENABLED = "isEnabled"
    SELECTED = "isSelected"
    FOCUSED = "hasFocus"


class Property(Enum):
    """元素的字串屬性"""
    LABEL = "label"
    VALUE = "value"
    PLACEHOLDER_VALUE = "placeholderValue"


class Field(Enum):
    """predicate 可比對的文字欄位"""
    LABEL = "label"
    VALUE = "value"
    PLACEHOLDER_VALUE = "placeholderValue"
    IDENTIFIER = "identifier"


class MatchMode(Enum):
    CONTAINS = "CONTAINS"
    MATCHES = "MATCHES"


class Combinator(Enum):
    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class Icon(Enum):
    SCREEN = "⏹️"
    STEP = "🔹"
    ASSERT = "☑️"
    ERROR = "❌"
    TEST = "🔵"

    def __str__(self) -> str:
        return self.value


class Tabs(Enum):
    """Tab bar 上的分頁，value 為按鈕的 label；請依 App 實際分頁修改"""
    HOME = "Home"
    PROFILE = "Profile"
    SETTINGS = "Settings"
