"""
自訂 Exception 體系

統一的錯誤處理階層，讓每種失敗都有明確的分類與訊息。
上層可以 catch 大類別 (如 ScreenVerifyError)，
也可以精準 catch 子類別 (如 PropertyTypeMismatchError)。

Exception 樹：
    ScreenVerifyError
    ├── InvalidTimeoutError (ValueError)
    ├── PredicateError (ValueError)
    │   ├── EmptyCriteriaError
    │   ├── InvalidCombinatorError
    │   └── InvalidPatternError
    └── ElementAssertionError (AssertionError)
        ├── StateMismatchError
        ├── PropertyMismatchError
        └── PropertyTypeMismatchError

注意：等待逾時不是例外，wait 系列函式只回傳 False。
"""


class ScreenVerifyError(Exception):
    """框架所有例外的基底，catch 這個就能攔截一切框架錯誤"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)


class InvalidTimeoutError(ScreenVerifyError, ValueError):
    """Timeout 必須是正數"""

    def __init__(self, name: str = "", seconds: float = 0):
        super().__init__(
            f"Timeout '{name}' 必須大於 0，實際 {seconds}",
            context={"name": name, "seconds": seconds},
        )


# ── Predicate 建構 ──

class PredicateError(ScreenVerifyError, ValueError):
    """Predicate 建構參數不合法"""


class EmptyCriteriaError(PredicateError):
    """沒有提供任何比對文字"""

    def __init__(self, field: str = ""):
        msg = f"建立 {field} predicate 至少需要一段文字" if field else "建立 predicate 至少需要一段文字"
        super().__init__(msg, context={"field": field})


class InvalidCombinatorError(PredicateError):
    """NOT 只能套用在單一條件上"""

    def __init__(self, combinator: str = "", count: int = 0):
        super().__init__(
            f"{combinator} 只能搭配 1 個條件，實際 {count} 個",
            context={"combinator": combinator, "count": count},
        )


class InvalidPatternError(PredicateError):
    """MATCHES 模式的 regex 無法編譯"""

    def __init__(self, pattern: str = "", reason: str = ""):
        super().__init__(
            f"無效的 regex '{pattern}': {reason}",
            context={"pattern": pattern, "reason": reason},
        )


# ── 元素斷言 ──

class ElementAssertionError(ScreenVerifyError, AssertionError):
    """元素斷言失敗，pytest 會當成一般 assertion failure 顯示"""

    def __init__(self, message: str = "", location=None):
        self.location = location
        super().__init__(message, context={"location": location})


class StateMismatchError(ElementAssertionError):
    """逾時後元素狀態仍不符預期"""


class PropertyMismatchError(ElementAssertionError):
    """逾時後元素屬性值仍不符預期"""


class PropertyTypeMismatchError(ElementAssertionError):
    """屬性不存在或不是字串，未進行等待"""
