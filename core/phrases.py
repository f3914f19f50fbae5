"""
訊息表

同一組 (狀態, 預期) 在兩個地方需要文字：
- activity 標題描述「正在驗證什麼」 → "Verifying if the Login button exists"
- 失敗訊息描述「實際看到的錯誤狀態」 → "The Login button doesn't exist"

表格必須涵蓋每個 (ElementState, bool) 組合，查不到就是 bug，直接 KeyError。
"""

from core.enums import ElementState, Property

ACTIVITY_STATE_PHRASES: dict[tuple[ElementState, bool], str] = {
    (ElementState.EXISTS, True): "exists",
    (ElementState.EXISTS, False): "doesn't exist",
    (ElementState.HITTABLE, True): "is hittable",
    (ElementState.HITTABLE, False): "isn't hittable",
    (ElementState.ENABLED, True): "is enabled",
    (ElementState.ENABLED, False): "is disabled",
    (ElementState.SELECTED, True): "is selected",
    (ElementState.SELECTED, False): "isn't selected",
    (ElementState.FOCUSED, True): "has focus",
    (ElementState.FOCUSED, False): "has no focus",
}

FAILURE_STATE_PHRASES: dict[tuple[ElementState, bool], str] = {
    (ElementState.EXISTS, True): "doesn't exist",
    (ElementState.EXISTS, False): "exists",
    (ElementState.HITTABLE, True): "isn't hittable",
    (ElementState.HITTABLE, False): "is hittable",
    (ElementState.ENABLED, True): "is disabled",
    (ElementState.ENABLED, False): "is enabled",
    (ElementState.SELECTED, True): "isn't selected",
    (ElementState.SELECTED, False): "is selected",
    (ElementState.FOCUSED, True): "has no focus",
    (ElementState.FOCUSED, False): "has focus",
}


def state_activity_phrase(state: ElementState, expected: bool) -> str:
    return ACTIVITY_STATE_PHRASES[(state, expected)]


def state_failure_phrase(state: ElementState, expected: bool) -> str:
    return FAILURE_STATE_PHRASES[(state, expected)]


def property_activity_phrase(prop: Property, equal_to: str, expected: bool) -> str:
    verb = "is" if expected else "isn't"
    return f"{prop.value} {verb} equal to {equal_to}"


def property_failure_message(prop: Property, equal_to: str, actual: str, expected: bool) -> str:
    relation = "to be equal" if expected else "not to be equal"
    return f"Expected {prop.value} {relation} '{equal_to}', but found '{actual}'."


def property_type_mismatch_message(prop: Property) -> str:
    return f"Property '{prop.value}' is nil or not of type String."
