"""
具名逾時

每個呼叫點挑一個 Timeout，而不是散落各處的魔術數字：

    from core.timeouts import Timeout

    wait_for_state(button, timeout=Timeout.LOADING)
    wait_for_state(toast, timeout=Timeout.of(0.5, "toast"))

內建 LOADING / NORMAL / SHORT 的秒數可由環境變數覆蓋（見 config.config）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from config.config import Config
from core.exceptions import InvalidTimeoutError


@dataclass(frozen=True)
class Timeout:
    """不可變的具名等待時間，秒數必須大於 0"""
    name: str
    seconds: float

    LOADING: ClassVar[Timeout]
    NORMAL: ClassVar[Timeout]
    SHORT: ClassVar[Timeout]

    def __post_init__(self):
        if not self.seconds > 0:
            raise InvalidTimeoutError(self.name, self.seconds)

    @classmethod
    def of(cls, seconds: float, name: str = "custom") -> Timeout:
        return cls(name=name, seconds=float(seconds))

    def __str__(self) -> str:
        return f"{self.name}({self.seconds:g}s)"


Timeout.LOADING = Timeout("loading", Config.LOADING_TIMEOUT)
Timeout.NORMAL = Timeout("normal", Config.NORMAL_TIMEOUT)
Timeout.SHORT = Timeout("short", Config.SHORT_TIMEOUT)
