"""
pytest 全域 fixtures

提供：
- 假元素（可隨時改狀態 / 屬性）
- 可計數的有界等待替身
- 隔離的 ActivityTrace 與 RecordingSink
- 命令列參數 --platform
"""

from dataclasses import dataclass, field

import pytest

from config.config import Config
from core.activity import ActivityTrace
from core.reporting import RecordingSink
from utils.logger import logger


# ── 命令列參數 ──

def pytest_addoption(parser):
    """新增自訂命令列參數"""
    parser.addoption(
        "--platform",
        action="store",
        default="ios",
        choices=["android", "ios"],
        help="測試平台: android 或 ios",
    )


def pytest_configure(config):
    """pytest 啟動時：註冊 marker 並驗證設定，設定錯誤時直接中止"""
    config.addinivalue_line("markers", "unit: 不需要裝置的單元測試")
    Config.validate()
    logger.debug(f"設定驗證通過: PLATFORM={Config.PLATFORM}")


@pytest.fixture(scope="session")
def platform(request) -> str:
    """取得測試平台"""
    return request.config.getoption("--platform")


# ── 測試替身 ──

@dataclass
class FakeElement:
    """可直接改欄位的 ElementHandle 替身"""
    description: str = "fake element"
    exists: bool = True
    is_hittable: bool = True
    is_enabled: bool = True
    is_selected: bool = False
    has_focus: bool = False
    label: str | None = ""
    value: object = ""
    placeholder_value: str | None = ""
    identifier: str | None = ""
    reads: dict = field(default_factory=dict)

    def __getattribute__(self, name):
        if name in ("exists", "is_hittable", "is_enabled", "is_selected", "has_focus",
                    "label", "value", "placeholder_value", "identifier"):
            reads = object.__getattribute__(self, "reads")
            reads[name] = reads.get(name, 0) + 1
        return object.__getattribute__(self, name)


class CountingWait:
    """
    有界等待替身：記錄呼叫次數，不真的睡。

    result=None 時實際呼叫 condition 一次並回傳其結果。
    """

    def __init__(self, result: bool | None = None):
        self.result = result
        self.calls: list = []

    def __call__(self, condition, timeout) -> bool:
        self.calls.append(timeout)
        if self.result is None:
            return bool(condition())
        return self.result

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def make_element():
    """建立 FakeElement 的工廠"""
    return FakeElement


@pytest.fixture
def counting_wait():
    return CountingWait


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def trace() -> ActivityTrace:
    """每個測試獨立的 ActivityTrace"""
    return ActivityTrace()


def pytest_runtest_setup(item):
    logger.debug(f"===== 開始測試: {item.name} =====")
