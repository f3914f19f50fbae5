"""
設定管理模組
統一管理平台、等待逾時、輪詢間隔與報告輸出目錄等設定。
支援透過環境變數覆蓋預設值，方便 CI/CD 整合（例如較慢的模擬器可拉長逾時）。
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

_SUPPORTED_PLATFORMS = ("android", "ios")

_DURATION_KEYS = ("LOADING_TIMEOUT", "NORMAL_TIMEOUT", "SHORT_TIMEOUT", "POLL_INTERVAL")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigValidationError(Exception):
    """設定驗證失敗"""

    def __init__(self, errors: list[str]):
        self.errors = errors
        msg = "設定驗證失敗:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg)


def _float_env(key: str, default: str) -> float:
    raw = os.getenv(key, default)
    try:
        return float(raw)
    except ValueError:
        raise ConfigValidationError([f"{key}={raw} 必須是數字"])


class Config:
    """框架全域設定"""

    # 平台（決定元素屬性名稱對應）
    PLATFORM = os.getenv("PLATFORM", "ios").lower()

    # 逾時設定 (秒)
    LOADING_TIMEOUT = _float_env("LOADING_TIMEOUT", "20")
    NORMAL_TIMEOUT = _float_env("NORMAL_TIMEOUT", "3")
    SHORT_TIMEOUT = _float_env("SHORT_TIMEOUT", "1")

    # 輪詢間隔 (秒)
    POLL_INTERVAL = _float_env("POLL_INTERVAL", "0.25")

    # 日誌與報告
    REPORT_DIR = Path(os.getenv("REPORT_DIR", str(BASE_DIR / "reports")))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_JSON = os.getenv("LOG_JSON", "").strip() == "1"

    @classmethod
    def validate(cls) -> None:
        """
        驗證目前設定。

        Raises:
            ConfigValidationError: 平台或日誌等級不支援，或任一時間設定不為正數
        """
        errors: list[str] = []

        if cls.PLATFORM not in _SUPPORTED_PLATFORMS:
            errors.append(
                f"PLATFORM={cls.PLATFORM} 不支援，僅限 {', '.join(_SUPPORTED_PLATFORMS)}"
            )
        if cls.LOG_LEVEL not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL={cls.LOG_LEVEL} 不支援，僅限 {', '.join(_LOG_LEVELS)}")
        for key in _DURATION_KEYS:
            value = getattr(cls, key)
            if value <= 0:
                errors.append(f"{key}={value} 必須大於 0")

        if errors:
            raise ConfigValidationError(errors)
