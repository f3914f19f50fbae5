"""
日誌模組
統一的 logging 設定，同時輸出到 console 與檔案。

ActivityTrace 記錄 activity 時只帶標題，巢狀深度放在 extra["activity_depth"]：
- 文字輸出（console / 檔案）由 ActivityFormatter 依深度縮排，看得出巢狀結構
- JSON 輸出保留原始標題，深度獨立成 activity_depth 欄位

設定來源（見 config.Config）：
    LOG_LEVEL: console 日誌等級 (預設 INFO)
    LOG_JSON: 設為 "1" 啟用 JSON 結構化日誌檔
    REPORT_DIR: 日誌檔輸出目錄
"""

import json
import logging
import sys
from datetime import datetime, timezone

from config.config import Config

LOGGER_NAME = "screen_verify"

INDENT = "    "


def activity_depth(record: logging.LogRecord) -> int | None:
    """LogRecord 帶的 activity 巢狀深度；不是 activity 的紀錄回傳 None"""
    return getattr(record, "activity_depth", None)


class ActivityFormatter(logging.Formatter):
    """文字格式器：activity 訊息依巢狀深度縮排"""

    def __init__(self):
        super().__init__(
            "[%(asctime)s] %(levelname)-7s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def formatMessage(self, record: logging.LogRecord) -> str:
        depth = activity_depth(record)
        if not depth:
            return super().formatMessage(record)
        original = record.message
        record.message = f"{INDENT * depth}{original}"
        try:
            return super().formatMessage(record)
        finally:
            record.message = original


class JsonFormatter(logging.Formatter):
    """JSON 結構化日誌格式器，適合 ELK / Loki 等日誌系統"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        depth = activity_depth(record)
        if depth is not None:
            log_entry["activity_depth"] = depth
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def _file_handler(path, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def _create_logger() -> logging.Logger:
    _logger = logging.Logger(LOGGER_NAME)
    _logger.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    console.setFormatter(ActivityFormatter())
    _logger.addHandler(console)

    log_dir = Config.REPORT_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    _logger.addHandler(_file_handler(log_dir / "screen_verify.log", ActivityFormatter()))
    if Config.LOG_JSON:
        _logger.addHandler(_file_handler(log_dir / "screen_verify.json.log", JsonFormatter()))

    return _logger


logger = _create_logger()
