"""
有界等待工具
提供引擎唯一會阻塞的地方：在時限內反覆檢查條件，直到成立或逾時。

用法：
    from utils.wait_helper import PollingWait

    wait = PollingWait(interval=0.2)
    ok = wait(lambda: element.exists, Timeout.NORMAL)   # True / False，不拋例外

    # 測試時可注入假時鐘
    wait = PollingWait(clock=fake_clock.now, sleep=fake_clock.advance)
"""

import time
from typing import Callable

from config.config import Config
from utils.logger import logger


class PollingWait:
    """
    以輪詢實作的有界等待

    - 至少檢查一次條件
    - 條件拋出例外視為「尚未成立」，逾時時記錄最後一個例外
    - 不會睡超過剩餘時間，逾時後立即回傳 False
    """

    def __init__(
        self,
        interval: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.interval = interval if interval is not None else Config.POLL_INTERVAL
        self._clock = clock
        self._sleep = sleep

    def __call__(self, condition: Callable[[], bool], timeout) -> bool:
        """
        等待條件成立。

        Args:
            condition: 回傳 bool 的 callable
            timeout: Timeout 物件或秒數

        Returns:
            逾時前成立回傳 True，否則 False
        """
        seconds = getattr(timeout, "seconds", timeout)
        end_time = self._clock() + seconds
        last_exception = None
        polls = 0

        while True:
            polls += 1
            try:
                if condition():
                    logger.debug(f"[Wait] 第 {polls} 次檢查成立")
                    return True
            except Exception as e:
                last_exception = e

            remaining = end_time - self._clock()
            if remaining <= 0:
                break
            self._sleep(min(self.interval, remaining))

        msg = f"[Wait] 等待逾時 ({timeout})，共檢查 {polls} 次"
        if last_exception:
            msg += f" | 最後的例外: {last_exception}"
        logger.debug(msg)
        return False
