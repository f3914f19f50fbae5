from utils.logger import logger
from utils.wait_helper import PollingWait

__all__ = [
    "logger",
    "PollingWait",
]
