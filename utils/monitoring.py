"""
utils/monitoring.py

Счётчик применённых ходов.
"""

from core.utils import PROGRESS_INTERVAL
from .logging import get_logger


class MoveCounter:
    """
    Счётчик применённых ходов.

    Передаётся в поиск явно; каждые interval ходов пишет в лог
    накопленное значение.
    """

    def __init__(self, interval: int = PROGRESS_INTERVAL):
        self.count = 0
        self.interval = interval
        self.logger = get_logger()

    def increment(self) -> int:
        self.count += 1
        if self.interval and self.count % self.interval == 0:
            self.logger.info(f"{self.count}")
        return self.count

    def __repr__(self) -> str:
        return f"MoveCounter({self.count})"
