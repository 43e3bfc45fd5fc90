"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from core.board import Board
from core.move import Move
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Наследники реализуют метод solve().
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    def solve(self, board: Board) -> List[Move]:
        """
        Ищет последовательность ходов.

        Args:
            board: начальная позиция

        Returns:
            Список ходов
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог: INFO при verbose=True, иначе DEBUG."""
        message = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            self.logger.info(message)
        else:
            self.logger.debug(message)

    @staticmethod
    def format_solution(moves: List[Move]) -> List[str]:
        """Форматирует список ходов."""
        return [move.notation() for move in moves]
