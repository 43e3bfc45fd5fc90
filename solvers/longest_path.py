"""
solvers/longest_path.py

Поиск самой длинной последовательности ходов в пределах глубины.
"""

import time
from typing import List

from .base import BaseSolver, SolverStats
from core.board import Board
from core.move import Move
from core.utils import PROGRESS_INTERVAL
from utils.monitoring import MoveCounter


class LongestPathSolver(BaseSolver):
    """
    Полный перебор в глубину с отсечением симметричных ходов.

    Особенности:
    - Без мемоизации
    - Глубина ограничена max_depth доски
    - При равной длине выигрывает путь, найденный первым
    - stop_at_depth_cap: не перебирать оставшихся детей, если путь уже
      достиг предела глубины (результат тот же)
    """

    def __init__(self, verbose: bool = False, stop_at_depth_cap: bool = False,
                 progress_interval: int = PROGRESS_INTERVAL):
        super().__init__(verbose)
        self.stop_at_depth_cap = stop_at_depth_cap
        self.progress_interval = progress_interval
        self.counter = MoveCounter(progress_interval)

    def solve(self, board: Board) -> List[Move]:
        """
        Ищет самую длинную последовательность ходов.

        Args:
            board: начальная позиция

        Returns:
            Ходы от начальной позиции (без уже сделанных на board)
        """
        self.stats = SolverStats()
        self.counter = MoveCounter(self.progress_interval)
        start = time.perf_counter()

        self._log(f"Starting longest path search (pegs={board.peg_count()}, "
                  f"max_depth={board.max_depth}, symmetries={len(board.symmetries)})")
        best = board.get_best_move_list(self.counter, self.stop_at_depth_cap)
        result = list(best[len(board.moves):])

        self.stats.time_elapsed = time.perf_counter() - start
        self.stats.nodes_visited = self.counter.count
        self.stats.max_depth = len(best)
        self.stats.solution_length = len(result)

        self._log(f"Best path: {len(result)} moves")
        self._log(f"Stats: {self.stats}")
        return result
