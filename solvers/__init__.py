"""
solvers - Решатели Solitaire Cross

Экспортирует:
- LongestPathSolver: полный перебор с отсечением симметрий
"""

from .base import BaseSolver, SolverStats
from .longest_path import LongestPathSolver

__all__ = [
    'BaseSolver',
    'SolverStats',
    'LongestPathSolver',
]
