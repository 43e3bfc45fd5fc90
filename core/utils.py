"""
core/utils.py

Общие константы и утилиты для Solitaire Cross.
"""

from enum import IntEnum
from typing import Dict


class CellState(IntEnum):
    """Состояние клетки доски."""
    OFF = -1        # Клетка не входит в доску
    EMPTY = 0       # Пустое место
    OCCUPIED = 1    # Колышек


# Символы для отображения
CELL_SYMBOLS: Dict[CellState, str] = {
    CellState.OFF: ' ',
    CellState.EMPTY: '0',
    CellState.OCCUPIED: '1',
}
FROM_SYMBOL = '-'
TO_SYMBOL = '+'

# Предел глубины поиска (ходов)
MAX_DEPTH = 5

# Как часто счётчик ходов пишет прогресс
PROGRESS_INTERVAL = 10_000_000


def index_to_pos(row: int, col: int) -> str:
    """Индекс (row, col) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(col + ord('A'))}{row + 1}"

