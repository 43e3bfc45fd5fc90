"""
core/shape.py

Форма доски: маска клеток и начальная раскладка.
"""

from typing import Sequence, Tuple

from utils.error_handling import InvalidBoardError
from .geometry import Location
from .move import Direction, Move
from .utils import CellState

_OFF = CellState.OFF
_FREE = CellState.EMPTY
_FULL = CellState.OCCUPIED

# Крест из 33 клеток, центр пустой
CROSS_LAYOUT: Tuple[Tuple[CellState, ...], ...] = (
    (_OFF, _OFF, _FULL, _FULL, _FULL, _OFF, _OFF),
    (_OFF, _OFF, _FULL, _FULL, _FULL, _OFF, _OFF),
    (_FULL, _FULL, _FULL, _FULL, _FULL, _FULL, _FULL),
    (_FULL, _FULL, _FULL, _FREE, _FULL, _FULL, _FULL),
    (_FULL, _FULL, _FULL, _FULL, _FULL, _FULL, _FULL),
    (_OFF, _OFF, _FULL, _FULL, _FULL, _OFF, _OFF),
    (_OFF, _OFF, _FULL, _FULL, _FULL, _OFF, _OFF),
)

_KNOWN_STATES = frozenset(int(state) for state in CellState)


def validate_layout(rows: Sequence[Sequence[int]]) -> bool:
    """
    Валидирует раскладку доски.

    Args:
        rows: матрица состояний клеток

    Returns:
        True если раскладка валидна

    Raises:
        InvalidBoardError: если раскладка пустая, не квадратная
            или содержит неизвестные значения
    """
    if not rows:
        raise InvalidBoardError("Раскладка не может быть пустой")

    size = len(rows)
    for r, row in enumerate(rows):
        if len(row) != size:
            raise InvalidBoardError(
                f"Раскладка должна быть квадратной: строка {r} имеет длину {len(row)}, ожидалось {size}"
            )
        for c, value in enumerate(row):
            if value not in _KNOWN_STATES:
                raise InvalidBoardError(f"Неизвестное значение клетки {value!r} в ({r},{c})")

    return True


class BoardShape:
    """
    Неизменяемое описание доски: какие клетки существуют и как они
    заполнены в начале.

    Маска OFF-клеток общая для всех досок одного дерева поиска, поэтому
    список всех геометрически возможных ходов считается один раз.
    """
    __slots__ = ('initial_cells', 'size', 'all_positions', 'allowable_moves')

    def __init__(self, layout: Sequence[Sequence[int]]):
        validate_layout(layout)
        self.initial_cells: Tuple[Tuple[CellState, ...], ...] = tuple(
            tuple(CellState(value) for value in row) for row in layout
        )
        self.size = len(self.initial_cells)
        self.all_positions: Tuple[Location, ...] = tuple(
            Location(r, c) for r in range(self.size) for c in range(self.size)
        )
        self.allowable_moves: Tuple[Move, ...] = tuple(
            move
            for move in (Move.from_direction(pos, d) for pos in self.all_positions for d in Direction)
            if self.is_legal_location(move.from_) and self.is_legal_location(move.to)
        )

    @classmethod
    def cross(cls) -> 'BoardShape':
        """Стандартный крест 7×7."""
        return cls(CROSS_LAYOUT)

    def is_legal_location(self, loc: Location) -> bool:
        """Клетка внутри квадрата и входит в доску."""
        return (
            0 <= loc.row < self.size and
            0 <= loc.column < self.size and
            self.initial_cells[loc.row][loc.column] != CellState.OFF
        )

    def cell_count(self) -> int:
        """Количество клеток доски (без OFF)."""
        return sum(1 for pos in self.all_positions if self.is_legal_location(pos))

    def __repr__(self) -> str:
        return f"BoardShape({self.size}x{self.size}, {self.cell_count()} cells)"
