"""
core/move.py

Ход (прыжок) колышка через соседнюю клетку.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .geometry import Location
from .utils import index_to_pos


class Direction(Enum):
    """Четыре направления прыжка, порядок перебора фиксирован."""
    RIGHT = 0
    UP = 1
    LEFT = 2
    DOWN = 3


# Смещение прыжка всегда на две клетки
DISPLACEMENTS: Dict[Direction, Location] = {
    Direction.RIGHT: Location(0, 2),
    Direction.UP: Location(-2, 0),
    Direction.LEFT: Location(0, -2),
    Direction.DOWN: Location(2, 0),
}


@dataclass(frozen=True)
class Move:
    """
    Ход from_ → to.

    При создании не проверяется: допустимость хода определяет доска
    (Board.is_move_possible).
    """
    from_: Location
    to: Location

    @classmethod
    def from_direction(cls, from_: Location, direction: Direction) -> 'Move':
        """Ход из клетки from_ в заданном направлении."""
        return cls(from_, from_ + DISPLACEMENTS[direction])

    @property
    def skipped(self) -> Location:
        """Клетка перепрыгиваемого (снимаемого) колышка."""
        return Location((self.from_.row + self.to.row) // 2,
                        (self.from_.column + self.to.column) // 2)

    def notation(self) -> str:
        """Ход в буквенной нотации: D2 → D4."""
        return (f"{index_to_pos(self.from_.row, self.from_.column)} → "
                f"{index_to_pos(self.to.row, self.to.column)}")

    def __str__(self) -> str:
        return f"{self.from_}->{self.to}"
