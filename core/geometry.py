"""
core/geometry.py

Целочисленные координаты клеток доски.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Location:
    """
    Клетка доски (row, column).

    Порядок построчный: сначала по строке, затем по столбцу.
    Используется и как положение, и как вектор смещения.
    """
    row: int
    column: int

    def __add__(self, other: 'Location') -> 'Location':
        return Location(self.row + other.row, self.column + other.column)

    def __str__(self) -> str:
        return f"({self.row},{self.column})"

    @staticmethod
    def min(first: 'Location', second: 'Location') -> 'Location':
        return first if first < second else second
