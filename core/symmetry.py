"""
core/symmetry.py

Симметрии доски: отражения и поворот на 180°.

Каждое преобразование - инволюция на квадратной доске, поэтому орбита
клетки состоит из одной или двух клеток.
"""

from enum import Enum
from typing import List, Tuple

from .geometry import Location


class Transformation(Enum):
    """Преобразование клеток доски размера size × size."""
    HALF_ROTATION = 'half_rotation'
    VERTICAL_REFLECTION = 'vertical_reflection'
    HORIZONTAL_REFLECTION = 'horizontal_reflection'

    def apply(self, v: Location, size: int) -> Location:
        """Образ клетки v."""
        if self is Transformation.HALF_ROTATION:
            return Location(size - 1 - v.row, size - 1 - v.column)
        if self is Transformation.VERTICAL_REFLECTION:
            return Location(v.row, size - 1 - v.column)
        return Location(size - 1 - v.row, v.column)

    def orbit(self, v: Location, size: int) -> List[Location]:
        """Все клетки, в которые переходит v при повторном применении, включая v."""
        result = [v]
        current = self.apply(v, size)
        while current != v:
            result.append(current)
            current = self.apply(current, size)
        return result

    def orbit_representative(self, v: Location, size: int) -> Location:
        # Минимальная клетка орбиты: не зависит от порядка обхода
        return min(self.orbit(v, size))

    def is_orbit_representative(self, v: Location, size: int) -> bool:
        return self.orbit_representative(v, size) == v


ALL_TRANSFORMATIONS: Tuple[Transformation, ...] = (
    Transformation.HALF_ROTATION,
    Transformation.VERTICAL_REFLECTION,
    Transformation.HORIZONTAL_REFLECTION,
)
