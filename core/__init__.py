"""
core - Ядро Solitaire Cross

Координаты, ходы, симметрии, форма доски и сама доска с поиском.
"""

from .geometry import Location
from .move import Direction, DISPLACEMENTS, Move
from .symmetry import Transformation, ALL_TRANSFORMATIONS
from .shape import BoardShape, CROSS_LAYOUT, validate_layout
from .board import Board, choose_better_list
from .utils import (
    CellState, CELL_SYMBOLS, FROM_SYMBOL, TO_SYMBOL,
    MAX_DEPTH, PROGRESS_INTERVAL,
    index_to_pos
)

__all__ = [
    'Location', 'Direction', 'DISPLACEMENTS', 'Move',
    'Transformation', 'ALL_TRANSFORMATIONS',
    'BoardShape', 'CROSS_LAYOUT', 'validate_layout',
    'Board', 'choose_better_list',
    'CellState', 'CELL_SYMBOLS', 'FROM_SYMBOL', 'TO_SYMBOL',
    'MAX_DEPTH', 'PROGRESS_INTERVAL',
    'index_to_pos',
]
