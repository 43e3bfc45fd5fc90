"""
solutions/verify.py

Проверка последовательности ходов.
"""

from typing import Iterable

from core.board import Board
from core.geometry import Location
from core.move import Move, DISPLACEMENTS
from core.utils import CellState

_ALLOWED_DISPLACEMENTS = frozenset(DISPLACEMENTS.values())


def verify_moves(board: Board, moves: Iterable[Move]) -> bool:
    """
    Проверяет корректность последовательности ходов.

    Правила:
    - from и to каждого хода лежат на доске;
    - смещение хода - одно из четырёх допустимых;
    - в from и skipped есть колышки, в to - дырка.
    """
    shape = board.shape
    cells = [list(row) for row in board.cells]

    for move in moves:
        if not (shape.is_legal_location(move.from_) and shape.is_legal_location(move.to)):
            return False

        displacement = Location(move.to.row - move.from_.row, move.to.column - move.from_.column)
        if displacement not in _ALLOWED_DISPLACEMENTS:
            return False

        skipped = move.skipped
        if cells[move.from_.row][move.from_.column] != CellState.OCCUPIED:
            return False
        if cells[skipped.row][skipped.column] != CellState.OCCUPIED:
            return False
        if cells[move.to.row][move.to.column] != CellState.EMPTY:
            return False

        cells[move.from_.row][move.from_.column] = CellState.EMPTY
        cells[skipped.row][skipped.column] = CellState.EMPTY
        cells[move.to.row][move.to.column] = CellState.OCCUPIED

    return True
