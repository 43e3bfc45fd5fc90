"""
solutions/replay.py

Воспроизведение последовательности ходов.
"""

from typing import TYPE_CHECKING, Iterable, List, Optional

from core.board import Board
from core.move import Move
from utils.error_handling import IllegalMoveError

if TYPE_CHECKING:
    from utils.monitoring import MoveCounter


def play_moves(board: Board, moves: Iterable[Move],
               counter: Optional['MoveCounter'] = None) -> List[Board]:
    """
    Начальная доска и доска после каждого хода по порядку.

    Args:
        board: начальная доска
        moves: ходы, каждый допустим на доске перед ним
        counter: счётчик применённых ходов

    Returns:
        len(moves) + 1 досок

    Raises:
        IllegalMoveError: если ход невозможен (нарушение контракта)
    """
    boards = [board]
    for move in moves:
        current = boards[-1]
        if not (current.shape.is_legal_location(move.from_) and
                current.shape.is_legal_location(move.to) and
                current.is_move_possible(move)):
            raise IllegalMoveError(f"Ход {move} невозможен после {len(current.moves)} ходов")
        boards.append(current.apply_move(move, counter))
    return boards
