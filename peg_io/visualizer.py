"""
peg_io/visualizer.py

Текстовое представление доски и решений.
"""

from typing import List, Optional, Sequence

from core.board import Board
from core.move import Move
from core.utils import CELL_SYMBOLS, FROM_SYMBOL, TO_SYMBOL


def format_moves(moves: Sequence[Move]) -> str:
    """Ходы в виде [(r,c)->(r,c), ...]."""
    return "[" + ", ".join(str(move) for move in moves) + "]"


def render_board(board: Board) -> str:
    """
    Доска в консольном формате.

    Первая строка - сделанные ходы, дальше сетка N×N: пробел для
    клеток вне доски, 0 - пусто, 1 - колышек. Клетки последнего хода
    помечаются '-' (откуда) и '+' (куда).

    Args:
        board: доска

    Returns:
        Строка для вывода (с завершающим переводом строки)
    """
    last = board.last_move
    lines = [format_moves(board.moves)]

    for r in range(board.size):
        row = []
        for c in range(board.size):
            if last is not None and (r, c) == (last.from_.row, last.from_.column):
                row.append(FROM_SYMBOL)
            elif last is not None and (r, c) == (last.to.row, last.to.column):
                row.append(TO_SYMBOL)
            else:
                row.append(CELL_SYMBOLS[board.cells[r][c]])
        lines.append("".join(symbol + " " for symbol in row))

    return "\n".join(lines) + "\n"


def format_solution(moves: Optional[List[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if not moves:
        return "No moves found"

    lines = [f"Best sequence: {len(moves)} moves"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {move.notation()}")

    return "\n".join(lines)
