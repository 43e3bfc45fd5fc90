"""
tests/test_replay.py

Тесты для play_moves и verify_moves.
"""

import pytest

from core.board import Board
from core.geometry import Location
from core.move import Move
from solutions import play_moves, verify_moves
from utils.error_handling import IllegalMoveError
from utils.monitoring import MoveCounter

MOVES = [
    Move(Location(1, 3), Location(3, 3)),
    Move(Location(2, 1), Location(2, 3)),
    Move(Location(0, 2), Location(2, 2)),
]


def test_play_no_moves():
    board = Board.initial()
    assert play_moves(board, []) == [board]


def test_play_moves_returns_each_step():
    board = Board.initial()
    boards = play_moves(board, MOVES)

    assert len(boards) == len(MOVES) + 1
    assert boards[0] is board
    expected = board
    for i, move in enumerate(MOVES, 1):
        expected = expected.apply_move(move)
        assert boards[i].cells == expected.cells
        assert boards[i].moves == tuple(MOVES[:i])


def test_play_moves_counts_applications():
    counter = MoveCounter()
    play_moves(Board.initial(), MOVES, counter)
    assert counter.count == 3


def test_play_illegal_move_raises():
    board = Board.initial()
    with pytest.raises(IllegalMoveError):
        play_moves(board, [Move(Location(3, 3), Location(3, 5))])
    with pytest.raises(IllegalMoveError):
        play_moves(board, [Move(Location(0, 3), Location(-2, 3))])


def test_verify_moves():
    board = Board.initial()
    assert verify_moves(board, [])
    assert verify_moves(board, MOVES)
    # Цель занята
    assert not verify_moves(board, [Move(Location(1, 3), Location(3, 3)), Move(Location(1, 3), Location(3, 3))])
    # Вне доски
    assert not verify_moves(board, [Move(Location(2, 1), Location(0, 1))])
    # Недопустимое смещение
    assert not verify_moves(board, [Move(Location(3, 0), Location(3, 3))])
