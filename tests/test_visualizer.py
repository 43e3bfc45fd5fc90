"""
tests/test_visualizer.py

Тесты текстового вывода доски.
"""

from core.board import Board
from core.geometry import Location
from core.move import Move
from peg_io.visualizer import render_board, format_moves, format_solution

FIRST_MOVE = Move(Location(1, 3), Location(3, 3))


def test_render_initial_board():
    text = render_board(Board.initial())
    lines = text.split("\n")

    assert text.endswith("\n")
    assert lines[0] == "[]"
    assert lines[1] == "    1 1 1     "
    assert lines[4] == "1 1 1 0 1 1 1 "
    assert len(lines) == 1 + 7 + 1


def test_render_marks_last_move():
    board = Board.initial().apply_move(FIRST_MOVE)
    lines = render_board(board).split("\n")

    assert lines[0] == "[(1,3)->(3,3)]"
    assert lines[2] == "    1 - 1     "
    assert lines[3] == "1 1 1 0 1 1 1 "
    assert lines[4] == "1 1 1 + 1 1 1 "


def test_render_marks_only_latest_move():
    second = Move(Location(2, 1), Location(2, 3))
    board = Board.initial().apply_move(FIRST_MOVE).apply_move(second)
    lines = render_board(board).split("\n")

    assert lines[0] == "[(1,3)->(3,3), (2,1)->(2,3)]"
    assert lines[2] == "    1 0 1     "
    assert lines[3] == "1 - 0 + 1 1 1 "


def test_format_moves():
    assert format_moves([]) == "[]"
    assert format_moves([FIRST_MOVE, FIRST_MOVE]) == "[(1,3)->(3,3), (1,3)->(3,3)]"


def test_format_solution():
    assert format_solution(None) == "No moves found"
    assert format_solution([]) == "No moves found"
    text = format_solution([FIRST_MOVE])
    assert text.startswith("Best sequence: 1 moves")
    assert " 1. D2 → D4" in text
