"""
tests/test_main.py

Тесты точки входа.
"""

import io

from core.board import Board
from solvers import LongestPathSolver
import main


def test_run_prints_every_board_and_time():
    out = io.StringIO()
    moves = main.run(Board.initial(max_depth=2), out=out)

    text = out.getvalue()
    lines = text.rstrip("\n").split("\n")
    assert lines[0] == "****"
    assert len(moves) == 2
    assert text.count("[") == 3
    assert "[(1,3)->(3,3)]" in text
    assert lines[-1].isdigit()


def test_build_board_defaults_to_cross():
    board = main.build_board()
    assert board.peg_count() == 32
    assert board.max_depth == 5


def test_main_with_depth(capsys):
    assert main.main(["--depth", "1"]) == 0
    out = capsys.readouterr().out
    assert "****" in out
    assert "[(1,3)->(3,3)]" in out


def test_main_with_layout(tmp_path, capsys):
    path = tmp_path / "line.txt"
    path.write_text(".....\n.....\n11011\n.....\n.....\n", encoding="utf-8")
    assert main.main(["--layout", str(path), "--short-circuit"]) == 0
    out = capsys.readouterr().out
    assert "[(2,0)->(2,2), (2,3)->(2,1)]" in out


def test_main_rejects_bad_layout(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("111\n111\n", encoding="utf-8")
    assert main.main(["--layout", str(path)]) == 1
    assert main.main(["--layout", str(tmp_path / "missing.txt")]) == 1
    assert "Ошибка" in capsys.readouterr().out


def test_run_counts_replayed_moves():
    """Счётчик решателя учитывает и поиск, и воспроизведение ходов."""
    solver = LongestPathSolver()
    moves = main.run(Board.initial(max_depth=3), out=io.StringIO(), solver=solver)

    assert len(moves) == 3
    assert solver.counter.count == solver.stats.nodes_visited + len(moves)
