#!/usr/bin/env python3
"""
main.py

Точка входа для Solitaire Cross.

Использование:
    python main.py                       # крест 7×7, глубина 5
    python main.py --depth 6             # другой предел глубины
    python main.py --layout board.txt    # своя раскладка
"""

import sys
import argparse
import logging
import time

from core.board import Board
from core.shape import BoardShape
from core.utils import MAX_DEPTH
from peg_io import load_layout, render_board, format_solution
from solutions import play_moves
from solvers import LongestPathSolver
from utils.error_handling import InvalidBoardError
from utils.logging import get_logger, setup_file_logging


def build_board(layout_path=None, depth=MAX_DEPTH):
    """Начальная доска: крест или раскладка из файла."""
    shape = BoardShape(load_layout(layout_path)) if layout_path else BoardShape.cross()
    return Board.initial(shape, depth)


def run(board, stop_at_depth_cap=False, verbose=False, out=None, solver=None):
    """
    Ищет лучшую последовательность, печатает все доски и время в мс.

    Воспроизведение ходов учитывается тем же счётчиком, что и поиск.

    Returns:
        Найденные ходы
    """
    if out is None:
        out = sys.stdout
    if solver is None:
        solver = LongestPathSolver(verbose=verbose, stop_at_depth_cap=stop_at_depth_cap)

    print("****", file=out)
    start = time.perf_counter()
    moves = solver.solve(board)
    for step in play_moves(board, moves, solver.counter):
        print(render_board(step), file=out)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    print(elapsed_ms, file=out)

    if verbose:
        print(format_solution(moves), file=out)
    return moves


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Solitaire Cross: самая длинная последовательность прыжков',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                     # крест 7×7, глубина 5
  python main.py --depth 7           # глубже (заметно дольше)
  python main.py --short-circuit     # не перебирать дальше, если достигнут предел
        """
    )
    parser.add_argument(
        '--depth', '-d', type=int, default=MAX_DEPTH,
        help=f'Предел глубины поиска (default: {MAX_DEPTH})'
    )
    parser.add_argument(
        '--layout', '-l',
        help='Файл с раскладкой доски (1 - колышек, 0 - дырка, пробел/точка - вне доски)'
    )
    parser.add_argument(
        '--short-circuit', action='store_true',
        help='Прекращать перебор ветки, когда найден путь на всю глубину'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный лог')
    parser.add_argument('--log-file', help='Дублировать лог в файл')

    args = parser.parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    try:
        board = build_board(args.layout, args.depth)
    except (InvalidBoardError, OSError) as e:
        print(f"❌ Ошибка: {e}")
        return 1

    run(board, stop_at_depth_cap=args.short_circuit, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
