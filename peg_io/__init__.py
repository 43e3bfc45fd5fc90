"""
peg_io - Ввод/вывод для Solitaire Cross

Экспортирует:
- Парсинг раскладки доски
- Текстовое представление доски и решений
"""

from .parser import parse_layout, load_layout
from .visualizer import render_board, format_moves, format_solution

__all__ = [
    'parse_layout',
    'load_layout',
    'render_board',
    'format_moves',
    'format_solution',
]
