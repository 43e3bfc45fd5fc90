"""
peg_io/parser.py

Парсинг раскладки доски из текста.
"""

from typing import Dict, List

from core.utils import CellState
from utils.error_handling import InvalidBoardError

# Символы раскладки → состояние клетки
LAYOUT_SYMBOLS: Dict[str, CellState] = {
    ' ': CellState.OFF,
    '.': CellState.OFF,
    '▫': CellState.OFF,
    '0': CellState.EMPTY,
    '○': CellState.EMPTY,
    '1': CellState.OCCUPIED,
    '●': CellState.OCCUPIED,
}


def parse_layout(text: str) -> List[List[CellState]]:
    """
    Парсит раскладку: одна строка текста на ряд доски.

    Клетки можно разделять пробелами ("1 1 0") или писать подряд ("110").
    Пробельный формат выбирается, только если он даёт квадратную доску.
    Пустые строки в начале и в конце игнорируются, короткие ряды
    дополняются клетками вне доски.

    Args:
        text: описание раскладки

    Returns:
        Матрица состояний клеток

    Raises:
        InvalidBoardError: неизвестный символ или пустой текст
    """
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise InvalidBoardError("Пустая раскладка")

    # Формат с пробелами: символы стоят на чётных позициях и доска
    # получается квадратной, иначе читаем подряд
    spaced = all(
        all(ch == ' ' for ch in line[1::2]) for line in lines
    ) and any(len(line) > 1 for line in lines)
    rows = lines
    if spaced:
        halved = [line[::2] for line in lines]
        if max(len(row) for row in halved) == len(halved):
            rows = halved

    width = max(len(row) for row in rows)
    layout = []
    for r, row in enumerate(rows):
        parsed = []
        for c, ch in enumerate(row.ljust(width)):
            if ch not in LAYOUT_SYMBOLS:
                raise InvalidBoardError(f"Неизвестный символ {ch!r} в ({r},{c})")
            parsed.append(LAYOUT_SYMBOLS[ch])
        layout.append(parsed)
    return layout


def load_layout(path: str) -> List[List[CellState]]:
    """Читает раскладку из файла."""
    with open(path, encoding='utf-8') as f:
        return parse_layout(f.read())
