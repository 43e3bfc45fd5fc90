"""
solutions - Воспроизведение и проверка последовательностей ходов
"""

from .replay import play_moves
from .verify import verify_moves

__all__ = ['play_moves', 'verify_moves']
