"""
utils - Логирование, ошибки и мониторинг
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import SolverError, InvalidBoardError, IllegalMoveError
from .monitoring import MoveCounter

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'IllegalMoveError',
    'MoveCounter',
]
