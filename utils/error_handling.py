"""
utils/error_handling.py

Исключения решателя.
"""


class SolverError(Exception):
    """Базовое исключение для решателя."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной раскладки доски или параметров поиска."""
    pass


class IllegalMoveError(SolverError):
    """
    Ход невозможен на доске, к которой он применяется.

    Нарушение контракта: внутри библиотеки не перехватывается.
    """
    pass
