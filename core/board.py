"""
core/board.py

Иммутабельная доска Solitaire Cross и рекурсивный поиск самой длинной
последовательности ходов.
"""

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from utils.error_handling import InvalidBoardError
from .geometry import Location
from .move import Move
from .shape import BoardShape
from .symmetry import ALL_TRANSFORMATIONS, Transformation
from .utils import MAX_DEPTH, CellState

if TYPE_CHECKING:
    from utils.monitoring import MoveCounter

Cells = Tuple[Tuple[CellState, ...], ...]


class Board:
    """
    Снимок доски: состояние клеток плюс ходы, которые к нему привели.

    Доска не меняется после создания: apply_move строит новую сетку.
    Форма и предел глубины передаются всем потомкам.
    """
    __slots__ = ('cells', 'moves', 'shape', 'max_depth', '_symmetries')

    def __init__(self, cells: Cells, moves: Tuple[Move, ...] = (),
                 shape: Optional[BoardShape] = None, max_depth: int = MAX_DEPTH):
        if max_depth < 0:
            raise InvalidBoardError(f"Предел глубины не может быть отрицательным: {max_depth}")
        self.cells = cells
        self.moves = moves
        self.shape = shape if shape is not None else BoardShape(cells)
        self.max_depth = max_depth
        self._symmetries: Optional[Tuple[Transformation, ...]] = None

    @classmethod
    def initial(cls, shape: Optional[BoardShape] = None, max_depth: int = MAX_DEPTH) -> 'Board':
        """Начальная доска (по умолчанию - крест с пустым центром)."""
        if shape is None:
            shape = BoardShape.cross()
        return cls(shape.initial_cells, (), shape, max_depth)

    @property
    def size(self) -> int:
        return self.shape.size

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def get_cell_value(self, loc: Location) -> CellState:
        return self.cells[loc.row][loc.column]

    def peg_count(self) -> int:
        """Количество колышков."""
        return sum(row.count(CellState.OCCUPIED) for row in self.cells)

    # --- Симметрии ---

    def is_invariant_under_transformation(self, t: Transformation) -> bool:
        """Каждая клетка совпадает по состоянию со своим образом."""
        size = self.size
        return all(
            self.get_cell_value(v) == self.get_cell_value(t.apply(v, size))
            for v in self.shape.all_positions
        )

    @property
    def symmetries(self) -> Tuple[Transformation, ...]:
        """Преобразования, сохраняющие эту доску. Считаются при первом обращении."""
        if self._symmetries is None:
            self._symmetries = tuple(
                t for t in ALL_TRANSFORMATIONS if self.is_invariant_under_transformation(t)
            )
        return self._symmetries

    def is_cell_orbit_representative_of_all_symmetries(self, loc: Location) -> bool:
        size = self.size
        return all(t.is_orbit_representative(loc, size) for t in self.symmetries)

    # --- Ходы ---

    def is_move_possible(self, move: Move) -> bool:
        return (
            self.get_cell_value(move.from_) == CellState.OCCUPIED and
            self.get_cell_value(move.to) == CellState.EMPTY and
            self.get_cell_value(move.skipped) == CellState.OCCUPIED
        )

    def get_possible_moves(self) -> Tuple[Move, ...]:
        """
        Допустимые ходы с отсечением симметричных.

        Из ходов, чьи начальные клетки связаны симметрией доски,
        остаётся только ход из представителя орбиты. На пределе
        глубины ходов нет.
        """
        if len(self.moves) >= self.max_depth:
            return ()
        return tuple(
            move for move in self.shape.allowable_moves
            if self.is_move_possible(move) and
            self.is_cell_orbit_representative_of_all_symmetries(move.from_)
        )

    def apply_move(self, move: Move, counter: Optional['MoveCounter'] = None) -> 'Board':
        """Возвращает новую доску после хода."""
        if counter is not None:
            counter.increment()

        new_cells = [list(row) for row in self.cells]
        skipped = move.skipped
        new_cells[skipped.row][skipped.column] = CellState.EMPTY
        new_cells[move.from_.row][move.from_.column] = CellState.EMPTY
        new_cells[move.to.row][move.to.column] = CellState.OCCUPIED

        return Board(tuple(tuple(row) for row in new_cells),
                     self.moves + (move,), self.shape, self.max_depth)

    # --- Поиск ---

    def get_best_move_list(self, counter: Optional['MoveCounter'] = None,
                           stop_at_depth_cap: bool = False) -> Tuple[Move, ...]:
        """
        Самая длинная последовательность ходов, достижимая из этой доски.

        Полный перебор в глубину без мемоизации. Лучший список заменяется
        только строго более длинным, так что при равной длине побеждает
        найденный первым. Если ходов нет, результат - уже сделанные ходы.

        Args:
            counter: счётчик применённых ходов
            stop_at_depth_cap: прекратить перебор детей, как только найден
                путь длиной max_depth (длиннее быть не может)
        """
        best = self.moves
        for move in self.get_possible_moves():
            child = self.apply_move(move, counter)
            candidate = child.get_best_move_list(counter, stop_at_depth_cap)
            best = choose_better_list(best, candidate)
            if stop_at_depth_cap and len(best) >= self.max_depth:
                break
        return best

    def __repr__(self) -> str:
        return f"Board({self.peg_count()} pegs, {len(self.moves)} moves)"


def choose_better_list(first: Sequence[Move], second: Sequence[Move]) -> Sequence[Move]:
    """Второй список, только если он строго длиннее первого."""
    return second if len(second) > len(first) else first
