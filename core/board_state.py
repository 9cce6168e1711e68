"""
core/board_state.py

Состояние треугольной доски: по биту на лунку.

Бит i маски отвечает за лунку i (см. нумерацию в core/utils.py).
После создания состояние не меняется; ход порождает новый объект.
"""

from typing import List

from .moves import Move, MOVES
from .utils import (
    TOTAL_PEG_HOLES, COMMON_START_STATE, CENTER_POS,
    ROW_SIZES, ROW_STARTS, PEG, HOLE
)

FULL_MASK = (1 << TOTAL_PEG_HOLES) - 1


class BoardState:
    """
    Занятость всех 15 лунок.

    BoardState(0) (и BoardState()) — стандартное начало: заняты все лунки,
    кроме верхней. Пустая доска в игре не встречается, поэтому 0 не может
    быть настоящим состоянием.
    """
    __slots__ = ('_pegs', '_count')

    def __init__(self, raw_bits: int = 0):
        # Биты выше 14-го отбрасываются
        self._pegs = (raw_bits or COMMON_START_STATE) & FULL_MASK
        self._count = self._pegs.bit_count()

    @classmethod
    def copy_of(cls, state: 'BoardState') -> 'BoardState':
        """Независимая копия состояния."""
        copy = cls.__new__(cls)
        copy._pegs = state._pegs
        copy._count = state._count
        return copy

    @classmethod
    def after_move(cls, state: 'BoardState', move: Move) -> 'BoardState':
        """
        Новое состояние: копия state с применённым ходом.

        Законность хода проверяет вызывающий (is_legal_move); state не меняется.
        """
        result = cls.copy_of(state)
        result._apply_move(move)
        return result

    @property
    def pegs(self) -> int:
        """Битовая маска занятых лунок."""
        return self._pegs

    def get_peg(self, position: int) -> bool:
        """Занята ли лунка position."""
        if not 0 <= position < TOTAL_PEG_HOLES:
            raise IndexError(f"position out of range: {position}")
        return bool((self._pegs >> position) & 1)

    def count_pegs(self) -> int:
        """
        Количество колышков на доске.

        Если остался один колышек и он в центре нижнего ряда, возвращает 0:
        так отличается решённая доска от тупика с одним колышком в другом месте.
        """
        if self._count == 1 and self._pegs == 1 << CENTER_POS:
            return 0
        return self._count

    def is_legal_move(self, move: Move) -> bool:
        """start и jump заняты, end свободна. Геометрию хода не проверяет."""
        pegs = self._pegs
        return bool(
            (pegs >> move.start) & 1
            and (pegs >> move.jump) & 1
            and not (pegs >> move.end) & 1
        )

    def legal_moves(self) -> List[Move]:
        """Допустимые ходы в порядке каталога."""
        return [move for move in MOVES if self.is_legal_move(move)]

    def is_terminal(self) -> bool:
        return not any(self.is_legal_move(move) for move in MOVES)

    def is_winner(self) -> bool:
        return self.count_pegs() == 0

    def _apply_move(self, move: Move) -> None:
        """Переключает три лунки хода. Только для только что созданной копии."""
        self._pegs ^= (1 << move.start) | (1 << move.jump) | (1 << move.end)
        self._count = self._pegs.bit_count()

    def to_string(self) -> str:
        """Треугольник: верхний ряд первым, ● — колышек, ○ — пусто."""
        lines = []
        for row in range(len(ROW_SIZES) - 1, -1, -1):
            # В ряду номера убывают слева направо
            cells = [
                PEG if self.get_peg(pos) else HOLE
                for pos in range(ROW_STARTS[row] + ROW_SIZES[row] - 1, ROW_STARTS[row] - 1, -1)
            ]
            lines.append(" " * row + " ".join(cells))
        return "\n".join(lines)

    def __hash__(self) -> int:
        return hash(self._pegs)

    def __eq__(self, other) -> bool:
        return isinstance(other, BoardState) and self._pegs == other._pegs

    def __repr__(self) -> str:
        occupancy = [self.get_peg(pos) for pos in range(TOTAL_PEG_HOLES)]
        return f"BoardState(pegs={occupancy}, count_pegs={self.count_pegs()})"
