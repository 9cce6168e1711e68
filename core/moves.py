"""
core/moves.py

Ходы треугольной доски.

Ход — прыжок колышка из start через занятую лунку jump в пустую лунку end.
На доске из 15 лунок таких прыжков ровно 36 (по три оси, в обе стороны).
Таблица составлена заранее и не пересчитывается.
"""

from typing import NamedTuple, Tuple, Dict

from .utils import position_name
from utils.error_handling import NotationError


class Move(NamedTuple):
    """Иммутабельный ход (start, jump, end)."""
    start: int
    jump: int
    end: int

    def __str__(self) -> str:
        return f"({position_name(self.start)}->{position_name(self.end)})"


MOVES: Tuple[Move, ...] = (
    Move(0, 1, 2), Move(0, 5, 9), Move(1, 2, 3), Move(1, 6, 10),
    Move(2, 1, 0), Move(2, 6, 9), Move(2, 7, 11), Move(2, 3, 4),
    Move(3, 2, 1), Move(3, 7, 10), Move(4, 3, 2), Move(4, 8, 11),
    Move(5, 6, 7), Move(5, 9, 12), Move(6, 7, 8), Move(6, 10, 13),
    Move(7, 6, 5), Move(7, 10, 12), Move(8, 7, 6), Move(8, 11, 13),
    Move(9, 5, 0), Move(9, 6, 2), Move(9, 10, 11), Move(9, 12, 14),
    Move(10, 6, 1), Move(10, 7, 3), Move(11, 7, 2), Move(11, 8, 4),
    Move(11, 10, 9), Move(11, 13, 14), Move(12, 9, 5), Move(12, 10, 7),
    Move(13, 10, 6), Move(13, 11, 8), Move(14, 12, 9), Move(14, 13, 11),
)

# (start, end) → ход
_BY_ENDPOINTS: Dict[Tuple[int, int], Move] = {(m.start, m.end): m for m in MOVES}


def find_move(start: int, end: int) -> Move:
    """
    Находит ход каталога по начальной и конечной лункам.

    Raises:
        NotationError: если лунки не соединены прыжком
    """
    try:
        return _BY_ENDPOINTS[(start, end)]
    except KeyError:
        raise NotationError(
            f"Нет хода из {position_name(start)} в {position_name(end)}"
        ) from None
