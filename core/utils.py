"""
core/utils.py

Общие константы и утилиты треугольной доски (15 лунок).

Нумерация лунок (нижний ряд — 5 лунок, верхний — 1):

            (14)
          (13)(12)
        (11)(10)( 9)
      ( 8)( 7)( 6)( 5)
    ( 4)( 3)( 2)( 1)( 0)

Короткие имена лунок:

        E
       D C
      B A 9
     8 7 6 5
    4 3 2 1 0
"""

from typing import Tuple

from utils.error_handling import NotationError

TOTAL_PEG_HOLES = 15

# Все лунки заняты, кроме верхней (E)
COMMON_START_STATE = 0b011111111111111

# Центр нижнего ряда
CENTER_POS = 2

# Ряды снизу вверх
ROW_SIZES: Tuple[int, ...] = (5, 4, 3, 2, 1)
ROW_STARTS: Tuple[int, ...] = (0, 5, 9, 12, 14)

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустая лунка

_NAMES = '0123456789ABCDE'


def position_name(pos: int) -> str:
    """Номер лунки → односимвольное имя (0-9, затем A-E)."""
    if not 0 <= pos < TOTAL_PEG_HOLES:
        raise IndexError(f"position out of range: {pos}")
    return _NAMES[pos]


def position_from_name(name: str) -> int:
    """Односимвольное имя → номер лунки."""
    pos = _NAMES.find(name.upper()) if len(name) == 1 else -1
    if pos < 0:
        raise NotationError(f"Неизвестная лунка: {name!r}")
    return pos


def position_coords(pos: int) -> Tuple[int, int]:
    """
    Номер лунки → (row, col).

    row считается снизу (0..4), col — от правого края ряда.
    Соседи по трём осям отличаются на (0, 1), (1, 0) или (1, -1).
    """
    if not 0 <= pos < TOTAL_PEG_HOLES:
        raise IndexError(f"position out of range: {pos}")
    row = max(r for r, first in enumerate(ROW_STARTS) if pos >= first)
    return row, pos - ROW_STARTS[row]


def coords_to_position(row: int, col: int) -> int:
    """(row, col) → номер лунки."""
    if not (0 <= row < len(ROW_SIZES) and 0 <= col < ROW_SIZES[row]):
        raise IndexError(f"coordinates out of range: ({row}, {col})")
    return ROW_STARTS[row] + col
