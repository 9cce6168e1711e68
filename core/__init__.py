"""
core - Ядро треугольного Peg Solitaire

Состояние доски, каталог ходов и константы геометрии.
"""

from .board_state import BoardState
from .moves import Move, MOVES, find_move
from .utils import (
    TOTAL_PEG_HOLES, COMMON_START_STATE, CENTER_POS, PEG, HOLE,
    position_name, position_from_name, position_coords, coords_to_position
)

__all__ = [
    'BoardState', 'Move', 'MOVES', 'find_move',
    'TOTAL_PEG_HOLES', 'COMMON_START_STATE', 'CENTER_POS', 'PEG', 'HOLE',
    'position_name', 'position_from_name', 'position_coords', 'coords_to_position'
]
