"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import List, Optional

from core.board_state import BoardState
from core.moves import Move
from core.utils import ROW_SIZES, ROW_STARTS, position_name


def display_board(state: BoardState) -> str:
    """
    Треугольник с именами лунок рядом с доской.

    Args:
        state: состояние доски

    Returns:
        Строка для вывода
    """
    board_lines = state.to_string().split("\n")
    lines = []
    # to_string() рисует ряды сверху вниз
    for line, row in zip(board_lines, range(len(ROW_SIZES) - 1, -1, -1)):
        names = " ".join(
            position_name(pos)
            for pos in range(ROW_STARTS[row] + ROW_SIZES[row] - 1, ROW_STARTS[row] - 1, -1)
        )
        width = 2 * ROW_SIZES[0] - 1
        lines.append(f"{line:<{width}}    {' ' * row}{names}")
    return "\n".join(lines)


def format_solution(moves: Optional[List[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if not moves:
        return "❌ Решение не найдено"

    lines = [f"✅ Решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {move}")

    return "\n".join(lines)
