"""
solutions/verify.py

Проверка решений: повтор ходов с начальной позиции.
"""

from typing import List, Optional

from core.board_state import BoardState
from peg_io.notation_parser import parse_solution
from utils.error_handling import IllegalMoveError, SolverError


def replay_solution(line: str, start: Optional[BoardState] = None) -> List[BoardState]:
    """
    Применяет ходы строки решения по очереди.

    Args:
        line: строка вида "(B->E)(2->B)..."
        start: начальная позиция (по умолчанию стандартная)

    Returns:
        Все пройденные состояния, включая начальное

    Raises:
        NotationError: строку не удалось разобрать
        IllegalMoveError: ход недопустим в своей позиции
    """
    state = start if start is not None else BoardState()
    states = [state]

    for step, move in enumerate(parse_solution(line), 1):
        if not state.is_legal_move(move):
            raise IllegalMoveError(move, step)
        state = BoardState.after_move(state, move)
        states.append(state)

    return states


def verify_solution(line: str, start: Optional[BoardState] = None) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим в позиции, где он сделан;
    - в конце остаётся один колышек в центре нижнего ряда (count_pegs() == 0).
    """
    try:
        states = replay_solution(line, start)
    except SolverError:
        return False
    return states[-1].count_pegs() == 0
