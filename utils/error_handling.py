"""
utils/error_handling.py

Исключения решателя.
"""


class SolverError(Exception):
    """Базовое исключение для решателя."""
    pass


class NotationError(SolverError, ValueError):
    """Ошибка разбора записи ходов или имени лунки."""
    pass


class IllegalMoveError(SolverError):
    """Ход недопустим в текущей позиции."""

    def __init__(self, move, step: int):
        self.move = move
        self.step = step
        super().__init__(f"Ход {step}: {move} недопустим")
