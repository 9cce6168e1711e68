"""
solutions - Проверка найденных решений.
"""

from .verify import replay_solution, verify_solution

__all__ = [
    'replay_solution',
    'verify_solution',
]
