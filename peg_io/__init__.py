"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Разбор записи решений
- Визуализация доски и решений
"""

from .notation_parser import parse_solution, format_moves
from .visualizer import display_board, format_solution

__all__ = [
    'parse_solution',
    'format_moves',
    'display_board',
    'format_solution',
]
