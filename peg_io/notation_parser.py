"""
peg_io/notation_parser.py

Разбор записи решений.
Формат: "(B->E)(2->B)..." — ходы подряд, пробелы между ходами допустимы.
"""

import re
from typing import Iterable, List

from core.moves import Move, find_move
from core.utils import position_from_name
from utils.error_handling import NotationError

_MOVE_RE = re.compile(r'\s*\(([0-9A-Ea-e])->([0-9A-Ea-e])\)')


def parse_solution(line: str) -> List[Move]:
    """
    Парсит строку решения в список ходов.

    Args:
        line: строка вида "(B->E)(2->B)..."

    Returns:
        Список ходов каталога

    Raises:
        NotationError: если строку не удалось разобрать
    """
    moves: List[Move] = []
    pos = 0
    text = line.rstrip()

    while pos < len(text):
        match = _MOVE_RE.match(text, pos)
        if not match:
            raise NotationError(f"Не удалось распарсить: {text[pos:]!r}")
        start = position_from_name(match.group(1))
        end = position_from_name(match.group(2))
        moves.append(find_move(start, end))
        pos = match.end()

    return moves


def format_moves(moves: Iterable[Move]) -> str:
    """Список ходов → строка решения."""
    return "".join(str(move) for move in moves)
