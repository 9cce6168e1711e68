"""
tests/test_moves.py

Тесты каталога ходов и геометрии доски.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.moves import Move, MOVES, find_move
from core.utils import (
    TOTAL_PEG_HOLES, ROW_SIZES,
    position_name, position_from_name, position_coords, coords_to_position
)
from utils.error_handling import NotationError

AXES = [(0, 1), (1, 0), (1, -1)]


def _all_straight_triples():
    """Все тройки соседних лунок на одной прямой, в обе стороны."""
    triples = set()
    for pos in range(TOTAL_PEG_HOLES):
        row, col = position_coords(pos)
        for dr, dc in AXES:
            for sign in (1, -1):
                try:
                    jump = coords_to_position(row + sign * dr, col + sign * dc)
                    end = coords_to_position(row + 2 * sign * dr, col + 2 * sign * dc)
                except IndexError:
                    continue
                triples.add((pos, jump, end))
    return triples


def test_catalog_has_36_moves():
    assert len(MOVES) == 36
    assert len(set(MOVES)) == 36


def test_catalog_positions_distinct():
    for move in MOVES:
        assert len(set(move)) == 3
        assert all(0 <= p < TOTAL_PEG_HOLES for p in move)


@pytest.mark.parametrize("move", MOVES, ids=str)
def test_catalog_move_is_straight_line(move):
    """Тест: три лунки хода — соседние на одной прямой."""
    (r0, c0), (r1, c1), (r2, c2) = (position_coords(p) for p in move)
    step = (r1 - r0, c1 - c0)
    assert step == (r2 - r1, c2 - c1)
    assert step in AXES or (-step[0], -step[1]) in AXES


def test_catalog_is_complete():
    """Тест: каталог совпадает со всеми прыжками, возможными по геометрии."""
    assert {tuple(m) for m in MOVES} == _all_straight_triples()


def test_catalog_reverse_moves():
    """Тест: для каждого хода есть обратный."""
    as_tuples = {tuple(m) for m in MOVES}
    for move in MOVES:
        assert (move.end, move.jump, move.start) in as_tuples


def test_move_str():
    assert str(Move(0, 1, 2)) == "(0->2)"
    assert str(Move(9, 12, 14)) == "(9->E)"
    assert str(Move(13, 11, 8)) == "(D->8)"


def test_move_is_immutable():
    move = MOVES[0]
    with pytest.raises(AttributeError):
        move.start = 5


def test_find_move():
    assert find_move(9, 14) == Move(9, 12, 14)
    assert find_move(2, 0) == Move(2, 1, 0)
    with pytest.raises(NotationError):
        find_move(0, 1)


def test_position_names():
    names = [position_name(p) for p in range(TOTAL_PEG_HOLES)]
    assert "".join(names) == "0123456789ABCDE"
    for pos, name in enumerate(names):
        assert position_from_name(name) == pos
    assert position_from_name("c") == 12
    with pytest.raises(NotationError):
        position_from_name("F")
    with pytest.raises(NotationError):
        position_from_name("10")
    with pytest.raises(IndexError):
        position_name(15)


def test_position_coords():
    """Тест: ряды снизу вверх, номера внутри ряда справа налево."""
    assert position_coords(0) == (0, 0)
    assert position_coords(4) == (0, 4)
    assert position_coords(5) == (1, 0)
    assert position_coords(14) == (4, 0)
    seen = [position_coords(p) for p in range(TOTAL_PEG_HOLES)]
    assert len(set(seen)) == TOTAL_PEG_HOLES
    for row, size in enumerate(ROW_SIZES):
        assert sum(1 for r, _ in seen if r == row) == size
    for pos in range(TOTAL_PEG_HOLES):
        assert coords_to_position(*position_coords(pos)) == pos
