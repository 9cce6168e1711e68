"""
tests/test_tree.py

Тесты для Tree: построение дерева, поиск решений, высота.

Полное дерево из стандартного начала строится один раз на модуль.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board_state import BoardState
from core.moves import Move
from core.utils import CENTER_POS
from solutions.verify import replay_solution, verify_solution
from solvers.tree import Tree


def _mask(*positions: int) -> int:
    bits = 0
    for pos in positions:
        bits |= 1 << pos
    return bits


@pytest.fixture(scope="module")
def full_tree() -> Tree:
    return Tree(BoardState(0))


@pytest.fixture(scope="module")
def full_winners(full_tree):
    return full_tree.find_winners()


def test_single_move_win():
    """Тест: два колышка, один прыжок в центр нижнего ряда."""
    tree = Tree(BoardState(_mask(0, 1)))

    assert len(tree) == 2
    assert tree.find_winners() == ["(0->2)"]
    assert tree.get_height() == 1
    assert tree.stats.leaves == 1
    assert tree.stats.winners == 1


def test_small_tree_shape():
    """
    Тест: колышки в 7, 9, 10.

    Ходы из корня (порядок каталога): 7->C, 9->B, A->3.
    Выигрывает только 9->B, затем B->2.
    """
    tree = Tree(BoardState(_mask(7, 9, 10)))

    assert len(tree) == 7
    assert tree.stats.nodes_created == 7
    assert tree.stats.leaves == 4
    assert [str(tree.nodes[i].move) for i in tree.root.children] == ["(7->C)", "(9->B)", "(A->3)"]
    assert tree.find_winners() == ["(9->B)(B->2)"]
    assert tree.winning_moves() == [[Move(9, 10, 11), Move(11, 7, 2)]]
    assert tree.get_height() == 2


def test_root_winner_reported_with_empty_path():
    """Тест: уже решённая доска — одно решение из нуля ходов."""
    tree = Tree(BoardState(1 << CENTER_POS))

    assert len(tree) == 1
    assert tree.root.is_leaf()
    assert tree.find_winners() == [""]
    assert tree.winners_text() == "\n"
    assert tree.get_height() == 0


def test_dead_position_has_no_winners():
    """Тест: два изолированных колышка — ходов нет, решений нет."""
    tree = Tree(BoardState(_mask(0, 14)))

    assert len(tree) == 1
    assert tree.find_winners() == []
    assert tree.winners_text() == ""
    assert tree.get_height() == 0


def test_parent_links():
    """Тест: дети ссылаются на родителя, состояние ребёнка — родитель + ход."""
    tree = Tree(BoardState(_mask(7, 9, 10)))

    assert tree.root.parent is None
    assert tree.root.move is None
    for node in tree.nodes[1:]:
        parent = tree.nodes[node.parent]
        assert node.index in parent.children
        assert node.state == BoardState.after_move(parent.state, node.move)
        assert tree.trace_back(node) == tree.trace_back(parent) + str(node.move)


def test_same_state_appears_in_several_nodes(full_tree):
    """Тест: повторяющиеся состояния не объединяются."""
    states = {node.state for node in full_tree.nodes}
    assert len(states) < len(full_tree)


def test_deterministic_output():
    """Тест: два построения из одной позиции дают одинаковый результат."""
    start = BoardState(0b000000111111111)
    first = Tree(start)
    second = Tree(BoardState.copy_of(start))

    assert len(first) == len(second)
    assert first.find_winners() == second.find_winners()
    assert first.get_height() == second.get_height()


def test_tree_str():
    tree = Tree(BoardState(_mask(0, 1)))
    lines = str(tree).split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("Node: BoardState(")
    assert lines[1].startswith("  Node: ")


def test_full_tree_has_winners(full_winners):
    """Тест: из стандартного начала есть хотя бы одно решение."""
    assert len(full_winners) > 0


def test_full_tree_winners_replay(full_winners):
    """Тест: каждое решение — 13 ходов, колышков на 1 меньше после каждого."""
    for line in full_winners:
        states = replay_solution(line)
        assert len(states) == 14
        counts = [state.pegs.bit_count() for state in states]
        assert counts == list(range(14, 0, -1))
        assert states[-1].count_pegs() == 0
        assert states[-1] == BoardState(1 << CENTER_POS)
        assert verify_solution(line)


def test_full_tree_height(full_tree):
    assert full_tree.get_height() == 13


def test_full_tree_winners_are_leaves(full_tree):
    for node in full_tree.nodes:
        if node.state.count_pegs() == 0:
            assert node.is_leaf()


def test_full_tree_winning_moves_match_text(full_tree, full_winners):
    moves = full_tree.winning_moves()
    assert ["".join(str(m) for m in path) for path in moves] == full_winners
    assert full_tree.winners_text() == "".join(line + "\n" for line in full_winners)


def test_full_tree_stats(full_tree, full_winners):
    assert full_tree.stats.nodes_created == len(full_tree)
    assert full_tree.stats.winners == len(full_winners)
    assert 0 < full_tree.stats.leaves < len(full_tree)
