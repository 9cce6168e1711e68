"""
solvers/tree.py

Полное дерево игры: перебор всех последовательностей ходов.

Дерево строится целиком в конструкторе. Из каждого состояния применяются
все допустимые ходы каталога (в порядке каталога), пока ходов не останется.
Повторяющиеся состояния не объединяются, отсечений нет.

Узлы хранятся в общем списке (арене); родитель и дети задаются индексами.
Корень — узел с индексом 0.
"""

import time
from typing import List, Optional

from .base import TreeStats
from core.board_state import BoardState
from core.moves import Move, MOVES
from utils.logging import get_logger
from utils.monitoring import monitor_time


class Node:
    """
    Узел дерева.

    parent и move — откуда пришли (None у корня), children — индексы детей
    в арене в порядке каталога ходов.
    """
    __slots__ = ('index', 'state', 'parent', 'move', 'children')

    def __init__(self, index: int, state: BoardState,
                 parent: Optional[int] = None, move: Optional[Move] = None):
        self.index = index
        self.state = state
        self.parent = parent
        self.move = move
        self.children: List[int] = []

    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"Node(index={self.index}, move={self.move}, pegs={self.state.count_pegs()})"


class Tree:
    """Дерево всех партий из начального состояния."""

    def __init__(self, initial_state: BoardState):
        self.nodes: List[Node] = []
        self.stats = TreeStats()
        self.logger = get_logger()
        self._build(initial_state)

    @property
    def root(self) -> Node:
        return self.nodes[0]

    @monitor_time('build_tree')
    def _build(self, initial_state: BoardState) -> None:
        start = time.perf_counter()
        self.logger.debug(f"Построение дерева (pegs={initial_state.count_pegs()})")

        self._add_node(initial_state)
        self._expand(0)

        self.stats.nodes_created = len(self.nodes)
        self.stats.time_elapsed = time.perf_counter() - start
        self.logger.info(
            f"Дерево построено: {self.stats.nodes_created} узлов, "
            f"{self.stats.leaves} листьев ({self.stats.time_elapsed:.2f}s)"
        )

    def _add_node(self, state: BoardState, parent: Optional[int] = None,
                  move: Optional[Move] = None) -> Node:
        node = Node(len(self.nodes), state, parent, move)
        self.nodes.append(node)
        if parent is not None:
            self.nodes[parent].children.append(node.index)
        return node

    def _expand(self, index: int) -> None:
        """Рекурсивно создаёт детей узла для каждого допустимого хода."""
        state = self.nodes[index].state
        expanded = False
        for move in MOVES:
            if state.is_legal_move(move):
                child = self._add_node(BoardState.after_move(state, move), index, move)
                self._expand(child.index)
                expanded = True
        if not expanded:
            self.stats.leaves += 1

    @monitor_time('find_winners')
    def find_winners(self) -> List[str]:
        """
        Все выигрышные последовательности ходов.

        Обход в прямом порядке: сначала сам узел, затем дети в порядке
        каталога. Каждая строка — ходы от корня до выигрышного узла,
        например "(B->E)(2->B)...".
        """
        winners: List[str] = []
        self._collect_winners(self.root, winners)
        self.stats.winners = len(winners)
        self.logger.info(f"Найдено решений: {len(winners)}")
        return winners

    def _collect_winners(self, node: Node, winners: List[str]) -> None:
        if node.state.count_pegs() == 0:
            winners.append(self.trace_back(node))
        for child in node.children:
            self._collect_winners(self.nodes[child], winners)

    def winners_text(self) -> str:
        """Решения построчно, каждая строка с переводом строки."""
        return "".join(line + "\n" for line in self.find_winners())

    def winning_moves(self) -> List[List[Move]]:
        """Те же решения, что find_winners(), в виде списков ходов."""
        result: List[List[Move]] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.state.count_pegs() == 0:
                result.append(self.path_to(node))
            # Дети в обратном порядке, чтобы сохранить прямой обход
            stack.extend(self.nodes[child] for child in reversed(node.children))
        return result

    def trace_back(self, node: Node) -> str:
        """Ходы от корня до node одной строкой; у корня — пустая строка."""
        if node.parent is None:
            return ""
        return self.trace_back(self.nodes[node.parent]) + str(node.move)

    def path_to(self, node: Node) -> List[Move]:
        """Ходы от корня до node."""
        if node.parent is None:
            return []
        return self.path_to(self.nodes[node.parent]) + [node.move]

    def get_height(self) -> int:
        """
        Высота дерева: число рёбер на самом длинном пути от корня до листа.
        У листа высота 0.
        """
        height = self._height(self.root)
        self.stats.height = height
        return height

    def _height(self, node: Node) -> int:
        if not node.children:
            return 0
        return 1 + max(self._height(self.nodes[child]) for child in node.children)

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        lines = []
        self._dump(self.root, 0, lines)
        return "\n".join(lines)

    def _dump(self, node: Node, depth: int, lines: List[str]) -> None:
        lines.append(f"{'  ' * depth}Node: {node.state!r}")
        for child in node.children:
            self._dump(self.nodes[child], depth + 1, lines)
