"""
solvers - Полный перебор дерева игры

Экспортирует:
- Tree: дерево всех партий, поиск решений
- Node: узел дерева
- TreeStats: статистика построения
"""

from .base import TreeStats
from .tree import Tree, Node

__all__ = [
    'Tree',
    'Node',
    'TreeStats',
]
