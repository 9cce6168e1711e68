"""
solvers/base.py

Статистика построения и обхода дерева.
"""

from dataclasses import dataclass


@dataclass
class TreeStats:
    """Статистика дерева игры."""
    nodes_created: int = 0
    leaves: int = 0
    winners: int = 0
    height: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_created}, "
            f"Leaves: {self.leaves}, "
            f"Winners: {self.winners}, "
            f"Height: {self.height}, "
            f"Time: {self.time_elapsed:.3f}s"
        )
