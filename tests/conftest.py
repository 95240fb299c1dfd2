"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

import pytest

Tree = Union[int, Dict[str, Any]]


class ScriptedSituation:
    """A situation driven by a hand-written game tree.

    Internal positions are dicts mapping move names to subtrees (insertion
    order is move order); leaves are ints and score themselves. Internal
    positions score as ``heuristic`` when the search is cut off at them.
    """

    def __init__(self, tree: Tree, path: Tuple[str, ...] = (), heuristic: int = 0) -> None:
        self.tree = tree
        self.path = path
        self.heuristic = heuristic
        self.evaluations = 0

    def _node(self) -> Tree:
        node = self.tree
        for move in self.path:
            node = node[move]
        return node

    def legal_moves(self) -> List[str]:
        node = self._node()
        return list(node) if isinstance(node, dict) else []

    def apply_move(self, move: str) -> None:
        if move not in self.legal_moves():
            raise ValueError(f"Illegal move: {move}")
        self.path = self.path + (move,)

    def with_move(self, move: str) -> "ScriptedSituation":
        return ScriptedSituation(self.tree, self.path + (move,), self.heuristic)

    def evaluate(self) -> int:
        self.evaluations += 1
        node = self._node()
        return node if isinstance(node, int) else self.heuristic


@pytest.fixture
def scripted():
    return ScriptedSituation
