from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .situation import Situation


@dataclass(slots=True)
class GameTreeNode:
    """One hypothetical state in a search tree.

    ``move`` is None only at the root, which stands for the real current
    situation. ``value`` stays None until :func:`minimax` has visited the node.
    """

    situation: Situation[Any]
    move: Optional[Any] = None
    maximizing: bool = True
    value: Optional[int] = None
    children: List["GameTreeNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


def build_tree(node: GameTreeNode, depth: int) -> None:
    """Expand ``node`` full-width down to ``depth`` more plies."""
    if depth == 0:
        return
    situation = node.situation
    node.children = [
        GameTreeNode(
            situation=situation.with_move(move),
            move=move,
            maximizing=not node.maximizing,
        )
        for move in situation.legal_moves()
    ]
    for child in node.children:
        build_tree(child, depth - 1)


def minimax(node: GameTreeNode) -> Optional[int]:
    """Evaluate ``node`` bottom-up and return the index of its selected child.

    Leaves take the situation's own score and return None. On ties the first
    child in enumeration order wins, since later children must be strictly
    better to replace it.
    """
    if not node.children:
        node.value = node.situation.evaluate()
        return None

    for child in node.children:
        minimax(child)

    best = 0
    best_value = node.children[0].value
    for idx, child in enumerate(node.children):
        if node.maximizing:
            better = child.value > best_value
        else:
            better = child.value < best_value
        if better:
            best = idx
            best_value = child.value

    node.value = best_value
    return best


def count_nodes(node: GameTreeNode) -> int:
    return 1 + sum(count_nodes(child) for child in node.children)
