from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .situation import Situation
from .tree import GameTreeNode, build_tree, count_nodes, minimax

logger = logging.getLogger(__name__)

MoveT = TypeVar("MoveT")


@dataclass
class SearchResult(Generic[MoveT]):
    best_move: Optional[MoveT]
    value: int
    nodes: int


class MinimaxEngine(Generic[MoveT]):
    """Full-width, depth-limited minimax over a :class:`Situation`.

    The engine keeps the authoritative situation for one side. Searching never
    changes it; callers commit moves, their own and the opponent's, through
    :meth:`apply_move` so the engine stays in step with the real game.
    """

    def __init__(self, ply_limit: int, situation: Situation[MoveT]) -> None:
        if ply_limit < 0:
            raise ValueError(f"ply limit must be non-negative, got {ply_limit}")
        self._ply_limit = ply_limit
        self._situation = situation

    @property
    def ply_limit(self) -> int:
        return self._ply_limit

    @property
    def situation(self) -> Situation[MoveT]:
        return self._situation

    def apply_move(self, move: MoveT) -> None:
        self._situation.apply_move(move)

    def choose_move(self) -> Optional[MoveT]:
        """Return the best move for the current situation, or None if there is none."""
        return self.search().best_move

    def search(self) -> SearchResult[MoveT]:
        """Build, evaluate and discard a tree rooted at the current situation."""
        root = GameTreeNode(situation=self._situation, maximizing=True)
        build_tree(root, self._ply_limit)
        selected = minimax(root)

        best_move: Optional[MoveT] = None
        if selected is not None:
            best_move = root.children[selected].move
        result: SearchResult[MoveT] = SearchResult(
            best_move=best_move,
            value=root.value,
            nodes=count_nodes(root),
        )
        logger.debug(
            "searched %d nodes to ply %d: value=%d move=%s",
            result.nodes,
            self._ply_limit,
            result.value,
            best_move,
        )
        return result
