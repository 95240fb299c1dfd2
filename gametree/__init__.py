"""Generic game-tree search.

Modules:
- situation: the capability contract a game state must satisfy
- tree: search tree nodes, full-width tree build and minimax evaluation
- engine: the engine that owns the current situation and picks moves
"""

from .engine import MinimaxEngine, SearchResult
from .situation import Situation
from .tree import GameTreeNode, build_tree, count_nodes, minimax

__all__ = [
    "MinimaxEngine",
    "SearchResult",
    "Situation",
    "GameTreeNode",
    "build_tree",
    "count_nodes",
    "minimax",
]
