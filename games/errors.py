from __future__ import annotations


class IllegalMoveError(ValueError):
    """A move that is not legal in the situation it was applied to."""


class NoMoveAvailable(RuntimeError):
    """A player was asked to move in a position with no legal moves."""
