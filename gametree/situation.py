from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

MoveT = TypeVar("MoveT")


class Situation(Protocol[MoveT]):
    """Capability contract for any searchable game state.

    Implementations own their own mutation; the engine only calls these four
    operations. ``evaluate`` is always scored from the perspective of the side
    the search runs for, never the side to move at that node.
    """

    def legal_moves(self) -> Sequence[MoveT]:
        """Moves for the side to move, in a deterministic order."""
        ...

    def apply_move(self, move: MoveT) -> None:
        """Advance in place by ``move`` and hand the turn to the other side."""
        ...

    def with_move(self, move: MoveT) -> "Situation[MoveT]":
        """Return the successor after ``move``, leaving ``self`` untouched."""
        ...

    def evaluate(self) -> int:
        """Signed score: positive favors the owner, negative the opponent."""
        ...
