from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .errors import IllegalMoveError

LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Mark(enum.Enum):
    OFFENSIVE = "O"
    DEFENSIVE = "X"

    def other(self) -> "Mark":
        return Mark.DEFENSIVE if self is Mark.OFFENSIVE else Mark.OFFENSIVE


@dataclass(frozen=True, slots=True)
class TicTacToeMove:
    cell: int
    mark: Mark

    def __str__(self) -> str:
        return f"{self.mark.value}@{self.cell}"


class TicTacToeSituation:
    """3x3 board scored for ``owner``.

    A won board has no legal moves, so the search treats it as terminal.
    ``evaluate`` returns 1 when ``owner`` completed a line, -1 when the
    opponent did, and 0 otherwise.
    """

    __slots__ = ("owner", "to_move", "_cells")

    def __init__(
        self,
        owner: Mark,
        to_move: Mark = Mark.OFFENSIVE,
        cells: Optional[Sequence[Optional[Mark]]] = None,
    ) -> None:
        if cells is None:
            cells = (None,) * 9
        if len(cells) != 9:
            raise ValueError(f"Expected 9 cells, got {len(cells)}")
        self.owner = owner
        self.to_move = to_move
        self._cells: Tuple[Optional[Mark], ...] = tuple(cells)

    @classmethod
    def from_string(cls, board: str, owner: Mark, to_move: Optional[Mark] = None) -> "TicTacToeSituation":
        """Build from a 9-character string such as ``"OO.XX...."``.

        When ``to_move`` is omitted it is inferred from the mark counts.
        """
        if len(board) != 9:
            raise ValueError(f"Expected 9 cells, got {len(board)}")
        by_char = {m.value: m for m in Mark}
        cells = [by_char.get(ch.upper()) for ch in board]
        if to_move is None:
            offensive = cells.count(Mark.OFFENSIVE)
            defensive = cells.count(Mark.DEFENSIVE)
            to_move = Mark.OFFENSIVE if offensive <= defensive else Mark.DEFENSIVE
        return cls(owner, to_move, cells)

    @property
    def cells(self) -> Tuple[Optional[Mark], ...]:
        return self._cells

    def winner(self) -> Optional[Mark]:
        cells = self._cells
        for a, b, c in LINES:
            if cells[a] is not None and cells[a] == cells[b] == cells[c]:
                return cells[a]
        return None

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def outcome(self) -> Optional[str]:
        """``"O"`` or ``"X"`` for a win, ``"draw"`` for a full board, else None."""
        winner = self.winner()
        if winner is not None:
            return winner.value
        if self.is_full():
            return "draw"
        return None

    def legal_moves(self) -> List[TicTacToeMove]:
        if self.winner() is not None:
            return []
        return [
            TicTacToeMove(cell, self.to_move)
            for cell, occupant in enumerate(self._cells)
            if occupant is None
        ]

    def apply_move(self, move: TicTacToeMove) -> None:
        self._check_move(move)
        self._cells = self._placed(move)
        self.to_move = self.to_move.other()

    def with_move(self, move: TicTacToeMove) -> "TicTacToeSituation":
        self._check_move(move, check_decided=False)
        return TicTacToeSituation(self.owner, self.to_move.other(), self._placed(move))

    def evaluate(self) -> int:
        winner = self.winner()
        if winner is None:
            return 0
        return 1 if winner is self.owner else -1

    def render(self) -> str:
        rows = []
        for start in (0, 3, 6):
            rows.append(
                " ".join(
                    f"[{idx}]{self._cells[idx].value if self._cells[idx] else ' '}"
                    for idx in range(start, start + 3)
                )
            )
        return "\n".join(rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToeSituation):
            return NotImplemented
        return (self.owner, self.to_move, self._cells) == (other.owner, other.to_move, other._cells)

    def __repr__(self) -> str:
        board = "".join(cell.value if cell else "." for cell in self._cells)
        return f"TicTacToeSituation(owner={self.owner.value}, to_move={self.to_move.value}, board={board!r})"

    def _placed(self, move: TicTacToeMove) -> Tuple[Optional[Mark], ...]:
        cells = list(self._cells)
        cells[move.cell] = move.mark
        return tuple(cells)

    def _check_move(self, move: TicTacToeMove, check_decided: bool = True) -> None:
        if not 0 <= move.cell < 9:
            raise IllegalMoveError(f"Cell out of range: {move.cell}")
        if self._cells[move.cell] is not None:
            raise IllegalMoveError(f"Cell {move.cell} is already taken")
        if move.mark is not self.to_move:
            raise IllegalMoveError(f"It is {self.to_move.value}'s turn, not {move.mark.value}'s")
        if check_decided and self.winner() is not None:
            raise IllegalMoveError("Game is already decided")


def parse_move(situation: TicTacToeSituation, text: str) -> TicTacToeMove:
    """Parse a cell index typed by a human for the side to move."""
    try:
        cell = int(text.strip())
    except ValueError:
        raise IllegalMoveError(f"Not a cell number: {text.strip()!r}") from None
    if not 0 <= cell < 9:
        raise IllegalMoveError(f"Cell out of range: {cell}")
    return TicTacToeMove(cell, situation.to_move)
