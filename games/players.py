from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from gametree import MinimaxEngine, Situation

from .errors import IllegalMoveError, NoMoveAvailable

logger = logging.getLogger(__name__)


class Player(Protocol):
    """Anything that can take a turn in a match.

    ``receive_move`` is called for every confirmed move, including the
    player's own, so each player keeps its own view of the game in sync.
    """

    def next_move(self) -> Any: ...

    def receive_move(self, move: Any) -> None: ...


class HumanPlayer:
    """Reads moves from a person, re-prompting until one is legal."""

    def __init__(
        self,
        situation: Situation[Any],
        parse_move: Callable[[Any, str], Any],
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        name: Optional[str] = None,
    ) -> None:
        self.situation = situation
        self.parse_move = parse_move
        self.read_line = read_line
        self.write = write
        self.name = name or "human"

    def next_move(self) -> Any:
        while True:
            text = self.read_line("Input next move: ")
            try:
                move = self.parse_move(self.situation, text)
            except IllegalMoveError as exc:
                self.write(f"invalid input: {exc}")
                continue
            if move in self.situation.legal_moves():
                return move
            self.write(f"invalid input: {text.strip()} is not a legal move")

    def receive_move(self, move: Any) -> None:
        self.situation.apply_move(move)


class ComputerPlayer:
    """Lets a :class:`MinimaxEngine` pick moves for one side."""

    def __init__(self, engine: MinimaxEngine[Any], name: Optional[str] = None) -> None:
        self.engine = engine
        self.name = name or "computer"

    def next_move(self) -> Any:
        move = self.engine.choose_move()
        if move is None:
            raise NoMoveAvailable(f"{self.name} has no move in {self.engine.situation!r}")
        logger.info("%s plays %s", self.name, move)
        return move

    def receive_move(self, move: Any) -> None:
        self.engine.apply_move(move)
