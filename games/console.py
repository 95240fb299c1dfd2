"""Console front end: play a match between humans and/or the engine."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

import chess

from gametree import MinimaxEngine

from . import chess_position, tictactoe
from .errors import NoMoveAvailable
from .players import ComputerPlayer, HumanPlayer, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Variant:
    name: str
    # side index (0 moves first) -> situation owned by that side
    new_situation: Callable[[int], Any]
    parse_move: Callable[[Any, str], Any]
    default_depth: int


def _tictactoe_situation(side: int) -> tictactoe.TicTacToeSituation:
    owner = tictactoe.Mark.OFFENSIVE if side == 0 else tictactoe.Mark.DEFENSIVE
    return tictactoe.TicTacToeSituation(owner)


def _chess_situation(side: int) -> chess_position.ChessSituation:
    return chess_position.ChessSituation(owner=chess.WHITE if side == 0 else chess.BLACK)


VARIANTS: Dict[str, Variant] = {
    "tictactoe": Variant("tictactoe", _tictactoe_situation, tictactoe.parse_move, 9),
    "chess": Variant("chess", _chess_situation, chess_position.parse_move, 2),
}

PLAYER_KINDS = ("human", "computer")


def make_player(
    kind: str,
    variant: Variant,
    side: int,
    depth: int,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Player:
    name = f"player {side}"
    if kind == "computer":
        engine = MinimaxEngine(depth, variant.new_situation(side))
        return ComputerPlayer(engine, name=name)
    if kind == "human":
        return HumanPlayer(variant.new_situation(side), variant.parse_move, read_line, write, name=name)
    raise ValueError(f"Unknown player kind: {kind}")


def play_match(players: Sequence[Player], tracker: Any, write: Callable[[str], None] = print) -> str:
    """Alternate turns until ``tracker`` reports an outcome, and return it.

    Every confirmed move goes to both players and to ``tracker``.
    """
    round_no = 0
    current = 0
    write("Begin!")
    write(tracker.render())
    result = tracker.outcome()
    while result is None:
        move = players[current].next_move()
        for player in players:
            player.receive_move(move)
        tracker.apply_move(move)
        round_no += 1
        current = 1 - current
        write(f"\nRound {round_no}")
        write(tracker.render())
        result = tracker.outcome()
    write(f"Result: {result}")
    return result


def ask_player_kind(side: int, read_line: Callable[[str], str]) -> str:
    answer = read_line(f"Choose player {side} type C/H: ").strip()
    return "computer" if answer in ("C", "c") else "human"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gametree-play",
        description="Play a game against the minimax engine (or watch it play itself).",
    )
    parser.add_argument("--game", choices=sorted(VARIANTS), default="tictactoe")
    parser.add_argument("--first", choices=PLAYER_KINDS, help="who moves first (asked if omitted)")
    parser.add_argument("--second", choices=PLAYER_KINDS, help="who moves second (asked if omitted)")
    parser.add_argument("--depth", type=int, help="engine ply limit (defaults per game)")
    parser.add_argument("--rounds", type=int, default=1, help="number of matches to play")
    parser.add_argument("-v", "--verbose", action="store_true", help="log engine searches")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    variant = VARIANTS[args.game]
    depth = variant.default_depth if args.depth is None else args.depth
    if depth < 0:
        parser.error("--depth must be non-negative")

    results: List[str] = []
    try:
        for _ in range(args.rounds):
            kinds = [args.first, args.second]
            for side, kind in enumerate(kinds):
                if kind is None:
                    kinds[side] = ask_player_kind(side, read_line)
            players = [
                make_player(kind, variant, side, depth, read_line, write)
                for side, kind in enumerate(kinds)
            ]
            tracker = variant.new_situation(0)
            results.append(play_match(players, tracker, write))
    except (EOFError, KeyboardInterrupt):
        write("\naborted")
        return 1
    except NoMoveAvailable as exc:
        logger.error("%s", exc)
        return 2

    logger.info("results: %s", ", ".join(results))
    return 0
