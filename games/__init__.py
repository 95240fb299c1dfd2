"""Games and front ends built on the ``gametree`` engine.

Modules:
- tictactoe: 3x3 tic-tac-toe situation
- chess_position: python-chess backed situation and static evaluator
- players: human and computer players
- console: console match loop and CLI
"""

from .chess_position import ChessSituation, Evaluator
from .errors import IllegalMoveError, NoMoveAvailable
from .players import ComputerPlayer, HumanPlayer, Player
from .tictactoe import Mark, TicTacToeMove, TicTacToeSituation

__all__ = [
    "ChessSituation",
    "Evaluator",
    "IllegalMoveError",
    "NoMoveAvailable",
    "ComputerPlayer",
    "HumanPlayer",
    "Player",
    "Mark",
    "TicTacToeMove",
    "TicTacToeSituation",
]
