from __future__ import annotations

from typing import Dict, List, Optional

import chess

from .errors import IllegalMoveError

MATE_SCORE = 100000


class Evaluator:
    """Static evaluation for chess positions.

    Positive scores favor White, negative scores favor Black. Units are centipawns.
    """

    MATERIAL_VALUES: Dict[chess.PieceType, int] = {
        chess.PAWN: 100,
        chess.KNIGHT: 320,
        chess.BISHOP: 330,
        chess.ROOK: 500,
        chess.QUEEN: 900,
        chess.KING: 0,
    }

    MOBILITY_WEIGHT = 2

    @classmethod
    def evaluate(cls, board: chess.Board) -> int:
        outcome = board.outcome()
        if outcome is not None:
            if outcome.winner is None:
                return 0
            return MATE_SCORE if outcome.winner == chess.WHITE else -MATE_SCORE

        score = 0
        for piece_type, value in cls.MATERIAL_VALUES.items():
            score += value * len(board.pieces(piece_type, chess.WHITE))
            score -= value * len(board.pieces(piece_type, chess.BLACK))

        # A null move is only sound when the side to move is not in check.
        if not board.is_check():
            own = board.legal_moves.count()
            board.push(chess.Move.null())
            theirs = board.legal_moves.count()
            board.pop()
            if board.turn == chess.WHITE:
                score += cls.MOBILITY_WEIGHT * (own - theirs)
            else:
                score += cls.MOBILITY_WEIGHT * (theirs - own)

        return score


class ChessSituation:
    """A python-chess board scored for ``owner``.

    Finished games (mate, stalemate, insufficient material, the 75-move and
    fivefold rules) offer no legal moves.
    """

    def __init__(self, board: Optional[chess.Board] = None, owner: chess.Color = chess.WHITE) -> None:
        self.board = board if board is not None else chess.Board()
        self.owner = owner

    @classmethod
    def from_fen(cls, fen: str, owner: chess.Color = chess.WHITE) -> "ChessSituation":
        return cls(chess.Board(fen), owner)

    def legal_moves(self) -> List[chess.Move]:
        if self.board.is_game_over():
            return []
        return list(self.board.legal_moves)

    def apply_move(self, move: chess.Move) -> None:
        if move not in self.board.legal_moves:
            raise IllegalMoveError(f"Illegal move: {move.uci()}")
        self.board.push(move)

    def with_move(self, move: chess.Move) -> "ChessSituation":
        board = self.board.copy(stack=False)
        board.push(move)
        return ChessSituation(board, self.owner)

    def evaluate(self) -> int:
        score = Evaluator.evaluate(self.board)
        return score if self.owner == chess.WHITE else -score

    def outcome(self) -> Optional[str]:
        if not self.board.is_game_over():
            return None
        return self.board.result()

    def render(self) -> str:
        return str(self.board)

    def __repr__(self) -> str:
        return f"ChessSituation({self.board.fen()!r}, owner={chess.COLOR_NAMES[self.owner]})"


def parse_move(situation: ChessSituation, text: str) -> chess.Move:
    """Parse UCI (``e2e4``) or SAN (``Nf3``) input against the current board."""
    text = text.strip()
    board = situation.board
    try:
        move = chess.Move.from_uci(text)
    except ValueError:
        try:
            return board.parse_san(text)
        except ValueError:
            raise IllegalMoveError(f"Illegal move: {text}") from None
    if move in board.legal_moves:
        return move

    # Auto-queen promotion if the user sends e7e8 or similar without suffix
    if move.promotion is None:
        piece = board.piece_at(move.from_square)
        if piece and piece.piece_type == chess.PAWN:
            promo_move = chess.Move(move.from_square, move.to_square, promotion=chess.QUEEN)
            if promo_move in board.legal_moves:
                return promo_move

    raise IllegalMoveError(f"Illegal move: {text}")
