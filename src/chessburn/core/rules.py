"""Rules authority: move legality and FEN handling.

The core never decides legality itself. It talks to an
:class:`IRulesAuthority`, so tests can swap in a scripted fake while the
application uses :class:`ChessRulesAuthority` backed by python-chess.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import chess

from chessburn.core.errors import IllegalMoveError, MalformedPositionError
from chessburn.core.models import AppliedMove, PositionKey, SquarePair

STARTING_FEN: PositionKey = chess.STARTING_FEN

_PROMOTION_PIECES = {
    "q": chess.QUEEN,
    "r": chess.ROOK,
    "b": chess.BISHOP,
    "n": chess.KNIGHT,
}


class IRulesAuthority(ABC):
    """Interface for the collaborator that knows the rules of the game."""

    @abstractmethod
    def load_position(self, fen: str) -> PositionKey:
        """Return the canonical key for *fen* or raise MalformedPositionError."""

    @abstractmethod
    def validate_position(self, fen: str) -> tuple[bool, str]:
        """Return ``(True, "")`` or ``(False, reason)``."""

    @abstractmethod
    def apply_move(self, position: PositionKey, move: str | SquarePair) -> AppliedMove:
        """Apply SAN or a square pair to *position*.

        Raises:
            IllegalMoveError: the move is not legal in *position*.
        """

    @abstractmethod
    def legal_moves_from(self, position: PositionKey, square: str) -> set[str]:
        """Destination squares reachable from *square*."""


def _status_reason(status: chess.Status) -> str:
    problems = [
        (flag.name or "").lower().replace("_", " ")
        for flag in chess.Status
        if flag and status & flag
    ]
    return ", ".join(problem for problem in problems if problem) or "illegal position"


class ChessRulesAuthority(IRulesAuthority):
    """Standard chess rules through python-chess.

    Stateless: every call builds its own :class:`chess.Board`.
    """

    __slots__ = ("_promotion",)

    def __init__(self, promotion: str = "q") -> None:
        piece = _PROMOTION_PIECES.get(promotion.lower())
        if piece is None:
            raise ValueError(f"Unknown promotion piece: {promotion!r}")
        self._promotion = piece

    def _board(self, fen: str) -> chess.Board:
        try:
            board = chess.Board(fen)
        except ValueError as exc:
            raise MalformedPositionError(fen, str(exc)) from exc
        status = board.status()
        if status != chess.STATUS_VALID:
            raise MalformedPositionError(fen, _status_reason(status))
        return board

    def load_position(self, fen: str) -> PositionKey:
        return self._board(fen).fen()

    def validate_position(self, fen: str) -> tuple[bool, str]:
        try:
            self._board(fen)
        except MalformedPositionError as exc:
            return False, exc.reason
        return True, ""

    def apply_move(self, position: PositionKey, move: str | SquarePair) -> AppliedMove:
        board = self._board(position)
        if isinstance(move, SquarePair):
            parsed = self._move_from_squares(board, move)
        else:
            try:
                parsed = board.parse_san(move)
            except ValueError as exc:
                raise IllegalMoveError(position, move, str(exc)) from exc
            if not parsed:
                raise IllegalMoveError(position, move, "null move")

        san = board.san(parsed)
        board.push(parsed)
        squares = SquarePair(
            chess.square_name(parsed.from_square),
            chess.square_name(parsed.to_square),
            chess.piece_symbol(parsed.promotion) if parsed.promotion else None,
        )
        return AppliedMove(san=san, squares=squares, position_after=board.fen())

    def _move_from_squares(self, board: chess.Board, pair: SquarePair) -> chess.Move:
        try:
            from_sq = chess.parse_square(pair.from_square)
            to_sq = chess.parse_square(pair.to_square)
        except ValueError as exc:
            raise IllegalMoveError(board.fen(), pair, str(exc)) from exc

        promotion = self._promotion
        if pair.promotion is not None:
            promotion = _PROMOTION_PIECES.get(pair.promotion.lower(), promotion)

        candidate = chess.Move(from_sq, to_sq)
        if board.is_legal(candidate):
            return candidate
        # Pawn reaching the last rank needs a promotion piece.
        promoted = chess.Move(from_sq, to_sq, promotion=promotion)
        if board.is_legal(promoted):
            return promoted
        raise IllegalMoveError(board.fen(), pair)

    def legal_moves_from(self, position: PositionKey, square: str) -> set[str]:
        board = self._board(position)
        try:
            from_sq = chess.parse_square(square)
        except ValueError:
            return set()
        return {
            chess.square_name(move.to_square)
            for move in board.legal_moves
            if move.from_square == from_sq
        }
