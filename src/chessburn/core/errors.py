"""Error kinds raised by the notation core.

All of them derive from :class:`ValueError` so callers that only care about
"bad notation" can keep catching that.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessburn.core.models import AppliedMove, SquarePair


class ChessburnError(ValueError):
    """Base class for recoverable core errors."""


class MalformedPositionError(ChessburnError):
    """The rules authority rejected a position key."""

    def __init__(self, fen: str, reason: str) -> None:
        super().__init__(f"Invalid FEN: {reason}")
        self.fen = fen
        self.reason = reason


class IllegalMoveError(ChessburnError):
    """The rules authority rejected a move in the given position."""

    def __init__(self, position: str, move: str | SquarePair, reason: str = "") -> None:
        text = f"Illegal move: {move}"
        if reason:
            text = f"{text} ({reason})"
        super().__init__(text)
        self.position = position
        self.move = move
        self.reason = reason


class ImportTokenError(ChessburnError):
    """A transcript token could not be applied during import.

    ``index`` is 1-based; ``applied`` holds every move replayed before it.
    """

    def __init__(self, index: int, token: str, applied: list[AppliedMove]) -> None:
        super().__init__(f"Move {index} ({token}) could not be applied")
        self.index = index
        self.token = token
        self.applied = list(applied)


class NavigationOutOfRangeError(ChessburnError):
    """Jump target outside ``[0, ply_count]``."""

    def __init__(self, ply: int, ply_count: int) -> None:
        super().__init__(f"Ply {ply} is outside 0..{ply_count}")
        self.ply = ply
        self.ply_count = ply_count
