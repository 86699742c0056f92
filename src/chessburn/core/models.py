"""Shared data models of the notation core."""

from __future__ import annotations

from dataclasses import dataclass

# Canonical FEN string; equality of positions is equality of keys.
PositionKey = str


@dataclass(frozen=True, slots=True)
class SquarePair:
    """Origin/destination squares, e.g. ``SquarePair("e2", "e4")``."""

    from_square: str
    to_square: str
    promotion: str | None = None

    def __str__(self) -> str:
        return f"{self.from_square}{self.to_square}{self.promotion or ''}"


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """A move accepted by the rules authority."""

    san: str
    squares: SquarePair
    position_after: PositionKey

    @property
    def from_square(self) -> str:
        return self.squares.from_square

    @property
    def to_square(self) -> str:
        return self.squares.to_square


@dataclass(frozen=True, slots=True)
class MovePair:
    """One numbered display row: a first-side move and an optional reply.

    ``index`` is the row position inside the paired history, used to map a
    half-move back to the ply it lands on.
    """

    number: int
    first: str | None
    second: str | None = None
    index: int = 0

    @property
    def first_ply(self) -> int:
        return self.index * 2 + 1

    @property
    def second_ply(self) -> int:
        return self.index * 2 + 2


@dataclass(slots=True)
class TokenizedGame:
    """Tokenizer output: candidate SAN tokens plus an optional start FEN."""

    tokens: list[str]
    start_fen: str | None = None
