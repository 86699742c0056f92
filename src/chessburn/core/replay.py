"""Replay resolver: rebuild positions from a base position and a move list."""

from __future__ import annotations

from collections.abc import Sequence

from chessburn.core.errors import IllegalMoveError, ImportTokenError
from chessburn.core.models import AppliedMove, PositionKey
from chessburn.core.rules import IRulesAuthority


def apply_all(
    rules: IRulesAuthority,
    base: PositionKey,
    moves: Sequence[str],
) -> list[AppliedMove]:
    """Apply *moves* left to right starting from *base*.

    Raises:
        ImportTokenError: on the first rejected move, carrying its 1-based
            index and every move applied before it.
    """
    applied: list[AppliedMove] = []
    position = base
    for index, notation in enumerate(moves, start=1):
        try:
            move = rules.apply_move(position, notation)
        except IllegalMoveError as exc:
            raise ImportTokenError(index, notation, applied) from exc
        applied.append(move)
        position = move.position_after
    return applied


def position_at(
    rules: IRulesAuthority,
    base: PositionKey,
    moves: Sequence[str],
    ply: int,
) -> tuple[PositionKey, AppliedMove | None]:
    """Position after the first *ply* moves and the move that produced it.

    *ply* is clamped to ``[0, len(moves)]``.
    """
    ply = max(0, min(ply, len(moves)))
    if ply == 0:
        return base, None
    applied = apply_all(rules, base, moves[:ply])
    last = applied[-1]
    return last.position_after, last
