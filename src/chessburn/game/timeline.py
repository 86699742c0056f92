"""Timeline: base position, linear move history and a ply cursor.

The position at the cursor is never stored. Every read replays
``history[:cursor]`` from the base position through the rules authority.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from chessburn.core.errors import NavigationOutOfRangeError
from chessburn.core.models import AppliedMove, PositionKey, SquarePair
from chessburn.core.replay import apply_all, position_at
from chessburn.core.rules import STARTING_FEN, IRulesAuthority

_LOGGER = logging.getLogger(__name__)

ChangeCallback = Callable[["Timeline"], None]


@dataclass
class TimelineEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_changed: list[ChangeCallback] = field(default_factory=list)


class Timeline:
    """Ply-indexed game history with branch-on-edit semantics.

    Not thread-safe; callers serialize access (the Qt UI thread does).
    """

    __slots__ = ("_rules", "_base", "_history", "_cursor", "events")

    def __init__(
        self,
        rules: IRulesAuthority,
        base: PositionKey = STARTING_FEN,
    ) -> None:
        self._rules = rules
        self._base = rules.load_position(base)
        self._history: list[str] = []
        self._cursor = 0
        self.events = TimelineEvents()

    # ── Read-only views ──────────────────────────────────────────────────

    @property
    def base_position(self) -> PositionKey:
        return self._base

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def ply_count(self) -> int:
        return len(self._history)

    @property
    def can_step_back(self) -> bool:
        return self._cursor > 0

    @property
    def can_step_forward(self) -> bool:
        return self._cursor < len(self._history)

    def current_position(self) -> PositionKey:
        position, _last = self._snapshot()
        return position

    def last_move(self) -> AppliedMove | None:
        _position, last = self._snapshot()
        return last

    # ── Edits ────────────────────────────────────────────────────────────

    def load_base(self, position: PositionKey) -> None:
        """Start over from *position* with an empty history."""
        self._base = self._rules.load_position(position)
        self._history = []
        self._cursor = 0
        _LOGGER.debug("Timeline base set to %s", self._base)
        self._emit_changed()

    def record_move(self, move: str | SquarePair) -> AppliedMove:
        """Play *move* at the cursor, discarding any recorded future plies."""
        applied = self._rules.apply_move(self.current_position(), move)
        discarded = len(self._history) - self._cursor
        self._history = self._history[: self._cursor] + [applied.san]
        self._cursor = len(self._history)
        if discarded:
            _LOGGER.debug(
                "Branched at ply %d, dropped %d plies", self._cursor - 1, discarded
            )
        self._emit_changed()
        return applied

    def import_moves(
        self,
        start_position: PositionKey,
        moves: Sequence[str],
    ) -> list[AppliedMove]:
        """Replace the timeline with a validated game, cursor at ply 0.

        Raises:
            MalformedPositionError: *start_position* is rejected.
            ImportTokenError: a move is rejected; the timeline is unchanged.
        """
        base = self._rules.load_position(start_position)
        applied = apply_all(self._rules, base, moves)
        self._base = base
        self._history = [move.san for move in applied]
        self._cursor = 0
        _LOGGER.debug("Imported %d plies", len(applied))
        self._emit_changed()
        return applied

    def undo_last(self) -> bool:
        """Drop the most recent recorded ply. Returns False when empty."""
        if not self._history:
            return False
        self._history.pop()
        self._cursor = min(self._cursor, len(self._history))
        self._emit_changed()
        return True

    # ── Navigation ───────────────────────────────────────────────────────

    def jump_to(self, ply: int) -> None:
        if ply < 0 or ply > len(self._history):
            raise NavigationOutOfRangeError(ply, len(self._history))
        if ply == self._cursor:
            return
        self._cursor = ply
        self._emit_changed()

    def step_back(self) -> bool:
        if not self.can_step_back:
            return False
        self.jump_to(self._cursor - 1)
        return True

    def step_forward(self) -> bool:
        if not self.can_step_forward:
            return False
        self.jump_to(self._cursor + 1)
        return True

    def to_start(self) -> None:
        self.jump_to(0)

    def to_latest(self) -> None:
        self.jump_to(len(self._history))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _snapshot(self) -> tuple[PositionKey, AppliedMove | None]:
        return position_at(self._rules, self._base, self._history, self._cursor)

    def _emit_changed(self) -> None:
        for cb in self.events.on_changed:
            cb(self)
