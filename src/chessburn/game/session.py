"""ViewerSession: the viewer's actions on top of a single Timeline.

Coordinates: Tokenizer, Timeline, settings, position presets.
Interactive failures come back as return values; the UI decides how to show
them.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from chessburn.core.errors import IllegalMoveError, ImportTokenError
from chessburn.core.models import AppliedMove, MovePair, PositionKey, SquarePair
from chessburn.core.notation import pair_up, starting_number, tokenize
from chessburn.core.presets import PositionPreset, random_preset
from chessburn.core.rules import STARTING_FEN, ChessRulesAuthority, IRulesAuthority
from chessburn.game.timeline import Timeline
from chessburn.settings import ViewerSettings

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ImportReport:
    """Outcome of a transcript import."""

    start_fen: PositionKey
    tokens: list[str]
    applied: list[AppliedMove] = field(default_factory=list)
    failure: ImportTokenError | None = None
    adopted_partial: bool = False

    @property
    def ok(self) -> bool:
        return self.failure is None


class ViewerSession:
    """Owns the active Timeline and the viewer's load/import/play actions."""

    __slots__ = ("_rules", "_settings", "timeline", "loaded_name")

    def __init__(
        self,
        rules: IRulesAuthority | None = None,
        settings: ViewerSettings | None = None,
    ) -> None:
        self._settings = settings or ViewerSettings()
        self._rules = rules or ChessRulesAuthority(self._settings.promotion_piece)
        self.timeline = Timeline(self._rules)
        self.loaded_name = ""

    @property
    def settings(self) -> ViewerSettings:
        return self._settings

    # ── Positions ────────────────────────────────────────────────────────

    def reset(self) -> None:
        self.timeline.load_base(STARTING_FEN)
        self.loaded_name = ""

    def load_fen(self, text: str, name: str = "Custom FEN") -> None:
        """Load a typed/pasted FEN. Raises MalformedPositionError when invalid."""
        fen = " ".join(text.split())
        try:
            self.timeline.load_base(fen)
        except ValueError:
            _LOGGER.warning("Rejected position: %s", fen)
            raise
        self.loaded_name = name
        _LOGGER.info("Loaded position %r", name)

    def load_preset(self, preset: PositionPreset) -> None:
        self.load_fen(preset.fen, name=preset.name)

    def load_random_preset(self, rng: random.Random | None = None) -> PositionPreset:
        preset = random_preset(rng)
        self.load_preset(preset)
        return preset

    # ── Import ───────────────────────────────────────────────────────────

    def import_transcript(self, text: str, name: str = "Imported game") -> ImportReport:
        """Tokenize and import *text*.

        A rejected move leaves the timeline untouched unless
        ``accept_partial_imports`` is enabled, in which case the valid prefix
        is adopted. Raises MalformedPositionError for a bad start FEN.
        """
        parsed = tokenize(text, self._settings.start_position_policy)
        start_fen = parsed.start_fen or STARTING_FEN
        report = ImportReport(start_fen=start_fen, tokens=parsed.tokens)
        try:
            report.applied = self.timeline.import_moves(start_fen, parsed.tokens)
        except ImportTokenError as exc:
            _LOGGER.warning("Import stopped at move %d (%s)", exc.index, exc.token)
            report.applied = exc.applied
            report.failure = exc
            if self._settings.accept_partial_imports:
                self.accept_partial(report)
            return report

        self.loaded_name = name
        _LOGGER.info("Imported %d plies", len(report.applied))
        return report

    def accept_partial(self, report: ImportReport) -> None:
        """Adopt the valid prefix of a failed import."""
        sans = [move.san for move in report.applied]
        self.timeline.import_moves(report.start_fen, sans)
        report.adopted_partial = True
        if report.failure is not None:
            self.loaded_name = f"Partial import ({len(report.applied)} plies)"

    # ── Interactive play ─────────────────────────────────────────────────

    def play(self, move: str | SquarePair) -> AppliedMove | None:
        """Record an interactive move. Returns None if it is illegal."""
        try:
            return self.timeline.record_move(move)
        except IllegalMoveError as exc:
            _LOGGER.debug("%s", exc)
            return None

    def legal_targets(self, square: str) -> set[str]:
        return self._rules.legal_moves_from(self.timeline.current_position(), square)

    def undo(self) -> bool:
        return self.timeline.undo_last()

    # ── Display ──────────────────────────────────────────────────────────

    def move_pairs(self) -> list[MovePair]:
        return pair_up(
            self.timeline.history,
            starting_number(self.timeline.base_position),
        )
