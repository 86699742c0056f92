"""Core domain layer: transcript tokenizing, replay and the rules seam.

Quick start::

    from chessburn.core import ChessRulesAuthority, STARTING_FEN, tokenize, position_at

    rules = ChessRulesAuthority()
    game = tokenize("1. e4 e5 2. Nf3 {develops} Nc6 1-0")
    fen, last = position_at(rules, STARTING_FEN, game.tokens, 2)
"""

from chessburn.core.errors import (
    ChessburnError,
    IllegalMoveError,
    ImportTokenError,
    MalformedPositionError,
    NavigationOutOfRangeError,
)
from chessburn.core.models import (
    AppliedMove,
    MovePair,
    PositionKey,
    SquarePair,
    TokenizedGame,
)
from chessburn.core.notation import (
    StartPositionPolicy,
    format_movetext,
    pair_up,
    starting_number,
    tokenize,
)
from chessburn.core.presets import PRESETS, PositionPreset, random_preset
from chessburn.core.replay import apply_all, position_at
from chessburn.core.rules import STARTING_FEN, ChessRulesAuthority, IRulesAuthority

__all__ = [
    # Errors
    "ChessburnError",
    "IllegalMoveError",
    "ImportTokenError",
    "MalformedPositionError",
    "NavigationOutOfRangeError",
    # Models
    "AppliedMove",
    "MovePair",
    "PositionKey",
    "SquarePair",
    "TokenizedGame",
    # Rules
    "STARTING_FEN",
    "ChessRulesAuthority",
    "IRulesAuthority",
    # Notation / replay
    "StartPositionPolicy",
    "apply_all",
    "format_movetext",
    "pair_up",
    "position_at",
    "starting_number",
    "tokenize",
    # Presets
    "PRESETS",
    "PositionPreset",
    "random_preset",
]
