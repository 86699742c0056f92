"""Notation package: transcript tokenizing and move-list formatting."""

from chessburn.core.notation.formatter import (
    figurine_san,
    format_movetext,
    pair_up,
    starting_number,
    white_moves_first,
)
from chessburn.core.notation.tokenizer import (
    StartPositionPolicy,
    clean_token,
    extract_start_fen,
    strip_variations,
    tokenize,
)

__all__ = [
    "StartPositionPolicy",
    "clean_token",
    "extract_start_fen",
    "figurine_san",
    "format_movetext",
    "pair_up",
    "starting_number",
    "strip_variations",
    "tokenize",
    "white_moves_first",
]
