"""Display helpers: numbered move pairs and figurine SAN."""

from __future__ import annotations

from collections.abc import Sequence

from chessburn.core.models import MovePair

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[bool, dict[str, str]] = {
    True: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    False: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}


def starting_number(position: str) -> int:
    """Fullmove number of a FEN, or 1 when the field is missing or malformed."""
    fields = position.split()
    if len(fields) < 6:
        return 1
    try:
        number = int(fields[5])
    except ValueError:
        return 1
    return number if number >= 1 else 1


def white_moves_first(position: str) -> bool:
    """True unless the FEN side-to-move field says black."""
    fields = position.split()
    return len(fields) < 2 or fields[1] != "b"


def pair_up(history: Sequence[str], start_number: int = 1) -> list[MovePair]:
    """Group *history* two plies per row, numbering rows from *start_number*."""
    pairs: list[MovePair] = []
    for index, ply in enumerate(range(0, len(history), 2)):
        second = history[ply + 1] if ply + 1 < len(history) else None
        pairs.append(
            MovePair(
                number=start_number + index,
                first=history[ply],
                second=second,
                index=index,
            )
        )
    return pairs


def format_movetext(history: Sequence[str], start_number: int = 1) -> str:
    """Render history as flat movetext, e.g. ``"1. e4 e5 2. Nf3"``."""
    parts: list[str] = []
    for pair in pair_up(history, start_number):
        parts.append(f"{pair.number}.")
        if pair.first is not None:
            parts.append(pair.first)
        if pair.second is not None:
            parts.append(pair.second)
    return " ".join(parts)


def figurine_san(san: str, white: bool) -> str:
    """Replace piece letters in *san* with Unicode figurines for one side."""
    table = _FIGURINE[white]

    # Leading piece letter (Nf3, Qxd5, Ke2...)
    if san and san[0] in table:
        san = table[san[0]] + san[1:]

    # Promotion target (e8=Q -> e8=♕)
    if "=" in san:
        prefix, _, promo = san.partition("=")
        if promo:
            san = prefix + "=" + table.get(promo[0], promo[0]) + promo[1:]

    return san
