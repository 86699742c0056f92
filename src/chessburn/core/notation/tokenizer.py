"""Transcript sanitizer: free-form PGN-like text to SAN move tokens."""

from __future__ import annotations

import re
from enum import Enum

from chessburn.core.models import TokenizedGame

_TAG_RE = re.compile(r'\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]')
# Leftover bracketed lines that are not well-formed tags.
_TAG_LINE_RE = re.compile(r"^[ \t]*\[[^\n]*\][ \t]*$", re.MULTILINE)
_BRACE_COMMENT_RE = re.compile(r"\{[^}]*(?:\}|\Z)")
_LINE_COMMENT_RE = re.compile(r";[^\n]*")
_ESCAPE_LINE_RE = re.compile(r"^%[^\n]*", re.MULTILINE)
_NAG_RE = re.compile(r"\$\d+")
_MOVE_NUMBER_RE = re.compile(r"\d+\.(?:\.+)?")
_RESULT_RE = re.compile(r"(?<!\S)(?:1-0|0-1|1/2-1/2|\*)(?!\S)")
_ANNOTATION_TAIL = "!?"
_CHECK_TAIL = "+#"


class StartPositionPolicy(Enum):
    """When a ``[FEN]`` tag defines the starting position."""

    REQUIRE_SETUP_TAG = "require_setup_tag"  # [FEN] only counts with [SetUp "1"]
    FEN_TAG_ALONE = "fen_tag_alone"


def _unescape(value: str) -> str:
    return value.replace('\\"', '"').replace("\\\\", "\\")


def extract_start_fen(
    text: str,
    policy: StartPositionPolicy = StartPositionPolicy.REQUIRE_SETUP_TAG,
) -> str | None:
    """Return the FEN tag value if *policy* allows it, else ``None``."""
    tags = {key: _unescape(value) for key, value in _TAG_RE.findall(text)}
    fen = tags.get("FEN", "").strip()
    if not fen:
        return None
    if policy is StartPositionPolicy.REQUIRE_SETUP_TAG and tags.get("SetUp") != "1":
        return None
    return fen


def strip_variations(text: str) -> str:
    """Remove parenthesized variations of any nesting depth.

    Unmatched ``)`` is ignored, an unclosed ``(`` drops the rest of the text.
    """
    out: list[str] = []
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
            # Keep tokens on both sides of the variation apart.
            out.append(" ")
        elif ch == ")":
            depth = max(0, depth - 1)
        elif depth == 0:
            out.append(ch)
    return "".join(out)


def clean_token(token: str) -> str:
    """Drop ``!``/``?`` glyphs from the tail while keeping ``+``/``#``."""
    end = len(token)
    while end > 0 and token[end - 1] in _ANNOTATION_TAIL + _CHECK_TAIL:
        end -= 1
    head, tail = token[:end], token[end:]
    tail = "".join(ch for ch in tail if ch not in _ANNOTATION_TAIL)
    return (head + tail).lstrip(".")


def tokenize(
    raw_text: str,
    policy: StartPositionPolicy = StartPositionPolicy.REQUIRE_SETUP_TAG,
) -> TokenizedGame:
    """Turn a transcript into ordered SAN candidates plus an optional start FEN.

    No legality check happens here; tokens are candidates until replayed.

    >>> tokenize("1. e4 e5 2. Nf3 Nc6").tokens
    ['e4', 'e5', 'Nf3', 'Nc6']
    """
    text = raw_text.replace("\r\n", "\n").replace("\r", "\n")
    start_fen = extract_start_fen(text, policy)

    text = _TAG_RE.sub(" ", text)
    text = _TAG_LINE_RE.sub("", text)
    text = _BRACE_COMMENT_RE.sub(" ", text)
    text = _LINE_COMMENT_RE.sub("", text)
    text = _ESCAPE_LINE_RE.sub("", text)
    text = strip_variations(text)
    text = _NAG_RE.sub(" ", text)
    text = _MOVE_NUMBER_RE.sub(" ", text)
    text = _RESULT_RE.sub(" ", text)

    tokens: list[str] = []
    for raw_token in text.split():
        token = clean_token(raw_token)
        if token:
            tokens.append(token)
    return TokenizedGame(tokens=tokens, start_fen=start_fen)
