"""Named test positions offered by the FEN loader."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PositionPreset:
    name: str
    fen: str


PRESETS: tuple[PositionPreset, ...] = (
    PositionPreset("Start", "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"),
    PositionPreset(
        "After 1. e4", "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
    ),
    PositionPreset(
        "After 1... c5", "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 2"
    ),
    PositionPreset(
        "En passant available",
        "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 3",
    ),
    PositionPreset(
        "Castle both sides", "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1"
    ),
    PositionPreset(
        "Kiwipete",
        "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
    ),
    PositionPreset("Promotion test", "4k3/4P3/8/8/8/8/8/4K3 w - - 0 1"),
    PositionPreset("Bare kings", "8/8/8/8/8/8/8/4K2k w - - 0 1"),
)


def preset_by_name(name: str) -> PositionPreset:
    for preset in PRESETS:
        if preset.name == name:
            return preset
    raise KeyError(name)


def random_preset(rng: random.Random | None = None) -> PositionPreset:
    return (rng or random).choice(PRESETS)
