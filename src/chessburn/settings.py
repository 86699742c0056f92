"""User-configurable viewer settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessburn.core.notation.tokenizer import StartPositionPolicy


@dataclass
class ViewerSettings:
    """All user-configurable settings."""

    # Import
    start_position_policy: StartPositionPolicy = StartPositionPolicy.REQUIRE_SETUP_TAG
    accept_partial_imports: bool = False

    # Interactive moves
    promotion_piece: str = "q"

    # Move list
    use_figurine_notation: bool = True

    # Diagnostics
    log_level: str = "WARNING"
