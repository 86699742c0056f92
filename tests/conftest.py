"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from chessburn.core.errors import IllegalMoveError, MalformedPositionError
from chessburn.core.models import AppliedMove, SquarePair
from chessburn.core.rules import IRulesAuthority

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class FakeRules(IRulesAuthority):
    """Deterministic rules: a position is the ``|``-joined move path.

    Any token is legal except those listed in ``illegal``. Positions must
    start with ``base``.
    """

    def __init__(self, illegal: set[str] | None = None) -> None:
        self.illegal = illegal or set()
        self.calls: list[tuple[str, str]] = []

    def load_position(self, fen: str) -> str:
        if not fen.startswith("base"):
            raise MalformedPositionError(fen, "not a fake position")
        return fen

    def validate_position(self, fen: str) -> tuple[bool, str]:
        if fen.startswith("base"):
            return True, ""
        return False, "not a fake position"

    def apply_move(self, position: str, move: str | SquarePair) -> AppliedMove:
        san = str(move)
        self.calls.append((position, san))
        if san in self.illegal:
            raise IllegalMoveError(position, move)
        return AppliedMove(
            san=san,
            squares=SquarePair(san[:2], san[-2:]),
            position_after=f"{position}|{san}",
        )

    def legal_moves_from(self, position: str, square: str) -> set[str]:
        return set()


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture
def fake_rules() -> FakeRules:
    return FakeRules()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
