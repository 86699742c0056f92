"""Tests for move history panel behavior."""

from __future__ import annotations

from chessburn.core.notation import pair_up
from chessburn.ui.panels.move_panel import MovePanel


def test_set_pairs_and_toggle_notation_rebuilds_text() -> None:
    panel = MovePanel()
    panel.set_pairs(pair_up(["Nf3", "Nc6"]), current_ply=2)

    assert panel._move_buttons[1].text() == "♘f3"
    assert panel._move_buttons[2].text() == "♞c6"

    panel.set_use_figurine_notation(False)
    assert panel._move_buttons[1].text() == "Nf3"
    assert panel._move_buttons[2].text() == "Nc6"


def test_black_first_history_uses_black_figurines() -> None:
    panel = MovePanel()
    panel.set_pairs(pair_up(["Nc6", "Nf3"]), current_ply=0, white_first=False)

    assert panel._move_buttons[1].text() == "♞c6"
    assert panel._move_buttons[2].text() == "♘f3"


def test_clicking_move_emits_ply() -> None:
    panel = MovePanel()
    panel.set_pairs(pair_up(["e4", "e5", "Nf3"]), current_ply=3)

    clicked: list[int] = []
    panel.move_clicked.connect(clicked.append)
    panel._move_buttons[2].click()

    assert clicked == [2]


def test_current_ply_highlight() -> None:
    panel = MovePanel()
    panel.set_pairs(pair_up(["e4", "e5", "Nf3"]), current_ply=3)
    assert panel._move_buttons[3].property("activeMove") is True
    assert panel._move_buttons[1].property("activeMove") is False

    panel.set_current_ply(0)
    assert panel.current_ply == 0
    assert not any(btn.property("activeMove") for btn in panel._move_buttons.values())


def test_odd_history_has_no_second_button() -> None:
    panel = MovePanel()
    panel.set_pairs(pair_up(["e4", "e5", "Nf3"]), current_ply=3)
    assert sorted(panel._move_buttons) == [1, 2, 3]
    assert panel._list.count() == 2


def test_empty_placeholder_and_clear() -> None:
    panel = MovePanel()
    panel.set_pairs([], current_ply=0)
    assert not panel._empty_label.isHidden()

    panel.set_pairs(pair_up(["e4"]), current_ply=1)
    assert panel._empty_label.isHidden()

    panel.clear()
    assert panel._move_buttons == {}
    assert panel.current_ply == 0
    assert not panel._empty_label.isHidden()


def test_set_use_figurine_notation_noop_when_value_unchanged() -> None:
    panel = MovePanel()
    panel.set_pairs(pair_up(["Nf3"]), current_ply=1)
    first_button = panel._move_buttons[1]

    panel.set_use_figurine_notation(True)

    assert panel._move_buttons[1] is first_button
