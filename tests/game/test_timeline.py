"""Tests for Timeline: ply cursor, branching and replay."""

import pytest

from chessburn.core.errors import (
    IllegalMoveError,
    ImportTokenError,
    MalformedPositionError,
    NavigationOutOfRangeError,
)
from chessburn.core.rules import STARTING_FEN, ChessRulesAuthority
from chessburn.game.timeline import Timeline

AFTER_D4 = "rnbqkbnr/pppppppp/8/8/3P4/8/PPP1PPPP/RNBQKBNR b KQkq - 0 1"


def _timeline_with(fake_rules, moves: list[str]) -> Timeline:
    timeline = Timeline(fake_rules, "base")
    for move in moves:
        timeline.record_move(move)
    return timeline


class TestLoadBase:
    def test_initial_state(self) -> None:
        timeline = Timeline(ChessRulesAuthority())
        assert timeline.base_position == STARTING_FEN
        assert timeline.history == ()
        assert timeline.cursor == 0
        assert timeline.current_position() == STARTING_FEN
        assert timeline.last_move() is None

    def test_load_base_clears_history(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b"])
        timeline.load_base("base2")
        assert timeline.base_position == "base2"
        assert timeline.history == ()
        assert timeline.cursor == 0

    def test_malformed_base_keeps_state(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b"])
        with pytest.raises(MalformedPositionError):
            timeline.load_base("nonsense")
        assert timeline.base_position == "base"
        assert timeline.history == ("a", "b")
        assert timeline.cursor == 2


class TestRecordMove:
    def test_append_at_tip(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b"])
        assert timeline.history == ("a", "b")
        assert timeline.cursor == 2
        assert timeline.current_position() == "base|a|b"

    def test_branch_discards_future(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b", "c", "d"])
        timeline.jump_to(1)
        timeline.record_move("x")
        assert timeline.history == ("a", "x")
        assert timeline.cursor == 2
        assert timeline.current_position() == "base|a|x"

    def test_illegal_move_leaves_history(self, fake_rules) -> None:
        fake_rules.illegal = {"bad"}
        timeline = _timeline_with(fake_rules, ["a", "b"])
        timeline.jump_to(1)
        with pytest.raises(IllegalMoveError):
            timeline.record_move("bad")
        assert timeline.history == ("a", "b")
        assert timeline.cursor == 1

    def test_history_is_read_only_view(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a"])
        view = timeline.history
        assert isinstance(view, tuple)
        timeline.record_move("b")
        assert view == ("a",)


class TestNavigation:
    def test_jump_changes_only_cursor(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b", "c"])
        timeline.jump_to(1)
        assert timeline.cursor == 1
        assert timeline.history == ("a", "b", "c")
        assert timeline.current_position() == "base|a"
        last = timeline.last_move()
        assert last is not None and last.san == "a"

    @pytest.mark.parametrize("ply", [-1, 4, 100])
    def test_out_of_range(self, fake_rules, ply: int) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b", "c"])
        timeline.jump_to(2)
        with pytest.raises(NavigationOutOfRangeError):
            timeline.jump_to(ply)
        assert timeline.cursor == 2

    def test_jump_to_current_is_noop(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b"])
        before = timeline.current_position()
        events: list[int] = []
        timeline.events.on_changed.append(lambda tl: events.append(tl.cursor))
        timeline.jump_to(timeline.cursor)
        assert timeline.history == ("a", "b")
        assert timeline.current_position() == before
        assert events == []

    def test_step_flags_at_ends(self, fake_rules) -> None:
        timeline = Timeline(fake_rules, "base")
        assert not timeline.can_step_back
        assert not timeline.can_step_forward
        assert not timeline.step_back()
        assert not timeline.step_forward()

        timeline.record_move("a")
        assert timeline.can_step_back
        assert not timeline.can_step_forward

    def test_step_and_ends(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b", "c"])
        assert timeline.step_back()
        assert timeline.cursor == 2
        timeline.to_start()
        assert timeline.cursor == 0
        assert timeline.step_forward()
        assert timeline.cursor == 1
        timeline.to_latest()
        assert timeline.cursor == 3

    def test_position_is_replayed_on_every_read(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b"])
        fake_rules.calls.clear()
        timeline.current_position()
        timeline.current_position()
        assert len(fake_rules.calls) == 4


class TestImportMoves:
    def test_success_lands_on_ply_zero(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["old"])
        applied = timeline.import_moves("base9", ["a", "b", "c"])
        assert [move.san for move in applied] == ["a", "b", "c"]
        assert timeline.base_position == "base9"
        assert timeline.history == ("a", "b", "c")
        assert timeline.cursor == 0

    def test_failure_leaves_timeline_untouched(self) -> None:
        timeline = Timeline(ChessRulesAuthority())
        timeline.record_move("d4")
        with pytest.raises(ImportTokenError) as excinfo:
            timeline.import_moves(STARTING_FEN, ["e4", "e5", "Qh8"])
        assert excinfo.value.index == 3
        assert [move.san for move in excinfo.value.applied] == ["e4", "e5"]
        assert timeline.history == ("d4",)
        assert timeline.cursor == 1
        assert timeline.current_position() == AFTER_D4

    def test_bad_start_position(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a"])
        with pytest.raises(MalformedPositionError):
            timeline.import_moves("nope", ["a"])
        assert timeline.history == ("a",)

    def test_canonical_san_stored(self) -> None:
        timeline = Timeline(ChessRulesAuthority())
        timeline.import_moves(STARTING_FEN, ["e4", "e5", "Ng1f3", "Nc6"])
        assert timeline.history == ("e4", "e5", "Nf3", "Nc6")


class TestUndoAndEvents:
    def test_undo_last(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b"])
        assert timeline.undo_last()
        assert timeline.history == ("a",)
        assert timeline.cursor == 1

    def test_undo_keeps_earlier_cursor(self, fake_rules) -> None:
        timeline = _timeline_with(fake_rules, ["a", "b", "c"])
        timeline.jump_to(1)
        timeline.undo_last()
        assert timeline.history == ("a", "b")
        assert timeline.cursor == 1

    def test_undo_empty(self, fake_rules) -> None:
        assert not Timeline(fake_rules, "base").undo_last()

    def test_change_events(self, fake_rules) -> None:
        timeline = Timeline(fake_rules, "base")
        seen: list[tuple[int, int]] = []
        timeline.events.on_changed.append(
            lambda tl: seen.append((tl.ply_count, tl.cursor))
        )
        timeline.record_move("a")
        timeline.record_move("b")
        timeline.jump_to(0)
        timeline.load_base("base")
        assert seen == [(1, 1), (2, 2), (2, 0), (0, 0)]


class TestScenario:
    def test_branch_from_start_with_real_rules(self) -> None:
        rules = ChessRulesAuthority()
        timeline = Timeline(rules)
        timeline.record_move("e4")
        timeline.record_move("e5")
        timeline.jump_to(0)
        timeline.record_move("d4")

        assert timeline.history == ("d4",)
        assert timeline.cursor == 1
        assert timeline.current_position() == AFTER_D4
        assert (
            timeline.current_position()
            == rules.apply_move(STARTING_FEN, "d4").position_after
        )

        timeline.record_move("d5")
        assert "e5" not in timeline.history
        assert timeline.history == ("d4", "d5")

    def test_replay_consistency_for_every_ply(self) -> None:
        rules = ChessRulesAuthority()
        moves = ["e4", "c5", "Nf3", "d6", "d4", "cxd4", "Nxd4"]
        timeline = Timeline(rules)
        timeline.import_moves(STARTING_FEN, moves)

        position = STARTING_FEN
        for ply in range(len(moves) + 1):
            timeline.jump_to(ply)
            assert timeline.current_position() == position
            if ply < len(moves):
                position = rules.apply_move(position, moves[ply]).position_after
