"""Tests for move-list display helpers."""

from chessburn.core.models import MovePair
from chessburn.core.notation import (
    figurine_san,
    format_movetext,
    pair_up,
    starting_number,
    white_moves_first,
)


class TestPairUp:
    def test_odd_history(self) -> None:
        pairs = pair_up(["e4", "e5", "Nf3"])
        assert [(p.number, p.first, p.second) for p in pairs] == [
            (1, "e4", "e5"),
            (2, "Nf3", None),
        ]

    def test_empty_history(self) -> None:
        assert pair_up([]) == []

    def test_custom_start_number(self) -> None:
        pairs = pair_up(["Nf3", "Nc6"], start_number=12)
        assert pairs == [MovePair(number=12, first="Nf3", second="Nc6", index=0)]

    def test_plies_of_each_half(self) -> None:
        pairs = pair_up(["e4", "e5", "Nf3", "Nc6"])
        assert (pairs[0].first_ply, pairs[0].second_ply) == (1, 2)
        assert (pairs[1].first_ply, pairs[1].second_ply) == (3, 4)


class TestStartingNumber:
    def test_standard_start(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
        assert starting_number(fen) == 1

    def test_later_move(self) -> None:
        fen = "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 2"
        assert starting_number(fen) == 2

    def test_missing_field(self) -> None:
        assert starting_number("8/8/8/8/8/8/8/4K2k w - -") == 1

    def test_malformed_field(self) -> None:
        assert starting_number("8/8/8/8/8/8/8/4K2k w - - 0 x") == 1
        assert starting_number("8/8/8/8/8/8/8/4K2k w - - 0 0") == 1


class TestMovetext:
    def test_flat_rendering(self) -> None:
        assert format_movetext(["e4", "e5", "Nf3"]) == "1. e4 e5 2. Nf3"

    def test_empty(self) -> None:
        assert format_movetext([]) == ""


class TestFigurines:
    def test_piece_and_promotion(self) -> None:
        assert figurine_san("Nf3", white=True) == "♘f3"
        assert figurine_san("e8=Q+", white=True) == "e8=♕+"
        assert figurine_san("Qxd1", white=False) == "♛xd1"

    def test_pawn_and_castling_unchanged(self) -> None:
        assert figurine_san("e4", white=True) == "e4"
        assert figurine_san("O-O", white=False) == "O-O"

    def test_side_to_move(self) -> None:
        assert white_moves_first("8/8/8/8/8/8/8/4K2k w - - 0 1")
        assert not white_moves_first("8/8/8/8/8/8/8/4K2k b - - 0 1")
