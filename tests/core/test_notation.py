"""Tests for coordinate move parsing and FEN-style position I/O."""

import pytest

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import (
    STARTING_FEN,
    parse_move,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.position import Position
from chessrules.core.types import A2, D5, E1, E2, E4, E5, E8, G1, H1, Square


class TestParseMove:
    @pytest.mark.parametrize("text", ["e2 e4", "e2e4", "e2-e4", "  E2   E4 "])
    def test_accepted_forms(self, text: str) -> None:
        assert parse_move(text) == Move(E2, E4)

    @pytest.mark.parametrize("text", ["", "e2", "e2 e9", "i2 e4", "e2 e4 e5", "Nf3"])
    def test_rejected_forms(self, text: str) -> None:
        with pytest.raises(ValueError, match="Invalid move"):
            parse_move(text)

    def test_str_round_trip(self) -> None:
        assert str(parse_move("g1f3")) == "g1 f3"


class TestFenParse:
    def test_starting_position(self) -> None:
        assert position_from_fen(STARTING_FEN) == Position.initial()

    def test_side_and_castling(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 1")
        assert pos.turn == Color.BLACK
        assert pos.castling == CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE

    def test_en_passant_maps_to_last_move(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert pos.en_passant_available
        assert pos.last_move == D5

    def test_moved_flag_from_home_squares(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/P7/4K1R1 w - - 0 1")
        assert not pos.piece_at(A2).has_moved
        assert pos.piece_at(E5).has_moved
        assert not pos.piece_at(E1).has_moved
        assert pos.piece_at(G1).has_moved  # rooks start on a and h
        assert not pos.piece_at(E8).has_moved

    def test_clocks_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - -")
        assert pos.piece_at(E1).piece_type == PieceType.KING

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8/8/8/8/8 w - - 0 1",
            "9/8/8/8/8/8/8/8 w - - 0 1",
            "4k4/8/8/8/8/8/8/4K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 x - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w KK - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w X - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - e3 0 1",
            "4k3/8/8/8/8/8/8/4K2X w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3",
            "4k3/8/8/8/8/8/8/4R3 w - - 0 1",
            "8/8/8/8/8/8/8/4K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/3KK3 w - - 0 1",
            "4k3/8/8/4P3/8/8/8/4K3 w - e6 0 1",
            "4k3/8/8/3nP3/8/8/8/4K3 w - d6 0 1",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestFenWrite:
    def test_starting_round_trip(self) -> None:
        assert position_to_fen(Position.initial()) == STARTING_FEN

    @pytest.mark.parametrize(
        "fen",
        [
            "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1",
            "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1",
            "4k3/8/8/8/3pP3/8/8/4K3 b - e3 0 1",
            "7k/8/5KQ1/8/8/8/8/8 b - - 0 1",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_no_rights(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K2R w - - 0 1")
        assert position_to_fen(pos).split()[2] == "-"
        assert pos.piece_at(H1) is not None
        assert pos.piece_at(Square("h", 1)).color == Color.WHITE


class TestFenBoundary:
    def test_missing_king_named(self) -> None:
        with pytest.raises(ValueError, match="WHITE king"):
            position_from_fen("4k3/8/8/8/8/8/8/4R3 w - - 0 1")

    def test_en_passant_needs_enemy_pawn(self) -> None:
        with pytest.raises(ValueError, match="no pawn"):
            position_from_fen("4k3/8/8/4P3/8/8/8/4K3 w - e6 0 1")
