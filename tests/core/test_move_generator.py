"""Tests for pseudo-legal move generation and attack detection."""

from chessrules.core.enums import Color, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import position_from_fen
from chessrules.core.position import Position
from chessrules.core.ruleset import LEGACY, STANDARD
from chessrules.core.types import (
    A4, A7, B2, B4, B6, C3, C4, C5,
    D1, D2, D3, D4, D5, D6, D8,
    E1, E2, E3, E4, E5, E6, E7, E8,
    F1, F2, F3, F4, F6, G1, G4, H3, H4,
    Square,
)


def _moves(fen: str, sq: Square, ruleset=STANDARD) -> set[Square]:
    return MoveGenerator(position_from_fen(fen), ruleset).moves_from(sq)


class TestPawn:
    def test_unmoved_pawn_double_step(self) -> None:
        gen = MoveGenerator(Position.initial())
        assert gen.moves_from(E2) == {E3, E4}
        assert gen.moves_from(E7) == {E6, E5}

    def test_moved_pawn_single_step(self) -> None:
        assert _moves("4k3/8/8/8/8/4P3/8/4K3 w - - 0 1", E3) == {E4}

    def test_blocked_pawn(self) -> None:
        assert _moves("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1", E2) == set()

    def test_double_step_blocked_on_far_square(self) -> None:
        assert _moves("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1", E2) == {E3}

    def test_captures_only_enemy_diagonals(self) -> None:
        # White pawn e4, black pawn d5, white pawn f5
        fen = "4k3/8/8/3p1P2/4P3/8/8/4K3 w - - 0 1"
        assert _moves(fen, E4) == {E5, D5}

    def test_no_moves_into_empty_diagonals(self) -> None:
        gen = MoveGenerator(Position.initial())
        assert D3 not in gen.moves_from(E2)
        assert F3 not in gen.moves_from(E2)

    def test_en_passant_target(self) -> None:
        fen = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"
        assert _moves(fen, E5) == {E6, D6}

    def test_en_passant_needs_eligibility(self) -> None:
        fen = "4k3/8/8/3pP3/8/8/8/4K3 w - - 0 1"
        assert _moves(fen, E5) == {E6}

    def test_legacy_en_passant_needs_unmoved_capturer(self) -> None:
        fen = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"
        assert _moves(fen, E5, LEGACY) == {E6}

    def test_edge_file_pawn(self) -> None:
        gen = MoveGenerator(Position.initial())
        assert gen.moves_from(Square("a", 2)) == {Square("a", 3), A4}


class TestKnight:
    def test_start_position_skips_own_pieces(self) -> None:
        gen = MoveGenerator(Position.initial())
        assert gen.moves_from(G1) == {F3, H3}

    def test_legacy_lands_on_own_pieces(self) -> None:
        gen = MoveGenerator(Position.initial(), LEGACY)
        assert gen.moves_from(G1) == {E2, F3, H3}

    def test_center_knight(self) -> None:
        assert len(_moves("4k3/8/8/8/3N4/8/8/4K3 w - - 0 1", D4)) == 8


class TestBishop:
    # White bishop d4, black pawn f6, white pawn b2
    FEN = "4k3/8/5p2/8/3B4/8/1P6/4K3 w - - 0 1"

    def test_rays_stop_at_first_piece(self) -> None:
        assert _moves(self.FEN, D4) == {
            E5, F6,  # enemy captured, ray ends
            C5, B6, A7,
            E3, F2, G1,
            C3,  # own pawn on b2 ends the ray
        }

    def test_same_in_legacy(self) -> None:
        assert _moves(self.FEN, D4, LEGACY) == _moves(self.FEN, D4)

    def test_boxed_in_at_start(self) -> None:
        assert MoveGenerator(Position.initial()).moves_from(F1) == set()


class TestRookAndQueen:
    # White rook d4, white pawn d6, black pawn f4
    FEN = "7k/8/3P4/8/3R1p2/8/8/7K w - - 0 1"

    def test_rook_blocked(self) -> None:
        assert _moves(self.FEN, D4) == {D5, D3, D2, D1, E4, F4, C4, B4, A4}

    def test_legacy_rook_covers_full_rank_and_file(self) -> None:
        moves = _moves(self.FEN, D4, LEGACY)
        assert len(moves) == 14
        assert D6 in moves and D8 in moves  # through and onto own pawn
        assert H4 in moves and G4 in moves  # past the black pawn
        assert D4 not in moves

    def test_queen_combines_lines_and_diagonals(self) -> None:
        fen = "7k/8/3P4/8/3Q1p2/8/8/7K w - - 0 1"
        moves = _moves(fen, D4)
        assert {D5, F4, A4, D1} <= moves
        assert D6 not in moves
        assert {E5, A7, G1, Square("a", 1)} <= moves

    def test_legacy_queen_diagonals_still_blocked(self) -> None:
        fen = "7k/8/8/8/3Q4/2P5/8/7K w - - 0 1"
        moves = _moves(fen, D4, LEGACY)
        assert C3 not in moves
        assert B2 not in moves
        assert D8 in moves


class TestKing:
    def test_boxed_in_at_start(self) -> None:
        assert MoveGenerator(Position.initial()).moves_from(E1) == set()

    def test_open_board(self) -> None:
        assert len(_moves("4k3/8/8/8/3K4/8/8/8 w - - 0 1", D4)) == 8

    def test_castling_is_not_a_king_move(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"
        assert _moves(fen, E1) == {D1, D2, E2, F2, F1}

    def test_castle_targets(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        gen = MoveGenerator(pos)
        assert gen.castle_targets(pos.piece_at(E1)) == {G1, Square("c", 1)}
        assert gen.castle_targets(pos.piece_at(E8)) == {Square("g", 8), Square("c", 8)}

    def test_castle_targets_need_empty_path(self) -> None:
        gen = MoveGenerator(Position.initial())
        assert gen.castle_targets(Position.initial().piece_at(E1)) == set()

    def test_legacy_castle_targets_ignore_path(self) -> None:
        pos = Position.initial()
        gen = MoveGenerator(pos, LEGACY)
        assert gen.castle_targets(pos.piece_at(E1)) == {G1, Square("c", 1)}


class TestAttacks:
    def test_check_detected(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        gen = MoveGenerator(pos)
        assert gen.is_in_check(Color.WHITE)
        assert not gen.is_in_check(Color.BLACK)

    def test_check_matches_move_membership(self) -> None:
        pos = position_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        gen = MoveGenerator(pos)
        king = pos.king_square(Color.WHITE)
        attackers = [p for p in pos.pieces_of(Color.BLACK) if king in gen.piece_moves(p)]
        assert [p.piece_type for p in attackers] == [PieceType.QUEEN]
        assert gen.is_in_check(Color.WHITE)

    def test_pawn_attacks_empty_diagonals(self) -> None:
        pos = Position.initial()
        gen = MoveGenerator(pos)
        assert gen.is_square_attacked(D3, Color.WHITE)
        assert not gen.is_square_attacked(D3, Color.BLACK)

    def test_blocked_rook_does_not_attack(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4P3/4K3 w - - 0 1")
        assert not MoveGenerator(pos).is_in_check(Color.WHITE)
        assert MoveGenerator(pos, LEGACY).is_in_check(Color.WHITE)

    def test_moves_from_empty_square(self) -> None:
        assert MoveGenerator(Position.initial()).moves_from(E4) == set()

    def test_piece_moves_pure(self) -> None:
        pos = Position.initial()
        before = dict(pos.pieces)
        gen = MoveGenerator(pos)
        for piece in pos:
            gen.piece_moves(piece)
        assert dict(pos.pieces) == before
