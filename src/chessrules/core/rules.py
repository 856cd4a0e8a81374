"""High-level chess rules: move application, check, checkmate, stalemate."""

from __future__ import annotations

import logging
from dataclasses import replace

from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    PieceType,
    RejectReason,
)
from chessrules.core.exceptions import MoveRejected
from chessrules.core.move import Move
from chessrules.core.move_generator import Castle, MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.ruleset import STANDARD, RuleSet
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square("a", 1): CastlingRights.WHITE_QUEENSIDE,
    Square("h", 1): CastlingRights.WHITE_KINGSIDE,
    Square("a", 8): CastlingRights.BLACK_QUEENSIDE,
    Square("h", 8): CastlingRights.BLACK_KINGSIDE,
}


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # ── State transition ─────────────────────────────────────────────────

    @staticmethod
    def apply_move(
        position: Position, move: Move, ruleset: RuleSet = STANDARD
    ) -> Position:
        """Return the position after *move*; *position* itself is untouched.

        Raises:
            MoveRejected: the move is not allowed under *ruleset*.
        """
        from_sq, to_sq = move.from_sq, move.to_sq
        if not move.is_on_board:
            raise MoveRejected(move, RejectReason.OFF_BOARD)

        piece = position.piece_at(from_sq)
        if piece is None:
            raise MoveRejected(move, RejectReason.NO_PIECE)
        if ruleset.validate_every_move and piece.color != position.turn:
            raise MoveRejected(move, RejectReason.WRONG_TURN)

        target = position.piece_at(to_sq)
        if target is not None and target.piece_type == PieceType.KING:
            raise MoveRejected(move, RejectReason.ILLEGAL_DESTINATION)

        gen = MoveGenerator(position, ruleset)
        castle = Rules._castle_for(gen, piece, to_sq)
        en_passant_capture = False
        double_step = False

        if castle is None:
            if piece.piece_type == PieceType.PAWN or ruleset.validate_every_move:
                if to_sq not in gen.piece_moves(piece):
                    if (
                        piece.piece_type == PieceType.KING
                        and abs(to_sq.file_index - from_sq.file_index) == 2
                    ):
                        raise MoveRejected(move, RejectReason.CASTLING_NOT_ALLOWED)
                    raise MoveRejected(move, RejectReason.ILLEGAL_DESTINATION)
            if piece.piece_type == PieceType.PAWN:
                en_passant_capture = (
                    position.en_passant_available
                    and to_sq.file != from_sq.file
                    and position.last_move == Square(to_sq.file, from_sq.rank)
                )
                double_step = abs(to_sq.rank - from_sq.rank) == 2

        pieces = dict(position.pieces)
        castling = position.castling

        if castle is not None:
            rook_from, rook_to = castle.rook_squares(piece.color)
            rook = pieces.pop(rook_from)
            pieces[rook_to] = rook.moved_to(rook_to)
            _LOGGER.debug(
                "%s castles %s",
                piece.color,
                "kingside" if castle.kingside else "queenside",
            )

        if en_passant_capture:
            captured_sq = Square(to_sq.file, from_sq.rank)
            pieces.pop(captured_sq, None)
            _LOGGER.debug("En passant capture on %s", captured_sq)

        del pieces[from_sq]
        pieces[to_sq] = piece.moved_to(to_sq)

        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(piece.color)
        if ruleset.rook_moves_clear_castling:
            for sq in (from_sq, to_sq):
                if sq in _ROOK_CORNERS:
                    castling &= ~_ROOK_CORNERS[sq]

        next_position = Position(
            pieces,
            turn=position.turn.opposite,
            last_move=to_sq,
            # The old rules cleared the flag in the same move that set it.
            en_passant_available=double_step and ruleset.en_passant_window,
            castling=castling,
        )

        if ruleset.reject_self_check and Rules.is_in_check(
            next_position, piece.color, ruleset
        ):
            raise MoveRejected(move, RejectReason.SELF_CHECK)
        return next_position

    @staticmethod
    def _castle_for(gen: MoveGenerator, piece: Piece, to_sq: Square) -> Castle | None:
        if piece.piece_type != PieceType.KING:
            return None
        for castle in gen.available_castles(piece):
            if to_sq == castle.king_target(piece.color):
                return castle
        return None

    # ── Check detection ──────────────────────────────────────────────────

    @staticmethod
    def is_in_check(
        position: Position, color: Color, ruleset: RuleSet = STANDARD
    ) -> bool:
        return MoveGenerator(position, ruleset).is_in_check(color)

    @staticmethod
    def simulate_move_and_check(
        position: Position,
        from_sq: Square,
        to_sq: Square,
        color: Color,
        ruleset: RuleSet = STANDARD,
    ) -> bool:
        """Would moving the piece on *from_sq* to *to_sq* leave *color* in check?

        The hypothetical position is built and thrown away; *position* is
        never modified.  A move that would take *color*'s own king off the
        board counts as leaving it in check.
        """
        piece = position.piece_at(from_sq)
        if piece is None:
            return Rules.is_in_check(position, color, ruleset)

        candidate = position.relocated(from_sq, to_sq)
        if (
            piece.piece_type == PieceType.PAWN
            and position.en_passant_available
            and to_sq.file != from_sq.file
            and position.last_move == Square(to_sq.file, from_sq.rank)
        ):
            candidate = candidate.without(position.last_move)

        if not candidate.has_king(color):
            return True
        return Rules.is_in_check(candidate, color, ruleset)

    # ── Move enumeration ─────────────────────────────────────────────────

    @staticmethod
    def legal_destinations(
        position: Position, sq: Square, ruleset: RuleSet = STANDARD
    ) -> set[Square]:
        """Squares the piece on *sq* may move to without exposing its king."""
        piece = position.piece_at(sq)
        if piece is None:
            return set()
        gen = MoveGenerator(position, ruleset)
        return {
            to_sq
            for to_sq in gen.candidate_moves(piece)
            if not Rules.simulate_move_and_check(
                position, sq, to_sq, piece.color, ruleset
            )
        }

    @staticmethod
    def has_safe_move(
        position: Position, color: Color, ruleset: RuleSet = STANDARD
    ) -> bool:
        """Does any of *color*'s candidate moves leave its king unattacked?"""
        gen = MoveGenerator(position, ruleset)
        for piece in position.pieces_of(color):
            for to_sq in sorted(gen.candidate_moves(piece)):
                if not Rules.simulate_move_and_check(
                    position, piece.position, to_sq, color, ruleset
                ):
                    return True
        return False

    # ── Game-ending conditions ───────────────────────────────────────────

    @staticmethod
    def is_checkmate(
        position: Position, color: Color, ruleset: RuleSet = STANDARD
    ) -> bool:
        if not Rules.is_in_check(position, color, ruleset):
            return False
        return not Rules.has_safe_move(position, color, ruleset)

    @staticmethod
    def is_stalemate(
        position: Position, color: Color, ruleset: RuleSet = STANDARD
    ) -> bool:
        if Rules.is_in_check(position, color, ruleset):
            return False
        return not Rules.has_safe_move(position, color, ruleset)

    @staticmethod
    def game_result(position: Position, ruleset: RuleSet = STANDARD) -> GameResult:
        """Determine the current game result for the side to move."""
        side = position.turn
        if Rules.has_safe_move(position, side, ruleset):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(position, side, ruleset):
            if side == Color.WHITE:
                return GameResult.BLACK_WINS
            return GameResult.WHITE_WINS
        return GameResult.DRAW

    # ── Castling rights ──────────────────────────────────────────────────

    @staticmethod
    def clear_castling_rights(
        position: Position,
        color: Color,
        piece_type: PieceType,
        origin: Square | None = None,
        ruleset: RuleSet = STANDARD,
    ) -> Position:
        """Position with the rights a move of *piece_type* forfeits removed.

        A king forfeits both sides.  A rook forfeits the side of the corner
        it leaves, and only when ``rook_moves_clear_castling`` is on.
        """
        castling = position.castling
        if piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(color)
        elif (
            piece_type == PieceType.ROOK
            and ruleset.rook_moves_clear_castling
            and origin in _ROOK_CORNERS
        ):
            corner = _ROOK_CORNERS[origin]
            if corner & CastlingRights.both(color):
                castling &= ~corner
        if castling == position.castling:
            return position
        return replace(position, castling=castling)
