"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.ruleset import STANDARD, RuleSet
from chessrules.core.types import FILES, RANKS, Square

if TYPE_CHECKING:
    from chessrules.core.piece import Piece
    from chessrules.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True, slots=True)
class Castle:
    """Geometry of one castling side, expressed in files."""

    kingside: bool
    rook_file: str
    king_to_file: str
    rook_to_file: str
    empty_files: str
    safe_files: str

    def right(self, color: Color) -> CastlingRights:
        if self.kingside:
            return CastlingRights.kingside(color)
        return CastlingRights.queenside(color)

    def king_target(self, color: Color) -> Square:
        return Square(self.king_to_file, color.home_rank)

    def rook_squares(self, color: Color) -> tuple[Square, Square]:
        """(rook origin, rook destination) for *color*."""
        home = color.home_rank
        return Square(self.rook_file, home), Square(self.rook_to_file, home)


KINGSIDE = Castle(True, "h", "g", "f", empty_files="fg", safe_files="fg")
QUEENSIDE = Castle(False, "a", "c", "d", empty_files="bcd", safe_files="cd")
CASTLES: tuple[Castle, ...] = (KINGSIDE, QUEENSIDE)


class MoveGenerator:
    """Generates pseudo-legal destinations for the pieces of a :class:`Position`.

    Pseudo-legal means the piece's movement pattern with blocking and capture
    rules applied, but without asking whether the mover's own king ends up
    attacked; :class:`~chessrules.core.rules.Rules` filters for that.
    """

    __slots__ = ("_pos", "_rules")

    def __init__(self, position: Position, ruleset: RuleSet = STANDARD) -> None:
        self._pos = position
        self._rules = ruleset

    # -- Public API ---------------------------------------------------------

    def moves_from(self, sq: Square) -> set[Square]:
        """Pseudo-legal destinations of the piece on *sq* (empty if none)."""
        piece = self._pos.piece_at(sq)
        if piece is None:
            return set()
        return self.piece_moves(piece)

    def piece_moves(self, piece: Piece) -> set[Square]:
        """Pseudo-legal destinations of *piece*.  Castling is not included."""
        match piece.piece_type:
            case PieceType.PAWN:
                return self._pawn_moves(piece)
            case PieceType.KNIGHT:
                return self._knight_moves(piece)
            case PieceType.BISHOP:
                return self._ray_moves(piece, BISHOP_DIRS)
            case PieceType.ROOK:
                return self._straight_moves(piece)
            case PieceType.QUEEN:
                return self._straight_moves(piece) | self._ray_moves(piece, BISHOP_DIRS)
            case PieceType.KING:
                return self._king_moves(piece)
        raise ValueError(f"Unknown piece type: {piece.piece_type!r}")

    def candidate_moves(self, piece: Piece) -> set[Square]:
        """Pseudo-legal destinations plus castle targets the rules permit."""
        moves = self.piece_moves(piece)
        if piece.piece_type == PieceType.KING and self._rules.strict_castling:
            moves |= self.castle_targets(piece)
        return moves

    def castle_targets(self, king: Piece) -> set[Square]:
        """King destinations that would castle right now."""
        castles = self.available_castles(king)
        return {castle.king_target(king.color) for castle in castles}

    def available_castles(self, king: Piece) -> list[Castle]:
        color = king.color
        home = color.home_rank
        castles: list[Castle] = []
        for castle in CASTLES:
            if not self._pos.castling & castle.right(color):
                continue
            rook = self._pos.piece_at(Square(castle.rook_file, home))
            if rook is None or not rook.is_a(color, PieceType.ROOK):
                continue
            if self._rules.strict_castling and not self._castle_path_clear(
                king, castle
            ):
                continue
            castles.append(castle)
        return castles

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king in some opposing piece's move set?"""
        king_sq = self._pos.king_square(color)
        return any(
            king_sq in self.piece_moves(piece)
            for piece in self._pos.pieces_of(color.opposite)
        )

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Unlike plain move membership, a pawn attacks both forward diagonals
        whether or not anything stands there.
        """
        return any(
            sq in self.attacked_squares(piece)
            for piece in self._pos.pieces_of(by_color)
        )

    def attacked_squares(self, piece: Piece) -> set[Square]:
        if piece.piece_type == PieceType.PAWN:
            forward = piece.color.forward
            return {
                sq
                for sq in (
                    piece.position.offset(-1, forward),
                    piece.position.offset(1, forward),
                )
                if sq.is_on_board()
            }
        return self.piece_moves(piece)

    # -- Piece-specific generators (private) -------------------------------

    def _pawn_moves(self, pawn: Piece) -> set[Square]:
        pos = self._pos
        here = pawn.position
        forward = pawn.color.forward
        moves: set[Square] = set()

        one_step = here.offset(0, forward)
        if one_step.is_on_board() and pos.is_empty(one_step):
            moves.add(one_step)
            if not pawn.has_moved:
                two_step = here.offset(0, 2 * forward)
                if two_step.is_on_board() and pos.is_empty(two_step):
                    moves.add(two_step)

        for df in (-1, 1):
            cap_sq = here.offset(df, forward)
            target = pos.piece_at(cap_sq)
            if target is not None and target.color != pawn.color:
                moves.add(cap_sq)

        if self._en_passant_open(pawn):
            last = pos.last_move
            if last in (here.offset(-1, 0), here.offset(1, 0)):
                victim = pos.piece_at(last)
                if victim is not None and victim.is_a(
                    pawn.color.opposite, PieceType.PAWN
                ):
                    moves.add(Square(last.file, here.rank + forward))
        return moves

    def _en_passant_open(self, pawn: Piece) -> bool:
        if not self._pos.en_passant_available:
            return False
        # The old rules only let a pawn that never moved capture en passant.
        return self._rules.en_passant_window or not pawn.has_moved

    def _knight_moves(self, knight: Piece) -> set[Square]:
        moves: set[Square] = set()
        for df, dr in KNIGHT_OFFSETS:
            to_sq = knight.position.offset(df, dr)
            if not to_sq.is_on_board():
                continue
            if self._rules.knight_avoids_own_pieces:
                target = self._pos.piece_at(to_sq)
                if target is not None and target.color == knight.color:
                    continue
            moves.add(to_sq)
        return moves

    def _straight_moves(self, piece: Piece) -> set[Square]:
        if self._rules.straight_line_blocking:
            return self._ray_moves(piece, ROOK_DIRS)
        here = piece.position
        return {Square(here.file, r) for r in RANKS if r != here.rank} | {
            Square(f, here.rank) for f in FILES if f != here.file
        }

    def _ray_moves(
        self,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
    ) -> set[Square]:
        pos = self._pos
        moves: set[Square] = set()
        for df, dr in directions:
            to_sq = piece.position.offset(df, dr)
            while to_sq.is_on_board():
                target = pos.piece_at(to_sq)
                if target is None:
                    moves.add(to_sq)
                    to_sq = to_sq.offset(df, dr)
                    continue
                if target.color != piece.color:
                    moves.add(to_sq)
                break
        return moves

    def _king_moves(self, king: Piece) -> set[Square]:
        moves: set[Square] = set()
        for df, dr in KING_OFFSETS:
            to_sq = king.position.offset(df, dr)
            if not to_sq.is_on_board():
                continue
            target = self._pos.piece_at(to_sq)
            if target is None or target.color != king.color:
                moves.add(to_sq)
        return moves

    def _castle_path_clear(self, king: Piece, castle: Castle) -> bool:
        color = king.color
        home = color.home_rank
        if king.position != Square("e", home):
            return False
        if any(not self._pos.is_empty(Square(f, home)) for f in castle.empty_files):
            return False
        if self.is_in_check(color):
            return False
        opponent = color.opposite
        return not any(
            self.is_square_attacked(Square(f, home), opponent)
            for f in castle.safe_files
        )
