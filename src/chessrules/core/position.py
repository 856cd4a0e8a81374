"""Position - one immutable snapshot of the game state."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import A1, FILES, RANKS, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class Position:
    """Board occupancy plus turn, en-passant and castling state.

    ``pieces`` maps every occupied square to the piece standing there; an
    absent key is an empty square.  Each stored piece's ``position`` equals
    its key and every key is on the board, which :meth:`__post_init__`
    enforces.  Positions are never edited: the rules layer builds the next
    one and the caller decides whether to keep it.
    """

    pieces: Mapping[Square, Piece]
    turn: Color = Color.WHITE
    last_move: Square = A1
    en_passant_available: bool = False
    castling: CastlingRights = CastlingRights.ALL

    def __post_init__(self) -> None:
        pieces = dict(self.pieces)
        for sq, piece in pieces.items():
            if not sq.is_on_board():
                raise ValueError(f"Piece placed off the board: {sq!r}")
            if piece.position != sq:
                raise ValueError(f"Piece {piece!r} stored on {sq}")
        object.__setattr__(self, "pieces", MappingProxyType(pieces))

    # ── Factory ──────────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard 32-piece starting position, White to move."""
        pieces: dict[Square, Piece] = {}
        for color in Color:
            home = color.home_rank
            pawn_rank = home + color.forward
            for file, pt in zip(FILES, _BACK_RANK):
                sq = Square(file, home)
                pieces[sq] = Piece(color, pt, sq)
                pawn_sq = Square(file, pawn_rank)
                pieces[pawn_sq] = Piece(color, PieceType.PAWN, pawn_sq)
        return cls(pieces)

    @classmethod
    def empty(cls, turn: Color = Color.WHITE) -> Position:
        return cls({}, turn=turn, castling=CastlingRights.NONE)

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.pieces.get(sq)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self.pieces

    def pieces_of(self, color: Color) -> list[Piece]:
        """*color*'s pieces in square order."""
        return sorted(
            (p for p in self.pieces.values() if p.color == color),
            key=lambda p: p.position,
        )

    def has_king(self, color: Color) -> bool:
        return any(p.is_a(color, PieceType.KING) for p in self.pieces.values())

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        for sq, piece in self.pieces.items():
            if piece.is_a(color, PieceType.KING):
                return sq
        raise ValueError(f"No {color.name} king on board")

    def __iter__(self) -> Iterator[Piece]:
        return iter(sorted(self.pieces.values(), key=lambda p: p.position))

    def __len__(self) -> int:
        return len(self.pieces)

    # ── Derived positions ────────────────────────────────────────────────

    def relocated(self, from_sq: Square, to_sq: Square) -> Position:
        """Copy with the piece on *from_sq* standing on *to_sq*.

        Whatever stood on *to_sq* is dropped.  Nothing else changes: no
        turn flip, no moved flag and no castling or en-passant bookkeeping.
        """
        pieces = dict(self.pieces)
        piece = pieces.pop(from_sq)
        pieces[to_sq] = piece.placed_at(to_sq)
        return replace(self, pieces=pieces)

    def without(self, sq: Square) -> Position:
        pieces = dict(self.pieces)
        pieces.pop(sq, None)
        return replace(self, pieces=pieces)

    def with_piece(self, piece: Piece) -> Position:
        pieces = dict(self.pieces)
        pieces[piece.position] = piece
        return replace(self, pieces=pieces)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in reversed(RANKS):
            row = []
            for file in FILES:
                p = self.piece_at(Square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
