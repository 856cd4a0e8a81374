"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square

# Display character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece standing on a square.

    A move never edits a piece in place: :meth:`moved_to` returns the
    relocated copy, which is what the owning position stores next.
    """

    color: Color
    piece_type: PieceType
    position: Square
    has_moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Display glyph (uppercase = white, lowercase = black)."""
        glyph = self.piece_type.glyph
        return glyph if self.color == Color.WHITE else glyph.lower()

    @classmethod
    def from_char(cls, char: str, position: Square, has_moved: bool = False) -> Piece:
        """Create piece from its glyph, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, position, has_moved)

    # ── Transitions ──────────────────────────────────────────────────────

    def moved_to(self, square: Square) -> Piece:
        """Copy standing on *square* with the moved flag set."""
        return replace(self, position=square, has_moved=True)

    def placed_at(self, square: Square) -> Piece:
        """Copy standing on *square*, moved flag untouched."""
        return replace(self, position=square)

    def is_a(self, color: Color, piece_type: PieceType) -> bool:
        return self.color == color and self.piece_type == piece_type
