"""Square value object and coordinate helpers.

Squares are addressed the way players name them: a file letter ``a``-``h``
and a rank number 1-8.  Move generation freely builds squares outside that
range while walking rays; :meth:`Square.is_on_board` must be consulted
before such a square is stored or reported as a destination.
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
RANKS = range(1, 9)


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate, ordered by file then rank."""

    file: str
    rank: int

    @property
    def file_index(self) -> int:
        """Zero-based file index (``a`` = 0).  May fall outside 0-7."""
        return ord(self.file) - ord("a")

    def is_on_board(self) -> bool:
        return len(self.file) == 1 and self.file in FILES and 1 <= self.rank <= 8

    def offset(self, df: int, dr: int) -> Square:
        """Square shifted by *df* files and *dr* ranks (not bounds-checked)."""
        return Square(chr(ord(self.file) + df), self.rank + dr)

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` -> ``Square('e', 4)``."""
    name = name.strip().lower()
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(name[0], int(name[1]))


def all_squares() -> list[Square]:
    """Every on-board square, a1 first, h8 last (rank-major)."""
    return [Square(f, r) for r in RANKS for f in FILES]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 1) for f in FILES)
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 2) for f in FILES)
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 3) for f in FILES)
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 4) for f in FILES)
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 5) for f in FILES)
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 6) for f in FILES)
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 7) for f in FILES)
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 8) for f in FILES)
