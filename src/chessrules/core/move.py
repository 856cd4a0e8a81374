"""Move value object (from/to coordinate pair)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move request."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq} {self.to_sq}"

    @property
    def is_on_board(self) -> bool:
        return self.from_sq.is_on_board() and self.to_sq.is_on_board()
