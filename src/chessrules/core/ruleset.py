"""RuleSet - switches between standard chess and the legacy rule quirks.

The engine descends from a program whose move rules deviated from chess in
several places.  Each deviation is kept available behind one switch so a
caller can replay old games bug-for-bug; the default is standard chess.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable set of rule switches.

    Attributes:
        straight_line_blocking: Rook and queen rank/file rays stop at the
            first piece (capturing it when it is an enemy).  When off they
            cover the whole rank and file, ignoring every piece.
        knight_avoids_own_pieces: Knights may not land on a friendly piece.
        validate_every_move: The mover must own the turn and every
            destination must be in the piece's move set.  When off only
            pawns are checked, exactly as before.
        reject_self_check: A move that leaves the mover's own king attacked
            is refused at application time.
        strict_castling: Castling needs an empty path, a king that is not in
            check and transit squares that are not attacked.  When off the
            castling rights and the rook's presence are enough.
        en_passant_window: A two-square pawn advance may be captured en
            passant on the very next move.  When off the eligibility flag
            is cleared in the same move that sets it and the capturing pawn
            must never have moved, so en passant cannot happen.
        rook_moves_clear_castling: Moving a rook off its corner, or having
            it captured there, removes that side's castling right.
    """

    straight_line_blocking: bool = True
    knight_avoids_own_pieces: bool = True
    validate_every_move: bool = True
    reject_self_check: bool = True
    strict_castling: bool = True
    en_passant_window: bool = True
    rook_moves_clear_castling: bool = True

    @classmethod
    def standard(cls) -> RuleSet:
        """Regular chess rules."""
        return cls()

    @classmethod
    def legacy(cls) -> RuleSet:
        """Every historical quirk switched back on."""
        return cls(**{name: False for name in asdict(cls())})

    def with_overrides(self, **flags: bool) -> RuleSet:
        """Copy with some switches changed.

        Example: ``STANDARD.with_overrides(strict_castling=False)``.
        """
        return replace(self, **flags)

    @property
    def is_standard(self) -> bool:
        return self == RuleSet()


STANDARD = RuleSet.standard()
LEGACY = RuleSet.legacy()
