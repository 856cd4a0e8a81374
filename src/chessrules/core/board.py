"""Board - the authoritative, mutable state of one game."""

from __future__ import annotations

import logging

from chessrules.core.enums import CastlingRights, Color, GameResult, PieceType
from chessrules.core.exceptions import MoveRejected
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.ruleset import STANDARD, RuleSet
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


class Board:
    """One game's board: occupancy, turn, en-passant and castling state.

    The board starts from the standard layout with White to move and is
    advanced only through :meth:`apply_move`.  Every query is answered from
    the current :class:`Position`; hypothetical moves are evaluated on
    throw-away copies, so nothing but a successful move changes the board.
    """

    __slots__ = ("_position", "_ruleset")

    def __init__(
        self,
        ruleset: RuleSet | None = None,
        position: Position | None = None,
    ) -> None:
        self._ruleset = ruleset if ruleset is not None else STANDARD
        self._position = position if position is not None else Position.initial()

    @classmethod
    def from_fen(cls, fen: str, ruleset: RuleSet | None = None) -> Board:
        from chessrules.core.notation import position_from_fen

        return cls(ruleset, position_from_fen(fen))

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """Current immutable snapshot."""
        return self._position

    @property
    def ruleset(self) -> RuleSet:
        return self._ruleset

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._position.piece_at(sq)

    # ── Moves ────────────────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Move the piece on *from_sq* to *to_sq*.

        Returns False, leaving the board unchanged, when the move is not
        allowed; on success the turn passes to the other side.
        """
        move = Move(from_sq, to_sq)
        try:
            self._position = Rules.apply_move(self._position, move, self._ruleset)
        except MoveRejected as exc:
            _LOGGER.info("Rejected %s: %s", move, exc.reason.value)
            return False
        _LOGGER.debug("Applied %s, %s to move", move, self._position.turn)
        return True

    def pseudo_legal_moves(self, sq: Square) -> set[Square]:
        """Movement-pattern destinations of the piece on *sq*, king safety ignored."""
        return MoveGenerator(self._position, self._ruleset).moves_from(sq)

    def legal_moves(self, sq: Square) -> set[Square]:
        """Destinations of the piece on *sq* that keep its own king safe."""
        return Rules.legal_destinations(self._position, sq, self._ruleset)

    # ── Check / mate / stalemate ─────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._position, color, self._ruleset)

    def is_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self._position, color, self._ruleset)

    def is_stalemate(self, color: Color) -> bool:
        return Rules.is_stalemate(self._position, color, self._ruleset)

    def simulate_move_and_check(
        self, from_sq: Square, to_sq: Square, color: Color
    ) -> bool:
        """Would the move leave *color*'s king in check?  The board is not touched."""
        return Rules.simulate_move_and_check(
            self._position, from_sq, to_sq, color, self._ruleset
        )

    def game_result(self) -> GameResult:
        return Rules.game_result(self._position, self._ruleset)

    # ── Castling rights ──────────────────────────────────────────────────

    def can_castle_king_side(self, color: Color) -> bool:
        return bool(self._position.castling & CastlingRights.kingside(color))

    def can_castle_queen_side(self, color: Color) -> bool:
        return bool(self._position.castling & CastlingRights.queenside(color))

    def update_castling_rights(
        self,
        color: Color,
        piece_type: PieceType,
        origin: Square | None = None,
    ) -> None:
        """Drop the castling rights forfeited by moving *piece_type*."""
        self._position = Rules.clear_castling_rights(
            self._position, color, piece_type, origin, self._ruleset
        )

    # ── Collaborator views ───────────────────────────────────────────────

    def current_turn(self) -> Color:
        return self._position.turn

    def turn_display_name(self) -> str:
        """'White' or 'Black'."""
        return self._position.turn.display_name

    def occupancy_snapshot(self) -> dict[Square, str]:
        """Occupied squares mapped to display glyphs (a copy, for rendering)."""
        return {sq: str(piece) for sq, piece in self._position.pieces.items()}

    def last_move(self) -> Square:
        """Destination of the most recent move (a1 before the first move)."""
        return self._position.last_move

    def en_passant_eligible(self) -> bool:
        return self._position.en_passant_available

    def __repr__(self) -> str:
        return repr(self._position)
