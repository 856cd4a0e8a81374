"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, parse_square

    board = Board()
    board.apply_move(parse_square("e2"), parse_square("e4"))
    board.legal_moves(parse_square("g8"))   # {f6, h6}
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    PieceType,
    RejectReason,
)
from chessrules.core.exceptions import MoveRejected
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    parse_move,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.ruleset import LEGACY, STANDARD, RuleSet
from chessrules.core.types import Square, parse_square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    "RejectReason",
    # Types / helpers
    "Square",
    "parse_square",
    # Configuration
    "LEGACY",
    "STANDARD",
    "RuleSet",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveRejected",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "STARTING_FEN",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
]
