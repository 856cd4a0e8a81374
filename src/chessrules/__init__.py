"""chessrules: a two-player chess rules engine."""

from chessrules.core import (
    Board,
    Color,
    GameResult,
    Move,
    PieceType,
    RuleSet,
    Square,
    parse_move,
    parse_square,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Color",
    "GameResult",
    "Move",
    "PieceType",
    "RuleSet",
    "Square",
    "__version__",
    "parse_move",
    "parse_square",
]
