"""Application entry point: a terminal game for two players at one keyboard."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.notation import parse_move
from chessrules.core.ruleset import LEGACY, STANDARD
from chessrules.core.types import FILES, RANKS, Square

_LOGGER = logging.getLogger(__name__)

_QUIT_WORDS = frozenset({"quit", "exit", "resign"})

WELCOME = """\
Welcome to chessrules!
Each player takes turns moving one piece at a time.
Type your move as 'from_square to_square' (e.g. 'e2 e4'), or 'quit' to stop.
"""

INVALID_MOVE = """\
Oops! That move is invalid.
- A piece can only move according to its allowed pattern.
- You cannot move onto a square held by your own piece.
- Use coordinate notation, e.g. 'e2 e4'.
Try again."""


def render_board(board: Board) -> str:
    """Text grid with file letters above and below and ranks on both sides."""
    glyphs = board.occupancy_snapshot()
    header = "  " + " ".join(FILES)
    lines = [header]
    for rank in reversed(RANKS):
        cells = " ".join(glyphs.get(Square(f, rank), ".") for f in FILES)
        lines.append(f"{rank} {cells} {rank}")
    lines.append(header)
    return "\n".join(lines)


def play(
    board: Board,
    read_line: Callable[[], str],
    out: TextIO,
) -> Color | None:
    """Run the prompt loop until mate, stalemate or quit.

    Returns the winner, or None for stalemate or an abandoned game.
    """
    print(WELCOME, file=out)
    print(render_board(board), file=out)

    while True:
        print(f"\nIt's {board.turn_display_name()}'s turn.", file=out)
        try:
            line = read_line()
        except EOFError:
            return None
        if line.strip().lower() in _QUIT_WORDS:
            print(f"{board.turn_display_name()} leaves the game.", file=out)
            return None

        try:
            move = parse_move(line)
        except ValueError:
            print(INVALID_MOVE, file=out)
            continue
        if not board.apply_move(move.from_sq, move.to_sq):
            print(INVALID_MOVE, file=out)
            continue

        print(render_board(board), file=out)
        side = board.current_turn()
        if board.is_checkmate(side):
            winner = side.opposite
            print(
                f"\nCheckmate! {side.display_name} is checkmated. "
                f"{winner.display_name} wins.",
                file=out,
            )
            return winner
        if board.is_stalemate(side):
            print("\nStalemate! No legal move remains. The game is drawn.", file=out)
            return None
        if board.is_in_check(side):
            print(f"{side.display_name} is in check.", file=out)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules", description="Play chess in the terminal."
    )
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="use the historical rule quirks instead of standard chess",
    )
    parser.add_argument("--fen", help="start from this FEN position")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch the terminal game."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ruleset = LEGACY if args.legacy else STANDARD
    if args.fen:
        try:
            board = Board.from_fen(args.fen, ruleset)
        except ValueError as exc:
            _LOGGER.error("Cannot start from FEN: %s", exc)
            sys.exit(2)
    else:
        board = Board(ruleset)

    play(board, lambda: input("> "), sys.stdout)
    print("\nThank you for playing!")


if __name__ == "__main__":
    main()
