"""Coordinate move notation and FEN-style position I/O."""

from __future__ import annotations

import re

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import A1, FILES, RANKS, Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_MOVE_RE = re.compile(r"^\s*([a-h][1-8])\s*[-\s]?\s*([a-h][1-8])\s*$", re.IGNORECASE)

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# Files each piece type starts on; pawns start on every file.
_HOME_FILES: dict[PieceType, str] = {
    PieceType.PAWN: FILES,
    PieceType.KNIGHT: "bg",
    PieceType.BISHOP: "cf",
    PieceType.ROOK: "ah",
    PieceType.QUEEN: "d",
    PieceType.KING: "e",
}


def parse_move(text: str) -> Move:
    """Parse a from/to pair such as ``'e2 e4'``, ``'e2e4'`` or ``'e2-e4'``."""
    m = _MOVE_RE.match(text)
    if m is None:
        raise ValueError(f"Invalid move: {text!r}")
    return Move(parse_square(m.group(1)), parse_square(m.group(2)))


def _on_home_square(color: Color, piece_type: PieceType, sq: Square) -> bool:
    rank = color.home_rank
    if piece_type == PieceType.PAWN:
        rank += color.forward
    return sq.rank == rank and sq.file in _HOME_FILES[piece_type]


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    A piece counts as unmoved exactly when it stands on one of its starting
    squares.  The two clock fields are optional and ignored.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    pieces: dict[Square, Piece] = {}
    for rank, rank_text in zip(reversed(RANKS), ranks):
        file_idx = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file_idx += step
            else:
                if file_idx >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                sq = Square(FILES[file_idx], rank)
                piece = Piece.from_char(ch, sq)
                moved = not _on_home_square(piece.color, piece.piece_type, sq)
                pieces[sq] = Piece(piece.color, piece.piece_type, sq, moved)
                file_idx += 1
            if file_idx > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file_idx != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    for color in Color:
        kings = sum(1 for p in pieces.values() if p.is_a(color, PieceType.KING))
        if kings != 1:
            raise ValueError(f"Invalid FEN (need one {color.name} king): {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant: the target square sits behind the pawn that just advanced
    last_move = A1
    en_passant = False
    if ep_part != "-":
        target = parse_square(ep_part)
        expected_rank = 6 if side == Color.WHITE else 3
        if target.rank != expected_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        last_move = target.offset(0, -side.forward)
        victim = pieces.get(last_move)
        if victim is None or not victim.is_a(side.opposite, PieceType.PAWN):
            raise ValueError(f"Invalid FEN en-passant square (no pawn): {ep_part!r}")
        en_passant = True

    return Position(
        pieces,
        turn=side,
        last_move=last_move,
        en_passant_available=en_passant,
        castling=castling,
    )


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN (clocks written as ``0 1``)."""
    # 1. Board
    rows: list[str] = []
    for rank in reversed(RANKS):
        empty = 0
        row = ""
        for file in FILES:
            piece = pos.piece_at(Square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.turn == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = "-"
    if pos.en_passant_available:
        ep_str = str(pos.last_move.offset(0, pos.turn.forward))

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 1"
