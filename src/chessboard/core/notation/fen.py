"""FEN piece-placement parsing and serialization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessboard.core.enums import Color
from chessboard.core.piece import Piece, piece_from_char, piece_to_char

if TYPE_CHECKING:
    from chessboard.core.board import Board

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_PIECE_LETTERS = frozenset("prnbqk")


def parse_fen(fen: str) -> tuple[list[Piece | None], Color]:
    """Parse a FEN string into 64 squares (row 0 = rank 8) and side to move.

    Only the placement field is required. An optional second field ``w`` /
    ``b`` selects the side to move; any further fields are ignored. Rank
    widths are not checked: squares continue across ``/`` separators.
    """
    if not fen.isascii():
        raise ValueError(f"Invalid FEN (non-ASCII): {fen!r}")

    parts = fen.split()
    if not parts:
        raise ValueError("Invalid FEN (empty)")

    squares: list[Piece | None] = [None] * 64
    sq = 0
    for ch in parts[0]:
        if ch == "/":
            continue
        if not ch.isalnum():
            raise ValueError(f"Invalid FEN character {ch!r}: {fen!r}")
        if ch.isdigit():
            step = int(ch)
            if not (1 <= step <= 8):
                raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
            sq += step
            continue
        if ch.lower() not in _PIECE_LETTERS:
            raise ValueError(f"Invalid FEN piece {ch!r}: {fen!r}")
        if sq >= 64:
            raise ValueError(f"Invalid FEN (too many squares): {fen!r}")
        squares[sq] = piece_from_char(ch)
        sq += 1

    if sq > 64:
        raise ValueError(f"Invalid FEN (too many squares): {fen!r}")

    side = Color.WHITE
    if len(parts) > 1:
        if parts[1] == "w":
            side = Color.WHITE
        elif parts[1] == "b":
            side = Color.BLACK
        else:
            raise ValueError(f"Invalid FEN side-to-move field: {parts[1]!r}")

    return squares, side


def board_to_fen(board: Board) -> str:
    """Serialise placement and side to move, e.g. ``'8/8/... w'``."""
    rows: list[str] = []
    for row_start in range(0, 64, 8):
        empty = 0
        row = ""
        for sq in range(row_start, row_start + 8):
            piece = board[sq]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece_to_char(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    side_str = "w" if board.turn == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side_str}"
