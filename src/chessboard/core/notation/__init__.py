"""Notation helpers (FEN only)."""

from chessboard.core.notation.fen import STARTING_FEN, board_to_fen, parse_fen

__all__ = [
    "STARTING_FEN",
    "board_to_fen",
    "parse_fen",
]
