"""Check detection.

An enemy piece attacks the king exactly when its own movement rule would let
it move onto the king's square, so detection reuses the per-piece rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessboard.core.enums import Color
from chessboard.core.piece import color_of, kind_of
from chessboard.core.rules import MOVE_RULES
from chessboard.core.types import Square

if TYPE_CHECKING:
    from chessboard.core.board import Board


def attackers_of(king_sq: Square, board: Board) -> list[Square]:
    """Squares of every enemy piece that could capture on *king_sq*."""
    king = board[king_sq]
    if king is None:
        raise ValueError(f"No piece on {king_sq} to test for check")
    enemy = color_of(king).opposite

    attackers: list[Square] = []
    for sq in range(64):
        piece = board[sq]
        if piece is None or color_of(piece) != enemy:
            continue
        if MOVE_RULES[kind_of(piece)](sq, king_sq, board):
            attackers.append(sq)
    return attackers


def king_in_check(king_sq: Square, board: Board) -> bool:
    return bool(attackers_of(king_sq, board))


def is_in_check(board: Board, color: Color) -> bool:
    """Whether *color*'s king is currently attacked."""
    return king_in_check(board.king_square(color), board)
