"""Core enumerations for the chess domain.

Colors and piece types double as the bit fields of the packed piece encoding
(see :mod:`chessboard.core.piece`): a piece is ``kind | color``.
"""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color (also the color tag bits of an encoded piece)."""

    WHITE = 64
    BLACK = 128

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds as disjoint bit flags."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 4
    BISHOP = 8
    QUEEN = 16
    KING = 32
