"""Packed piece encoding.

A piece is a plain ``int``: the :class:`PieceType` bit flag OR-ed with the
:class:`Color` tag. Empty squares are ``None``, never a piece value.
"""

from __future__ import annotations

from typing import TypeAlias

from chessboard.core.enums import Color, PieceType

Piece: TypeAlias = int

ALL_PIECES: frozenset[Piece] = frozenset(
    int(kind) | int(color) for color in Color for kind in PieceType
)

_COLOR_MASK = int(Color.WHITE) | int(Color.BLACK)

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


def encode(kind: PieceType, color: Color) -> Piece:
    """Pack *kind* and *color* into a single piece value."""
    return int(kind) | int(color)


def _check_piece(piece: Piece) -> None:
    if piece not in ALL_PIECES:
        raise ValueError(f"Invalid piece encoding: {piece!r}")


def color_of(piece: Piece) -> Color:
    _check_piece(piece)
    return Color(piece & _COLOR_MASK)


def kind_of(piece: Piece) -> PieceType:
    color = color_of(piece)
    return PieceType(piece ^ int(color))


def piece_from_char(char: str) -> Piece:
    """Create piece from FEN character, e.g. 'N' → white knight."""
    try:
        color, kind = _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None
    return encode(kind, color)


def piece_to_char(piece: Piece) -> str:
    """FEN character (uppercase = white, lowercase = black)."""
    return _FEN_CHARS[(color_of(piece), kind_of(piece))]


def piece_symbol(piece: Piece) -> str:
    """Unicode chess symbol, e.g. ♞."""
    return _UNICODE[(color_of(piece), kind_of(piece))]
