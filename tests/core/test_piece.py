"""Tests for the packed piece encoding."""

import pytest

from chessboard.core.enums import Color, PieceType
from chessboard.core.piece import (
    ALL_PIECES,
    color_of,
    encode,
    kind_of,
    piece_from_char,
    piece_symbol,
    piece_to_char,
)


class TestEncoding:
    @pytest.mark.parametrize("color", list(Color))
    @pytest.mark.parametrize("kind", list(PieceType))
    def test_decode_recovers_kind_and_color(
        self, kind: PieceType, color: Color
    ) -> None:
        piece = encode(kind, color)
        assert kind_of(piece) == kind
        assert color_of(piece) == color

    def test_twelve_distinct_encodings(self) -> None:
        assert len(ALL_PIECES) == 12

    def test_kind_is_xor_with_color_tag(self) -> None:
        piece = encode(PieceType.QUEEN, Color.BLACK)
        assert piece == 16 | 128
        assert piece ^ Color.BLACK == PieceType.QUEEN

    @pytest.mark.parametrize("bad", [0, 1, 64, 128, 192, 64 | 3, 255])
    def test_invalid_encoding_raises(self, bad: int) -> None:
        with pytest.raises(ValueError, match="Invalid piece encoding"):
            color_of(bad)
        with pytest.raises(ValueError, match="Invalid piece encoding"):
            kind_of(bad)


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_str_is_lowercase_name(self) -> None:
        assert str(Color.WHITE) == "white"


class TestFenCharacters:
    def test_uppercase_is_white(self) -> None:
        assert piece_from_char("N") == encode(PieceType.KNIGHT, Color.WHITE)

    def test_lowercase_is_black(self) -> None:
        assert piece_from_char("k") == encode(PieceType.KING, Color.BLACK)

    def test_to_char(self) -> None:
        assert piece_to_char(encode(PieceType.ROOK, Color.WHITE)) == "R"
        assert piece_to_char(encode(PieceType.PAWN, Color.BLACK)) == "p"

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            piece_from_char("x")

    def test_symbol(self) -> None:
        assert piece_symbol(encode(PieceType.KNIGHT, Color.BLACK)) == "♞"
        assert piece_symbol(encode(PieceType.KING, Color.WHITE)) == "♔"
