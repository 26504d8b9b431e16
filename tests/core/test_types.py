"""Tests for square helpers."""

import pytest

from chessboard.core.types import (
    A1,
    A8,
    E2,
    E4,
    H1,
    H8,
    check_square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)


def test_top_left_is_a8() -> None:
    assert A8 == 0
    assert H8 == 7
    assert A1 == 56
    assert H1 == 63


def test_e2_e4_indices() -> None:
    assert E2 == 52
    assert E4 == 36
    assert parse_square("e2") == 52
    assert parse_square("e4") == 36


def test_row_and_col() -> None:
    assert row_of(E2) == 6
    assert col_of(E2) == 4
    assert make_square(6, 4) == E2


def test_square_name_round_trip() -> None:
    for sq in range(64):
        assert parse_square(square_name(sq)) == sq


@pytest.mark.parametrize("name", ["", "e", "i1", "a0", "a9", "e22"])
def test_parse_square_rejects_bad_names(name: str) -> None:
    with pytest.raises(ValueError, match="Invalid square name"):
        parse_square(name)


@pytest.mark.parametrize("sq", [-1, 64, 100])
def test_check_square_rejects_out_of_range(sq: int) -> None:
    with pytest.raises(ValueError, match="Square out of range"):
        check_square(sq)


def test_check_square_passes_through() -> None:
    assert check_square(0) == 0
    assert check_square(63) == 63
