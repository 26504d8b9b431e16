"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessboard.core import Board, MoveValidator, parse_square

    board = Board.initial()
    validator = MoveValidator(board)
    validator.is_legal(parse_square("e2"), parse_square("e4"))  # True
"""

from chessboard.core.attacks import attackers_of, is_in_check, king_in_check
from chessboard.core.board import Board, MoveRecord
from chessboard.core.enums import Color, PieceType
from chessboard.core.notation import STARTING_FEN, board_to_fen, parse_fen
from chessboard.core.piece import (
    ALL_PIECES,
    Piece,
    color_of,
    encode,
    kind_of,
    piece_from_char,
    piece_symbol,
    piece_to_char,
)
from chessboard.core.rules import MOVE_RULES, follows_piece_rule
from chessboard.core.types import (
    Square,
    check_square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)
from chessboard.core.validator import MoveValidator

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Pieces
    "ALL_PIECES",
    "Piece",
    "color_of",
    "encode",
    "kind_of",
    "piece_from_char",
    "piece_symbol",
    "piece_to_char",
    # Squares
    "Square",
    "check_square",
    "col_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "MoveRecord",
    "MoveValidator",
    # Rules
    "MOVE_RULES",
    "attackers_of",
    "follows_piece_rule",
    "is_in_check",
    "king_in_check",
    # Notation
    "STARTING_FEN",
    "board_to_fen",
    "parse_fen",
]
