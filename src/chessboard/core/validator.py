"""Full move legality: turn order, piece rules and king safety."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessboard.core.attacks import king_in_check
from chessboard.core.piece import color_of
from chessboard.core.rules import follows_piece_rule
from chessboard.core.types import Square, check_square

if TYPE_CHECKING:
    from chessboard.core.board import Board


class MoveValidator:
    """Answers "is this single move legal right now" for a :class:`Board`.

    King safety is tested by playing the move on a copy of the board, so the
    board passed in is never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def is_legal(self, src: Square, dst: Square) -> bool:
        check_square(src)
        check_square(dst)

        piece = self._board[src]
        if piece is None or color_of(piece) != self._board.turn:
            return False
        if not follows_piece_rule(src, dst, self._board):
            return False
        return not self.leaves_king_in_check(src, dst)

    def leaves_king_in_check(self, src: Square, dst: Square) -> bool:
        """Play *src*→*dst* on a copy and test the mover's king."""
        trial = self._board.copy()
        mover = color_of(trial.move_piece(src, dst).piece)
        return king_in_check(trial.king_square(mover), trial)

    def legal_destinations(self, src: Square) -> list[Square]:
        """Every square the piece on *src* may legally move to."""
        return [dst for dst in range(64) if self.is_legal(src, dst)]
