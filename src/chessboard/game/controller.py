"""GameController — the move orchestrator.

Owns the :class:`Board` for one game session. A move attempt is validated on
a copy of the board and only then committed, so a rejected attempt never
touches the real board. Listeners subscribe through :class:`GameEvents`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessboard.core.attacks import is_in_check
from chessboard.core.board import Board, MoveRecord
from chessboard.core.enums import Color, PieceType
from chessboard.core.notation import STARTING_FEN, board_to_fen
from chessboard.core.piece import Piece, color_of, kind_of
from chessboard.core.types import Square, square_name
from chessboard.core.validator import MoveValidator
from chessboard.game.interfaces import IGameController

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square, Board], None]  # src, dst, board
NewGameCallback = Callable[[Board], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates and applies moves, switches turns, notifies listeners.

    Methods are meant to be called from a single thread (the UI thread).
    """

    __slots__ = ("_board", "events")

    def __init__(self, fen: str | None = None) -> None:
        self._board = Board.from_fen(fen or STARTING_FEN)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Color:
        return self._board.turn

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return self._board.history

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board.piece_at(sq)

    def king_square(self, color: Color) -> Square:
        return self._board.king_square(color)

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(self._board, color)

    def legal_destinations(self, src: Square) -> list[Square]:
        return MoveValidator(self._board).legal_destinations(src)

    def fen(self) -> str:
        return board_to_fen(self._board)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        self._board = Board.from_fen(fen or STARTING_FEN)
        _LOGGER.info("New game: %s", self.fen())
        for cb in self.events.on_new_game:
            cb(self._board)

    def attempt_move(self, src: Square, dst: Square) -> bool:
        if not MoveValidator(self._board).is_legal(src, dst):
            _LOGGER.debug(
                "Rejected %s%s for %s", square_name(src), square_name(dst), self.turn
            )
            return False

        record = self._board.move_piece(src, dst)
        if kind_of(record.piece) == PieceType.KING:
            self._board.revoke_castling(color_of(record.piece))

        _LOGGER.info(
            "%s played %s%s%s",
            color_of(record.piece),
            square_name(src),
            "x" if record.captured is not None else "-",
            square_name(dst),
        )
        self._emit_move(src, dst)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, src: Square, dst: Square) -> None:
        for cb in self.events.on_move:
            cb(src, dst, self._board)
