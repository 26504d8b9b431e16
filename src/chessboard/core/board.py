"""Board — piece placement, side to move and king bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass

from chessboard.core.attacks import king_in_check
from chessboard.core.enums import Color, PieceType
from chessboard.core.notation.fen import STARTING_FEN, parse_fen
from chessboard.core.piece import Piece, color_of, kind_of, piece_to_char
from chessboard.core.types import E1, E8, Square, check_square

_KING_HOME: dict[Color, Square] = {Color.WHITE: E1, Color.BLACK: E8}


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One committed ply, kept so the last move can be taken back."""

    src: Square
    dst: Square
    piece: Piece
    captured: Piece | None


class Board:
    """Mutable 64-square board with an incremental king-square cache."""

    __slots__ = ("_squares", "_turn", "_king_squares", "_can_castle", "_history")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self._turn = Color.WHITE
        # color -> king square cache (None if king missing).
        self._king_squares: dict[Color, Square | None] = {
            Color.WHITE: None,
            Color.BLACK: None,
        }
        self._can_castle: dict[Color, bool] = {Color.WHITE: False, Color.BLACK: False}
        self._history: list[MoveRecord] = []

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[check_square(sq)]

    def piece_at(self, sq: Square) -> Piece | None:
        return self[sq]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def place(self, sq: Square, piece: Piece) -> None:
        """Put *piece* on *sq*, discarding whatever was there."""
        kind = kind_of(piece)
        self.remove(sq)
        self._squares[sq] = piece
        if kind == PieceType.KING:
            self._king_squares[color_of(piece)] = sq

    def remove(self, sq: Square) -> None:
        old_piece = self._squares[check_square(sq)]
        if old_piece is None:
            return
        self._squares[sq] = None
        old_color = color_of(old_piece)
        if (
            kind_of(old_piece) == PieceType.KING
            and self._king_squares[old_color] == sq
        ):
            self._king_squares[old_color] = None

    # -- Turn / king / castling state -----------------------------------------

    @property
    def turn(self) -> Color:
        """Side to move."""
        return self._turn

    def king_square(self, color: Color) -> Square:
        """Return the cached king square for *color*."""
        sq = self._king_squares[color]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    def can_castle(self, color: Color) -> bool:
        return self._can_castle[color]

    def revoke_castling(self, color: Color) -> None:
        self._can_castle[color] = False

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    # -- Moves ----------------------------------------------------------------

    def move_piece(self, src: Square, dst: Square) -> MoveRecord:
        """Move the side-to-move's piece from *src* to *dst* and flip the turn.

        No legality checks beyond ownership: callers validate first.
        """
        piece = self[src]
        check_square(dst)
        if piece is None:
            raise ValueError(f"No piece on {src}")
        if color_of(piece) != self._turn:
            raise ValueError(f"Piece on {src} does not belong to {self._turn.name}")

        record = MoveRecord(src, dst, piece, self._squares[dst])
        self.remove(src)
        self.place(dst, piece)
        self._history.append(record)
        self._turn = self._turn.opposite
        return record

    def undo_last_move(self) -> MoveRecord:
        """Take back the last :meth:`move_piece`, restoring any captured piece."""
        if not self._history:
            raise ValueError("No move to undo")
        record = self._history.pop()
        self._turn = self._turn.opposite
        self.remove(record.dst)
        self.place(record.src, record.piece)
        if record.captured is not None:
            self.place(record.dst, record.captured)
        return record

    # -- Queries --------------------------------------------------------------

    def occupied(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, ascending."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and color_of(piece) == color
        ]

    # -- Loading / copying ----------------------------------------------------

    def load_fen(self, fen: str) -> None:
        """Replace the whole position with the one described by *fen*."""
        squares, side = parse_fen(fen)
        self.clear()
        kings = {Color.WHITE: 0, Color.BLACK: 0}
        for sq, piece in enumerate(squares):
            if piece is None:
                continue
            self.place(sq, piece)
            if kind_of(piece) == PieceType.KING:
                kings[color_of(piece)] += 1

        for color, count in kings.items():
            if count != 1:
                raise ValueError(
                    f"FEN must contain exactly one {color.name} king, found {count}: {fen!r}"
                )
            self._can_castle[color] = self.king_square(color) == _KING_HOME[color]

        # The side that just moved may never be left in check.
        if king_in_check(self.king_square(side.opposite), self):
            raise ValueError(
                f"FEN leaves the {side.opposite.name} king in check with "
                f"{side.name} to move: {fen!r}"
            )
        self._turn = side

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        b = cls()
        b.load_fen(fen)
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls.from_fen(STARTING_FEN)

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._turn = self._turn
        b._king_squares = self._king_squares.copy()
        b._can_castle = self._can_castle.copy()
        b._history = self._history.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._turn = Color.WHITE
        self._king_squares = {Color.WHITE: None, Color.BLACK: None}
        self._can_castle = {Color.WHITE: False, Color.BLACK: False}
        self._history = []

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self._turn == other._turn
            and self._king_squares == other._king_squares
            and self._can_castle == other._can_castle
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for sq in range(row * 8, row * 8 + 8):
                p = self._squares[sq]
                cells.append(piece_to_char(p) if p is not None else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
