"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from chessboard.core.piece import Piece, piece_symbol
from chessboard.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece drawn as its Unicode symbol.

    Stores its logical *square*; the scene positions it inside the tile.
    """

    _FONT_RATIO = 0.75

    def __init__(
        self, piece: Piece, square: Square, tile_size: int, fill: QColor
    ) -> None:
        super().__init__(piece_symbol(piece))
        self.piece = piece
        self.square = square

        self.setBrush(QBrush(fill))
        outline = QColor(0, 0, 0) if fill.lightness() > 127 else QColor(255, 255, 255)
        self.setPen(QPen(outline, 1.0))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self.set_tile_size(tile_size)

    def set_tile_size(self, size: int) -> None:
        """Resize the glyph to fit a *size*-pixel tile."""
        font = QFont()
        font.setPixelSize(max(int(size * self._FONT_RATIO), 1))
        self.setFont(font)

    def place_in_tile(self, x: float, y: float, tile_size: int) -> None:
        """Center the glyph in the tile whose top-left corner is (*x*, *y*)."""
        bounds = self.boundingRect()
        self.setPos(
            x + (tile_size - bounds.width()) / 2.0,
            y + (tile_size - bounds.height()) / 2.0,
        )
