"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessboard.core.enums import Color
from chessboard.core.piece import color_of
from chessboard.core.types import Square, col_of, make_square, row_of
from chessboard.game.interfaces import IGameController
from chessboard.ui.board.piece_item import PieceItem
from chessboard.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Input is click-to-move: click one of the side-to-move's pieces, then click
    the destination square.

    Signals:
        move_made(int, int): Emitted with (src, dst) after a committed move.
    """

    move_made = pyqtSignal(int, int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._controller: IGameController | None = None
        self._flipped = False

        # Interaction state
        self._selected_sq: Square | None = None
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_controller(self, controller: IGameController) -> None:
        """Attach the game to display and drive."""
        self._controller = controller
        self._clear_last_move_highlights()
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and the check marker from the controller state."""
        self._clear_selection()
        self._sync_pieces()
        self.highlight_check()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self._clear_last_move_highlights()
        self.refresh()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    def highlight_last_move(self, src: Square | None, dst: Square | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_last_move_highlights()
        if src is None or dst is None:
            return
        for sq, color in [
            (src, self._theme.last_move_from),
            (dst, self._theme.last_move_to),
        ]:
            rect = self._make_highlight(sq, color)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    def highlight_check(self) -> None:
        """Highlight the side-to-move's king if it is in check."""
        self._clear_items(self._check_items)
        if self._controller is None:
            return
        color = self._controller.turn
        if self._controller.is_in_check(color):
            king_sq = self._controller.king_square(color)
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

    def square_clicked(self, sq: Square) -> bool:
        """Handle a click on *sq*. Returns True if it completed a move."""
        if self._controller is None:
            return False

        src = self._selected_sq
        if src is not None:
            self._clear_selection()
            if src == sq:
                return False
            if self._controller.attempt_move(src, sq):
                self._sync_pieces()
                self.highlight_check()
                self.highlight_last_move(src, sq)
                self.move_made.emit(src, sq)
                return True

        piece = self._controller.piece_at(sq)
        if piece is not None and color_of(piece) == self._controller.turn:
            self._select_square(sq)
        return False

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 8))

        for sq in range(64):
            r, c = row_of(sq), col_of(sq)
            vc, vr = self._visual_coords(r, c)
            is_light = (r + c) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light

            # Rank numbers (left edge)
            if vc == 0:
                txt = QGraphicsSimpleTextItem(str(8 - r))
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(vc * t + 2, vr * t + 1)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

            # File letters (bottom edge)
            if vr == 7:
                txt = QGraphicsSimpleTextItem(chr(ord("a") + c))
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(vc * t + t - 12, vr * t + t - 16)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the controller state."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._controller is None:
            return

        t = self.TILE
        for sq in range(64):
            piece = self._controller.piece_at(sq)
            if piece is None:
                continue
            fill = (
                self._theme.piece_white
                if color_of(piece) == Color.WHITE
                else self._theme.piece_black
            )
            item = PieceItem(piece, sq, t, fill)
            vc, vr = self._visual_coords(row_of(sq), col_of(sq))
            item.place_in_tile(vc * t, vr * t, t)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._controller is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
        else:
            self.square_clicked(sq)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq

        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._show_legal_moves and self._controller is not None:
            for dst in self._controller.legal_destinations(sq):
                dot = self._make_highlight(dst, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_last_move_highlights(self) -> None:
        self._clear_items(self._last_move_highlights)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, row: int, col: int) -> tuple[int, int]:
        """Convert board row/column to visual (column, row)."""
        if self._flipped:
            return 7 - col, 7 - row
        return col, row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        vc = int(pos.x() // t)
        vr = int(pos.y() // t)
        if not (0 <= vc < 8 and 0 <= vr < 8):
            return None
        if self._flipped:
            return make_square(7 - vr, 7 - vc)
        return make_square(vr, vc)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(row_of(sq), col_of(sq))
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
