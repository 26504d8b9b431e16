"""MainWindow — top-level window assembling the board and status bar."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QLabel, QMainWindow, QStatusBar

from chessboard.core.board import Board
from chessboard.core.types import Square, square_name
from chessboard.game.controller import GameController
from chessboard.ui.board.board_scene import BoardScene
from chessboard.ui.settings import AppSettings
from chessboard.ui.styles.theme import theme_by_name

_LOGGER = logging.getLogger(__name__)


class _FittedView(QGraphicsView):
    """Shows the whole board scene, rescaled whenever the widget resizes."""

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        scene = self.scene()
        if scene is not None:
            self.fitInView(scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chess")
        self.setMinimumSize(480, 520)
        self.resize(800, 840)

        self._settings = settings if settings is not None else AppSettings()
        self._controller = (
            controller
            if controller is not None
            else GameController(self._settings.start_fen)
        )

        self._setup_ui()
        self._setup_menu()
        self._apply_settings()
        self._connect_game_events()

        self._board_scene.set_controller(self._controller)
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_scene = BoardScene(self)
        view = _FittedView(self._board_scene)
        view.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        view.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        view.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        view.setMinimumSize(320, 320)
        self.setCentralWidget(view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.triggered.connect(self._on_flip_board)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_scene
        scene.set_theme(theme_by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flipped)

    def _connect_game_events(self) -> None:
        self._controller.events.on_move.append(self._on_move)
        self._controller.events.on_new_game.append(self._on_game_started)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_scene(self) -> BoardScene:
        return self._board_scene

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.new_game(self._settings.start_fen)

    def _on_flip_board(self) -> None:
        self._board_scene.set_flipped(not self._board_scene.is_flipped())

    def _on_game_started(self, board: Board) -> None:
        _LOGGER.debug("Board reset:\n%r", board)
        self._board_scene.set_controller(self._controller)
        self._update_status()

    def _on_move(self, src: Square, dst: Square, board: Board) -> None:
        self._update_status(f"{square_name(src)}-{square_name(dst)}")

    def _update_status(self, last_move: str | None = None) -> None:
        turn = self._controller.turn
        text = f"{turn.name.capitalize()} to move"
        if self._controller.is_in_check(turn):
            text += " (check)"
        if last_move:
            text = f"{last_move}  ·  {text}"
        self._status_label.setText(text)
