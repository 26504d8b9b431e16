"""Tests for MainWindow status and menu wiring."""

from __future__ import annotations

from PyQt6.QtWidgets import QGraphicsView

from chessboard.core.types import E2, E4
from chessboard.game.controller import GameController
from chessboard.ui.main_window import MainWindow
from chessboard.ui.settings import AppSettings


class TestMainWindow:
    def test_initial_status(self) -> None:
        window = MainWindow()
        assert window.status_text == "White to move"

    def test_status_after_move(self) -> None:
        window = MainWindow()
        assert window.controller.attempt_move(E2, E4)
        assert window.status_text == "e2-e4  ·  Black to move"

    def test_status_reports_check(self) -> None:
        window = MainWindow(AppSettings(start_fen="4r1k1/8/8/8/8/8/8/4K3"))
        assert window.status_text == "White to move (check)"

    def test_external_controller_is_used(self) -> None:
        ctrl = GameController("4k3/8/8/8/8/8/8/4K3 b")
        window = MainWindow(controller=ctrl)
        assert window.controller is ctrl
        assert window.status_text == "Black to move"

    def test_new_game_action_resets_position(self) -> None:
        window = MainWindow()
        window.controller.attempt_move(E2, E4)
        window._act_new_game.trigger()
        assert window.controller.piece_at(E2) is not None
        assert window.controller.history == ()
        assert window.status_text == "White to move"

    def test_central_view_shows_the_board_scene(self) -> None:
        window = MainWindow()
        view = window.centralWidget()
        assert isinstance(view, QGraphicsView)
        assert view.scene() is window.board_scene

    def test_flip_action_toggles_orientation(self) -> None:
        window = MainWindow()
        scene = window.board_scene
        assert not scene.is_flipped()
        window._act_flip.trigger()
        assert scene.is_flipped()

    def test_settings_applied(self) -> None:
        settings = AppSettings(
            flipped=True, show_coordinates=False, board_theme="Green"
        )
        window = MainWindow(settings)
        scene = window.board_scene
        assert scene.is_flipped()
        assert all(not item.isVisible() for item in scene._coord_items)
