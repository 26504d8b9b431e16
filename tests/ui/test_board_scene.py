"""Tests for BoardScene geometry and click-to-move handling."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, QPointF
from PyQt6.QtWidgets import QGraphicsSceneMouseEvent

from chessboard.core.types import E1, E2, E4, E5, E7, parse_square
from chessboard.game.controller import GameController
from chessboard.ui.board.board_scene import BoardScene


def _scene_with_game(fen: str | None = None) -> tuple[BoardScene, GameController]:
    scene = BoardScene()
    ctrl = GameController(fen)
    scene.set_controller(ctrl)
    return scene, ctrl


def _press(scene: BoardScene, col: int, row: int) -> None:
    event = QGraphicsSceneMouseEvent(QEvent.Type.GraphicsSceneMousePress)
    event.setScenePos(
        QPointF((col + 0.5) * BoardScene.TILE, (row + 0.5) * BoardScene.TILE)
    )
    scene.mousePressEvent(event)


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("a8")

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == parse_square("h1")


def test_pos_outside_board_is_none() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(scene.sceneRect().bottomRight()) is None


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_set_controller_draws_every_piece() -> None:
    scene, _ = _scene_with_game()
    assert len(scene._piece_items) == 32
    assert scene._piece_items[E1].square == E1


class TestClickToMove:
    def test_click_own_piece_selects_and_marks_targets(self) -> None:
        scene, _ = _scene_with_game()
        assert not scene.square_clicked(E2)
        assert scene.selected_square == E2
        assert len(scene._legal_dot_items) == 2

    def test_click_opponent_piece_does_not_select(self) -> None:
        scene, _ = _scene_with_game()
        scene.square_clicked(E7)
        assert scene.selected_square is None

    def test_second_click_moves_and_emits(self) -> None:
        scene, ctrl = _scene_with_game()
        emitted: list[tuple[int, int]] = []
        scene.move_made.connect(lambda s, d: emitted.append((s, d)))

        scene.square_clicked(E2)
        assert scene.square_clicked(E4)

        assert emitted == [(E2, E4)]
        assert ctrl.piece_at(E4) is not None
        assert E4 in scene._piece_items and E2 not in scene._piece_items
        assert scene.selected_square is None
        assert len(scene._last_move_highlights) == 2

    def test_illegal_target_keeps_board(self) -> None:
        scene, ctrl = _scene_with_game()
        before = ctrl.board.copy()
        scene.square_clicked(E2)
        assert not scene.square_clicked(E5)
        assert ctrl.board == before
        assert scene.selected_square is None

    def test_clicking_selected_square_deselects(self) -> None:
        scene, _ = _scene_with_game()
        scene.square_clicked(E2)
        scene.square_clicked(E2)
        assert scene.selected_square is None

    def test_hidden_legal_moves_draw_no_dots(self) -> None:
        scene, _ = _scene_with_game()
        scene.set_show_legal_moves(False)
        scene.square_clicked(E2)
        assert scene._legal_dot_items == []

    def test_no_controller_ignores_clicks(self) -> None:
        scene = BoardScene()
        assert not scene.square_clicked(E2)
        assert scene.selected_square is None


def test_check_marker_follows_position() -> None:
    scene, _ = _scene_with_game("4r1k1/8/8/8/8/8/8/4K3")
    assert len(scene._check_items) == 1

    scene, _ = _scene_with_game()
    assert scene._check_items == []


def test_mouse_presses_drive_click_to_move() -> None:
    scene, ctrl = _scene_with_game()
    _press(scene, 4, 6)  # e2
    assert scene.selected_square == E2
    _press(scene, 4, 4)  # e4
    assert ctrl.piece_at(E4) is not None
    assert scene.selected_square is None


def test_mouse_press_without_controller_is_ignored() -> None:
    scene = BoardScene()
    _press(scene, 4, 6)
    assert scene.selected_square is None
