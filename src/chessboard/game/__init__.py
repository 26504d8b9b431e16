"""Game management layer — the move orchestrator and its events.

Quick start::

    from chessboard.game import GameController

    ctrl = GameController()
    ctrl.events.on_move.append(lambda src, dst, board: print(board))
    ctrl.attempt_move(52, 36)  # e2-e4
"""

from chessboard.game.controller import GameController, GameEvents
from chessboard.game.interfaces import IGameController

__all__ = [
    "GameController",
    "GameEvents",
    "IGameController",
]
