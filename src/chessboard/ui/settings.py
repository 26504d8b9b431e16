"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessboard.core.notation import STARTING_FEN


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    start_fen: str = STARTING_FEN

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    # Diagnostics
    log_level: str = "WARNING"
