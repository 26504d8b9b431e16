"""Abstract interface between the board UI and the game orchestrator.

The UI depends on this ABC only: one command (:meth:`attempt_move`) plus
read-only queries for rendering.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessboard.core.enums import Color
    from chessboard.core.piece import Piece
    from chessboard.core.types import Square


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, fen: str | None = None) -> None:
        """Set up a new game from *fen* (standard start if omitted)."""

    @abstractmethod
    def attempt_move(self, src: Square, dst: Square) -> bool:
        """Play *src*→*dst* if legal. Returns True if applied."""

    @property
    @abstractmethod
    def turn(self) -> Color: ...

    @abstractmethod
    def piece_at(self, sq: Square) -> Piece | None: ...

    @abstractmethod
    def king_square(self, color: Color) -> Square: ...

    @abstractmethod
    def is_in_check(self, color: Color) -> bool: ...

    @abstractmethod
    def legal_destinations(self, src: Square) -> list[Square]:
        """Squares the piece on *src* may legally move to."""
