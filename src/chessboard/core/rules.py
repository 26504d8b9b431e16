"""Per-piece movement rules.

Each rule is a pure predicate ``(src, dst, board) -> bool`` answering whether
the piece standing on *src* may move to *dst* by its own geometry. Turn order
and king safety are not considered here (see :mod:`chessboard.core.validator`).

Geometry is precomputed from (row, column) offsets, so no rule can wrap from
one edge of the board to the other.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessboard.core.enums import Color, PieceType
from chessboard.core.piece import color_of, kind_of
from chessboard.core.types import Square, check_square, col_of, make_square, row_of

if TYPE_CHECKING:
    from chessboard.core.board import Board

MoveRule = Callable[[Square, Square, "Board"], bool]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Row step for a pawn of each color (White moves toward row 0).
PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[frozenset[Square], ...]:
    targets: list[frozenset[Square]] = []
    for sq in range(64):
        row, col = row_of(sq), col_of(sq)
        moves: set[Square] = set()
        for dr, dc in offsets:
            ar = row + dr
            ac = col + dc
            if 0 <= ar < 8 and 0 <= ac < 8:
                moves.add(make_square(ar, ac))
        targets.append(frozenset(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        row, col = row_of(sq), col_of(sq)
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ar = row + dr
            ac = col + dc
            ray: list[Square] = []
            while 0 <= ar < 8 and 0 <= ac < 8:
                ray.append(make_square(ar, ac))
                ar += dr
                ac += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)


# -- Shared helpers ---------------------------------------------------------


def _can_land(src: Square, dst: Square, board: Board) -> bool:
    """Destination is empty or holds an enemy piece."""
    target = board[dst]
    if target is None:
        return True
    mover = board[src]
    assert mover is not None
    return color_of(target) != color_of(mover)


def _slide(
    src: Square,
    dst: Square,
    board: Board,
    rays: tuple[tuple[tuple[Square, ...], ...], ...],
) -> bool:
    for ray in rays[src]:
        if dst not in ray:
            continue
        for sq in ray:
            if sq == dst:
                return _can_land(src, dst, board)
            if board[sq] is not None:
                return False
    return False


# -- Rules ------------------------------------------------------------------


def pawn_move(src: Square, dst: Square, board: Board) -> bool:
    """Forward pushes never capture; diagonal steps must capture."""
    pawn = board[src]
    assert pawn is not None
    color = color_of(pawn)
    forward = PAWN_FORWARD[color]
    d_row = row_of(dst) - row_of(src)
    d_col = col_of(dst) - col_of(src)
    target = board[dst]

    if d_row == forward:
        if d_col == 0:
            return target is None
        if abs(d_col) == 1:
            return target is not None and color_of(target) != color
        return False

    if d_row == 2 * forward and d_col == 0:
        if row_of(src) != PAWN_HOME_ROW[color]:
            return False
        return board[src + 8 * forward] is None and target is None

    return False


def knight_move(src: Square, dst: Square, board: Board) -> bool:
    return dst in _KNIGHT_TARGETS[src] and _can_land(src, dst, board)


def bishop_move(src: Square, dst: Square, board: Board) -> bool:
    return _slide(src, dst, board, _BISHOP_RAYS)


def rook_move(src: Square, dst: Square, board: Board) -> bool:
    return _slide(src, dst, board, _ROOK_RAYS)


def queen_move(src: Square, dst: Square, board: Board) -> bool:
    return rook_move(src, dst, board) or bishop_move(src, dst, board)


def king_move(src: Square, dst: Square, board: Board) -> bool:
    # No castling.
    return dst in _KING_TARGETS[src] and _can_land(src, dst, board)


MOVE_RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: pawn_move,
    PieceType.KNIGHT: knight_move,
    PieceType.BISHOP: bishop_move,
    PieceType.ROOK: rook_move,
    PieceType.QUEEN: queen_move,
    PieceType.KING: king_move,
}


def follows_piece_rule(src: Square, dst: Square, board: Board) -> bool:
    """Whether the piece on *src* may move to *dst* by its own rule."""
    if src == dst:
        return False
    piece = board[src]
    if piece is None:
        return False
    check_square(dst)
    return MOVE_RULES[kind_of(piece)](src, dst, board)
