
"""Board helpers: collide, merge, rotate with wall kick, landing"""
import logging
from tetris_grid import Grid
from tetris_piece import Piece, rotate_matrix

logger = logging.getLogger(__name__)


def collide(grid: Grid, piece: Piece) -> bool:
    for bx, by in piece.cells():
        if bx < 0 or bx >= grid.width or by >= grid.height: return True
        if by >= 0 and grid.is_occupied(bx, by): return True
    return False


def merge(grid: Grid, piece: Piece):
    """Write the piece's tag into the grid. Caller must have checked collide()."""
    for bx, by in piece.cells():
        if by >= 0: grid.set(bx, by, piece.t)


def rotate_piece(grid: Grid, piece: Piece, direction: int) -> bool:
    """Rotate in place, nudging sideways +1, -2, +3, ... until the piece fits.

    The search stops once the next nudge is wider than the piece; the
    rotation and x are then restored and False is returned.
    """
    x0 = piece.x
    piece.shape = rotate_matrix(piece.shape, direction)
    offset = 1
    while collide(grid, piece):
        piece.x += offset
        offset = -(offset + (1 if offset > 0 else -1))
        if abs(offset) > piece.width:
            piece.shape = rotate_matrix(piece.shape, -direction)
            piece.x = x0
            logger.debug("rotation of %s aborted at x=%d", piece.t, x0)
            return False
    return True


def landing_y(grid: Grid, piece: Piece) -> int:
    """Return the y position where the piece would land if hard-dropped."""
    y0 = piece.y
    try:
        while not collide(grid, piece):
            piece.y += 1
        return piece.y - 1
    finally:
        piece.y = y0
