
"""Piece model, shapes, matrix rotation"""
import math
from dataclasses import dataclass
from typing import List
from tetris_config import COLS

Matrix = List[List[int]]

# Square bounding boxes so a quarter turn keeps the matrix dimensions
SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
}

PIECE_TYPES = tuple(SHAPES)


def copy_matrix(m: Matrix) -> Matrix:
    return [r[:] for r in m]


def rotate_matrix(m: Matrix, direction: int) -> Matrix:
    """Quarter turn: transpose, then reverse each row (cw) or the row order (ccw)."""
    if direction not in (1, -1):
        raise ValueError(f"direction must be 1 or -1, got {direction!r}")
    if any(len(r) != len(m) for r in m):
        raise ValueError("only square matrices can be rotated")
    t = [list(r) for r in zip(*m)]
    if direction > 0:
        return [r[::-1] for r in t]
    return t[::-1]


@dataclass
class Piece:
    t: str
    shape: Matrix
    x: int
    y: int

    @property
    def width(self) -> int:
        return len(self.shape[0])

    def cells(self):
        """Absolute (x, y) of every filled cell."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r

    @staticmethod
    def spawn(t: str, cols: int = COLS):
        s = copy_matrix(SHAPES[t])
        x = cols // 2 - math.ceil(len(s[0]) / 2)
        return Piece(t, s, x, 0)
