
"""Settled-block grid"""
from typing import List, Optional
from tetris_config import COLS, ROWS

Row = List[Optional[str]]


class Grid:
    """Fixed-size matrix of settled cells. A cell is None or a piece type tag."""

    def __init__(self, width: int = COLS, height: int = ROWS):
        self.width = width
        self.height = height
        self.cells: List[Row] = [self._empty_row() for _ in range(height)]

    def _empty_row(self) -> Row:
        return [None] * self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        # out of bounds acts as wall/floor
        if not self.in_bounds(x, y):
            return True
        return self.cells[y][x] is not None

    def get(self, x: int, y: int) -> Optional[str]:
        return self.cells[y][x] if self.in_bounds(x, y) else None

    def set(self, x: int, y: int, tag: Optional[str]):
        if self.in_bounds(x, y):
            self.cells[y][x] = tag

    def is_row_full(self, y: int) -> bool:
        return all(v is not None for v in self.cells[y])

    def is_empty(self) -> bool:
        return all(v is None for row in self.cells for v in row)

    def clear_full_rows(self) -> int:
        """Remove full rows bottom-up, inserting empty rows at the top.

        The row index is held after a clear so the row that shifted down into
        it is examined too. Returns the number of rows removed.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                del self.cells[y]
                self.cells.insert(0, self._empty_row())
                cleared += 1
            else:
                y -= 1
        return cleared

    def __repr__(self):
        rows = ["".join(v or "." for v in row) for row in self.cells]
        body = "\n".join(rows)
        return f"Grid({self.width}x{self.height})\n{body}"
