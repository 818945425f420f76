
# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG, COLS, ROWS

@dataclass
class Dims:
    cell: int
    cols: int
    rows: int
    margin: int
    panel_w: int

    @property
    def board_w(self): return self.cols * self.cell
    @property
    def board_h(self): return self.rows * self.cell
    @property
    def board_x(self): return self.margin
    @property
    def board_y(self): return self.margin
    @property
    def panel_x(self): return self.margin * 2 + self.board_w
    @property
    def panel_y(self): return self.margin
    @property
    def total_w(self): return self.margin * 3 + self.board_w + self.panel_w
    @property
    def total_h(self): return self.margin * 2 + self.board_h

def compute_dims(cell=None) -> Dims:
    """Pixel layout: board on the left, HUD panel on the right."""
    return Dims(cell=int(cell or CONFIG["CELL_SIZE"]), cols=COLS, rows=ROWS,
                margin=16, panel_w=200)
