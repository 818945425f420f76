
"""
Pygame render adapter.

- Pre-render one block sprite per piece type (solid + ghost outline).
- Pre-render the static background (board grid, panel, preview frame).
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional
from tetris_config import COLORS
from tetris_layout import Dims
from tetris_board import landing_y
from tetris_piece import SHAPES

PREVIEW_CELLS = 4

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class Renderer:
    """Draws grid cells, the preview and the HUD onto a pygame surface."""
    def __init__(self, screen: pygame.Surface, dims: Dims, font: pygame.font.Font,
                 big_font: Optional[pygame.font.Font] = None):
        self.screen = screen
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        self.pv_cell = max(14, int(d.cell*0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 150
        self.preview_rect = pygame.Rect(self.pv_x-6, self.pv_y-6,
                                        self.pv_cell*PREVIEW_CELLS+12, self.pv_cell*PREVIEW_CELLS+12)
        pygame.draw.rect(self.bg, (15,18,40), self.preview_rect)
        pygame.draw.rect(self.bg, (55,65,110), self.preview_rect, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        self.preview_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            # subtle highlight on the upper half
            hi = tuple(min(255, v + 18) for v in col)
            pygame.draw.rect(s, hi, (1, 1, c-6, (c-6)//2))
            self.cell_surf[t] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[t] = g
            p = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
            p.fill(col)
            self.preview_surf[t] = p

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        c = self.dims.cell
        return pygame.Rect(self.dims.board_x + bx*c, self.dims.board_y + by*c, c, c)

    # ---------- Render contract ----------
    def clear_surface(self):
        self.screen.blit(self.bg, (0,0))

    def draw_cell(self, bx: int, by: int, t: str):
        if by < 0: return
        self.screen.blit(self.cell_surf[t], self.cell_rect(bx, by).inflate(-2, -2).topleft)

    def draw_ghost_cell(self, bx: int, by: int, t: str):
        if by < 0: return
        self.screen.blit(self.ghost_surf[t], self.cell_rect(bx, by).inflate(-8, -8).topleft)

    def draw_preview(self, shape: List[List[int]], t: str):
        """Draw the filled cells of `shape` centred in the preview frame."""
        filled = [(x, y) for y, row in enumerate(shape) for x, v in enumerate(row) if v]
        if not filled: return
        xs = [x for x, _ in filled]; ys = [y for _, y in filled]
        w = max(xs) - min(xs) + 1; h = max(ys) - min(ys) + 1
        ox = self.pv_x + (PREVIEW_CELLS - w) * self.pv_cell // 2
        oy = self.pv_y + (PREVIEW_CELLS - h) * self.pv_cell // 2
        for x, y in filled:
            rx = ox + (x - min(xs)) * self.pv_cell + 1
            ry = oy + (y - min(ys)) * self.pv_cell + 1
            self.screen.blit(self.preview_surf[t], (rx, ry))

    # ---------- HUD / Panel ----------
    def draw_hud(self, score: int, level: int, lines: int = 0,
                 game_over: bool = False, paused: bool = False):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (200,210,240))
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, (200,210,240))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (200,210,240))
        screen = self.screen
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, (200,210,240)), (d.panel_x + 12, d.panel_y + 126))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rot CW  Z Rot CCW", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("P Pause • R Restart", True, (165,175,215)),
            ]
        y = self.preview_rect.bottom + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
        if game_over:
            self._banner("GAME OVER", (255,220,220), 0)
        if paused:
            self._banner("PAUSED", (220,240,255), -40)

    def _banner(self, text, color, dy):
        d = self.dims
        msg = self.big_font.render(text, True, color)
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2 + dy))
        self.screen.blit(msg, rect)


def render_frame(renderer, state):
    """Draw one frame of `state` through any object with the render contract."""
    renderer.clear_surface()
    grid = state.grid
    for y, row in enumerate(grid.cells):
        for x, t in enumerate(row):
            if t:
                renderer.draw_cell(x, y, t)
    piece = state.piece
    if hasattr(renderer, "draw_ghost_cell"):
        dy = landing_y(grid, piece) - piece.y
        for x, y in piece.cells():
            renderer.draw_ghost_cell(x, y + dy, piece.t)
    for x, y in piece.cells():
        renderer.draw_cell(x, y, piece.t)
    if state.next_type:
        renderer.draw_preview(SHAPES[state.next_type], state.next_type)
    p = state.progress
    renderer.draw_hud(p.score, p.level, p.lines, p.game_over, p.paused)
