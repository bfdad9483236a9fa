"""
Rendering helpers for the Tetris front end.

- Pre-render block cell Surfaces per color (solid + ghost outline) and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when the score or next piece changes.

Everything is drawn from a GameState snapshot plus the ghost position; the
renderer never touches the session itself.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLORS, SHAPES


@dataclass
class HudCache:
    score: int = -1
    next_type: str = ""
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
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
        self.pv_y = d.panel_y + 110
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[t] = g

    # ---------- Per-cell helpers ----------
    def _visible(self, bx: int, by: int) -> bool:
        return 0 <= bx < self.dims.cols and 0 <= by < self.dims.rows

    def draw_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        if not self._visible(bx, by): return
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell_surf[t], (rx, ry))

    def draw_ghost_cell(self, screen: pygame.Surface, t: str, bx: int, by: int):
        if not self._visible(bx, by): return
        rx = self.dims.board_x + bx*self.dims.cell + 4
        ry = self.dims.board_y + by*self.dims.cell + 4
        screen.blit(self.ghost_surf[t], (rx, ry))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, state, ghost: Optional[Tuple[int, int]]):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(state.board):
            for x, t in enumerate(row):
                if t: self.draw_cell(screen, t, x, y)
        p = state.current
        if p is not None:
            if ghost is not None:
                gx, gy = ghost
                for bx, by in p.moved(gx - p.x, gy - p.y).cells():
                    if self._visible(bx, by) and state.board[by][bx] is None:
                        self.draw_ghost_cell(screen, p.t, bx, by)
            for bx, by in p.cells():
                self.draw_cell(screen, p.t, bx, by)
        self.draw_panel_hud(screen, state.score, state.next.t if state.next else "")
        if state.is_game_over:
            self._banner(screen, "GAME OVER (R to Restart)", (255,220,220))
        elif state.is_paused:
            self._banner(screen, "PAUSED (P to Resume)", (220,240,255))

    def _banner(self, screen: pygame.Surface, text: str, color):
        d = self.dims
        msg = self.big_font.render(text, True, color)
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, next_type: str):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (200,210,240))
        if next_type != self.hud.next_type:
            self.hud.next_type = next_type
            self.hud.next_s = self._preview(next_type) if next_type else None
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        if self.hud.score_s: screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        nl = f.render("Next:", True, (200,210,240))
        screen.blit(nl, (d.panel_x + 12, d.panel_y + 80))
        if self.hud.next_s:
            screen.blit(self.hud.next_s, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("↓ Fast drop", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("P Pause • R Restart", True, (165,175,215)),
            ]
        y = d.panel_y + 220
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def _preview(self, next_type: str) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
        shape = SHAPES[next_type]
        offx = (4 - len(shape[0])) // 2
        offy = max(0, (4 - len(shape)) // 2)
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    block = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
                    block.fill(COLORS[next_type])
                    s.blit(block, ((x + offx) * self.pv_cell + 1, (y + offy) * self.pv_cell + 1))
        return s
