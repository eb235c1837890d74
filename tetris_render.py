
"""
Rendering helpers for the Tetris project.

Everything is drawn from an engine Snapshot; nothing here mutates game state.
- Pre-render block cell Surfaces per piece kind (solid + translucent ghost).
- Pre-render static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLS, ROWS, PieceKind, cells

TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)

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

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((17, 17, 17))
        grid_col = (36, 36, 40)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        for px, py in [d.hold_pos] + d.next_pos:
            frame = pygame.Rect(px-6, py-6, d.box, d.box)
            pygame.draw.rect(self.bg, (15,18,40), frame)
            pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Cell sprites (solid + ghost) ----------
    def _make_cells(self):
        self.cell_surf: Dict[PieceKind, pygame.Surface] = {}
        self.ghost_surf: Dict[PieceKind, pygame.Surface] = {}
        self.mini_surf: Dict[PieceKind, pygame.Surface] = {}
        c = self.dims.cell
        for kind in PieceKind:
            col = pygame.Color(kind.color)
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[kind] = s
            g = pygame.Surface((c-2, c-2), pygame.SRCALPHA)
            g.fill((col.r, col.g, col.b, 64))
            self.ghost_surf[kind] = g
            m = pygame.Surface((self.dims.mini-4, self.dims.mini-4))
            m.fill(col)
            self.mini_surf[kind] = m

    def cell_pos(self, bx: int, by: int) -> Tuple[int, int]:
        return (self.dims.board_x + bx*self.dims.cell + 1, self.dims.board_y + by*self.dims.cell + 1)

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap):
        screen.blit(self.bg, (0, 0))
        for y, row in enumerate(snap.board):
            for x, v in enumerate(row):
                if v:
                    screen.blit(self.cell_surf[PieceKind.from_cell(v)], self.cell_pos(x, y))
        p = snap.piece
        if p is not None:
            for i, j in cells(p.matrix):
                gy = snap.ghost_y + i
                if 0 <= gy < ROWS and not snap.board[gy][p.x + j]:
                    screen.blit(self.ghost_surf[p.kind], self.cell_pos(p.x + j, gy))
            for i, j in cells(p.matrix):
                if 0 <= p.y + i < ROWS:
                    screen.blit(self.cell_surf[p.kind], self.cell_pos(p.x + j, p.y + i))
        self.draw_panel_hud(screen, snap)

    def draw_mini(self, screen: pygame.Surface, kind: Optional[PieceKind], pos: Tuple[int, int]):
        if kind is None:
            return
        m = self.dims.mini
        for i, j in cells(kind.shape):
            screen.blit(self.mini_surf[kind], (pos[0] + j*m + 2, pos[1] + i*m + 2))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score}", True, TEXT)
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))

        hold_col = TEXT if snap.hold_usable else DIM_TEXT
        screen.blit(f.render("Hold:", True, hold_col), (d.panel_x + 12, d.hold_label_y))
        self.draw_mini(screen, snap.hold, d.hold_pos)
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.next_label_y))
        for kind, pos in zip(snap.next, d.next_pos):
            self.draw_mini(screen, kind, pos)

        if not self.hud.controls:
            self.hud.controls = [
                f.render("C Hold • P Pause", True, DIM_TEXT),
                f.render("Enter Restart", True, DIM_TEXT),
            ]
        y = d.panel_y + d.board_h - 20*len(self.hud.controls) - 8
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
