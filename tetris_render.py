"""
Pygame drawing for the game snapshot.

- Pre-render block cell Surfaces per color (solid + ghost outline) and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional

from tetris_game import GameSnapshot
from tetris_layout import Dims, next_slots
from tetris_piece import COLORS, SHAPES, Piece

BG = (10, 13, 34)
GRID = (40, 50, 90)
TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)


@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    high_score: int = -1
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    high_s: Optional[pygame.Surface] = None
    labels: Optional[Dict[str, pygame.Surface]] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font, cols: int, rows: int):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.cols = cols
        self.rows = rows
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        self.preview_surf: Dict[str, pygame.Surface] = {}
        self.hud = HudCache()
        self._make_static()
        for color in COLORS.values():
            self._make_cells(color)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(self.cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21, 25, 53), panel_rect)
        pygame.draw.rect(self.bg, (50, 60, 100), panel_rect, 1)

    # ---------- Small cell sprites (solid + ghost outline), keyed by color ----------
    def _make_cells(self, color: str):
        c = self.dims.cell
        s = pygame.Surface((c - 2, c - 2))
        s.fill(pygame.Color(color))
        self.cell_surf[color] = s
        g = pygame.Surface((c - 8, c - 8), pygame.SRCALPHA)
        pygame.draw.rect(g, pygame.Color(color), (0, 0, c - 8, c - 8), 2)
        self.ghost_surf[color] = g
        p = self.dims.preview_cell
        block = pygame.Surface((p - 2, p - 2))
        block.fill(pygame.Color(color))
        self.preview_surf[color] = block

    def _cell(self, color: str) -> pygame.Surface:
        if color not in self.cell_surf:
            self._make_cells(color)
        return self.cell_surf[color]

    # ---------- Board ----------
    def draw_board(self, screen: pygame.Surface, grid: List[List[Optional[str]]]):
        d = self.dims
        for y, row in enumerate(grid):
            for x, color in enumerate(row):
                if color is not None:
                    screen.blit(self._cell(color), (d.board_x + x * d.cell + 1, d.board_y + y * d.cell + 1))

    def draw_piece(self, screen: pygame.Surface, piece: Piece, ghost: bool = False):
        d = self.dims
        self._cell(piece.color)
        for bx, by in piece.cells():
            if by < 0:
                continue
            if ghost:
                screen.blit(self.ghost_surf[piece.color], (d.board_x + bx * d.cell + 4, d.board_y + by * d.cell + 4))
            else:
                screen.blit(self.cell_surf[piece.color], (d.board_x + bx * d.cell + 1, d.board_y + by * d.cell + 1))

    def draw_preview(self, screen: pygame.Surface, t: str, x: int, y: int):
        p = self.dims.preview_cell
        frame = pygame.Rect(x - 4, y - 4, p * 4 + 8, p * 4 + 8)
        pygame.draw.rect(screen, (15, 18, 40), frame)
        pygame.draw.rect(screen, (55, 65, 110), frame, 1)
        for r, row in enumerate(SHAPES[t][0]):
            for c, v in enumerate(row):
                if v:
                    screen.blit(self.preview_surf[COLORS[t]], (x + c * p + 1, y + r * p + 1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, state: GameSnapshot):
        d = self.dims
        f = self.font
        if self.hud.labels is None:
            self.hud.labels = {
                "title": f.render("Tetris", True, (197, 202, 233)),
                "hold": f.render("Hold:", True, TEXT),
                "next": f.render("Next:", True, TEXT),
            }
        if state.score != self.hud.score:
            self.hud.score = state.score
            self.hud.score_s = f.render(f"Score: {state.score}", True, TEXT)
        if state.level != self.hud.level:
            self.hud.level = state.level
            self.hud.level_s = f.render(f"Level: {state.level}", True, TEXT)
        if state.lines != self.hud.lines:
            self.hud.lines = state.lines
            self.hud.lines_s = f.render(f"Lines: {state.lines}", True, TEXT)
        if state.high_score != self.hud.high_score:
            self.hud.high_score = state.high_score
            self.hud.high_s = f.render(f"Best: {state.high_score}", True, DIM_TEXT)

        x = d.panel_x + 12
        screen.blit(self.hud.labels["title"], (x, d.panel_y + 12))
        screen.blit(self.hud.score_s, (x, d.panel_y + 40))
        screen.blit(self.hud.level_s, (x, d.panel_y + 62))
        screen.blit(self.hud.lines_s, (x, d.panel_y + 84))
        screen.blit(self.hud.high_s, (x, d.panel_y + 106))

        screen.blit(self.hud.labels["hold"], (x, d.hold_y - 22))
        if state.held_piece is not None:
            self.draw_preview(screen, state.held_piece, x, d.hold_y)

        screen.blit(self.hud.labels["next"], (x, d.next_y - 22))
        for t, (px, py) in zip(state.next_pieces, next_slots(d, len(state.next_pieces))):
            self.draw_preview(screen, t, px, py)

    def draw_message(self, screen: pygame.Surface, text: str):
        d = self.dims
        msg = self.big_font.render(text, True, (255, 220, 220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)

    def draw(self, screen: pygame.Surface, state: GameSnapshot, ghost: Optional[Piece]):
        screen.blit(self.bg, (0, 0))
        self.draw_board(screen, state.board)
        if state.current_piece is not None and not state.game_over:
            if ghost is not None:
                self.draw_piece(screen, ghost, ghost=True)
            self.draw_piece(screen, state.current_piece)
        self.draw_panel_hud(screen, state)
        if state.current_piece is None:
            self.draw_message(screen, "Press any key")
        elif state.game_over:
            self.draw_message(screen, "GAME OVER (R)")
        elif state.paused:
            self.draw_message(screen, "PAUSED (P)")
