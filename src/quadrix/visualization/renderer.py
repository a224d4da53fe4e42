from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from quadrix.game import Game, TetrominoType, ROTATIONS

# First grid row is the spawn buffer and is never drawn
HIDDEN_ROWS = 1


def color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (0, 0, 240),    # J
        3: (240, 160, 0),  # L
        4: (240, 240, 0),  # O
        5: (0, 240, 0),    # S
        6: (160, 0, 240),  # T
        7: (240, 0, 0),    # Z
    }
    return palette.get(abs(v), (200, 200, 200))


def state_to_rgb(state: np.ndarray, cell: int = 12) -> np.ndarray:
    """Rasterize the visible rows of a game state into an RGB image."""
    visible = state[HIDDEN_ROWS:]
    h, w = visible.shape
    img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
    for y in range(h):
        for x in range(w):
            img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(visible[y, x]))
    return img


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_cells: int = 6) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_cells = panel_cells
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, height: int, width: int) -> Tuple[int, int]:
        board_w = width * self.cell_size
        board_h = (height - HIDDEN_ROWS) * self.cell_size
        panel_w = self.panel_cells * self.cell_size
        return self.margin * 3 + board_w + panel_w, self.margin * 2 + board_h

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        return self._font

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        visible = state[HIDDEN_ROWS:]
        h, w = visible.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(visible[y, x])), rect)
        return surf

    def _draw_preview(self, screen: pygame.Surface, kind: TetrominoType, x0: int, y0: int) -> None:
        cells = ROTATIONS[kind][0]
        min_y = min(c.y for c in cells)
        min_x = min(c.x for c in cells)
        for c in cells:
            rect = pygame.Rect(
                x0 + (c.x - min_x) * self.cell_size,
                y0 + (c.y - min_y) * self.cell_size,
                self.cell_size - 1,
                self.cell_size - 1,
            )
            pygame.draw.rect(screen, color_for_value(int(kind)), rect)

    def draw(self, screen: pygame.Surface, game: Game, message: Optional[str] = None) -> None:
        screen.fill((10, 10, 14))
        grid_surf = self._grid_surface(game.get_state())
        screen.blit(grid_surf, (self.margin, self.margin))

        font = self._font_obj()
        x0 = self.margin * 2 + grid_surf.get_width()
        y0 = self.margin
        screen.blit(font.render("Next", True, (230, 230, 235)), (x0, y0))
        if game.next_block_type is not None and not game.game_over:
            self._draw_preview(screen, game.next_block_type, x0, y0 + 30)
        y0 += 30 + 3 * self.cell_size
        screen.blit(font.render(f"Score: {game.score}", True, (230, 230, 235)), (x0, y0))
        screen.blit(font.render(f"Level: {game.level}", True, (230, 230, 235)), (x0, y0 + 30))
        screen.blit(font.render(f"Lines: {game.total_lines_cleared}", True, (230, 230, 235)), (x0, y0 + 60))

        if message:
            text = font.render(message, True, (255, 255, 255))
            rect = text.get_rect(center=(self.margin + grid_surf.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
        pygame.display.flip()
