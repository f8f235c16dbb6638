"""
Pygame renderer for game visualization.

The game core works in grid cells; this is the only place cells become pixels.
"""

import pygame
import numpy as np
from typing import Tuple, Optional

from game.direction import Direction
from game.state import GamePhase, GameSnapshot


class Renderer:
    """Game visualization using Pygame."""

    # Colors
    COLORS = {
        "background": (30, 30, 40),
        "grid": (50, 50, 60),
        "snake_head": (0, 200, 100),
        "snake_body": (0, 150, 80),
        "snake_tail": (0, 100, 50),
        "apple": (220, 50, 50),
        "text": (255, 255, 255),
        "game_over": (200, 50, 50),
        "board_full": (255, 215, 0),
    }

    PANEL_HEIGHT = 50

    def __init__(
        self,
        grid_size: Tuple[int, int],
        cell_size: int = 30,
        render_mode: str = "human",
        caption: str = "Snake Arcade",
    ):
        """
        Args:
            grid_size: field size (width, height) in cells
            cell_size: cell size in pixels
            render_mode: "human" or "rgb_array"
        """
        self.grid_size = grid_size
        self.cell_size = cell_size
        self.render_mode = render_mode

        # Window dimensions
        self.window_width = grid_size[0] * cell_size
        self.window_height = grid_size[1] * cell_size + self.PANEL_HEIGHT

        pygame.init()
        pygame.display.set_caption(caption)

        if render_mode == "human":
            self.screen = pygame.display.set_mode(
                (self.window_width, self.window_height)
            )
        else:
            self.screen = pygame.Surface(
                (self.window_width, self.window_height)
            )

        self.font = pygame.font.Font(None, 24)

    def to_pixels(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        """Top-left pixel of a grid cell."""
        return (cell[0] * self.cell_size, cell[1] * self.cell_size)

    def render(self, snapshot: GameSnapshot) -> Optional[np.ndarray]:
        """
        Renders a game snapshot.

        Returns:
            RGB array if render_mode == "rgb_array", otherwise None
        """
        self.screen.fill(self.COLORS["background"])
        self._draw_grid()

        if snapshot.apple is not None:
            self._draw_apple(snapshot.apple)

        self._draw_snake(snapshot)
        self._draw_info(snapshot)

        if self.render_mode == "human":
            pygame.display.flip()
            return None
        return np.transpose(
            pygame.surfarray.array3d(self.screen),
            (1, 0, 2)
        )

    def _draw_grid(self):
        """Draws grid."""
        grid_height = self.grid_size[1] * self.cell_size
        for x in range(self.grid_size[0] + 1):
            pygame.draw.line(
                self.screen,
                self.COLORS["grid"],
                (x * self.cell_size, 0),
                (x * self.cell_size, grid_height)
            )

        for y in range(self.grid_size[1] + 1):
            pygame.draw.line(
                self.screen,
                self.COLORS["grid"],
                (0, y * self.cell_size),
                (self.window_width, y * self.cell_size)
            )

    def _draw_cell(self, cell: Tuple[int, int], color: Tuple[int, int, int],
                   margin: int = 2):
        """Draws a filled cell."""
        px, py = self.to_pixels(cell)
        rect = pygame.Rect(
            px + margin,
            py + margin,
            self.cell_size - 2 * margin,
            self.cell_size - 2 * margin
        )
        pygame.draw.rect(self.screen, color, rect, border_radius=5)

    def _draw_snake(self, snapshot: GameSnapshot):
        """Draws snake, shaded from head to tail."""
        body = snapshot.body
        for i, cell in enumerate(body):
            # The head may sit outside the arena after a wall hit
            if not (0 <= cell[0] < self.grid_size[0] and 0 <= cell[1] < self.grid_size[1]):
                continue
            if i == 0:
                self._draw_cell(cell, self.COLORS["snake_head"])
                self._draw_eyes(cell, snapshot.direction)
            else:
                ratio = i / len(body)
                color = self._interpolate_color(
                    self.COLORS["snake_body"],
                    self.COLORS["snake_tail"],
                    ratio
                )
                self._draw_cell(cell, color)

    def _draw_eyes(self, cell: Tuple[int, int], direction: Direction):
        """Draws snake eyes facing direction."""
        px, py = self.to_pixels(cell)
        cx = px + self.cell_size // 2
        cy = py + self.cell_size // 2

        eye_offsets = {
            Direction.UP: [(-5, -3), (5, -3)],
            Direction.DOWN: [(-5, 3), (5, 3)],
            Direction.LEFT: [(-3, -5), (-3, 5)],
            Direction.RIGHT: [(3, -5), (3, 5)],
        }

        for ox, oy in eye_offsets[direction]:
            pygame.draw.circle(self.screen, (255, 255, 255), (cx + ox, cy + oy), 3)
            pygame.draw.circle(self.screen, (0, 0, 0), (cx + ox, cy + oy), 1)

    def _draw_apple(self, cell: Tuple[int, int]):
        px, py = self.to_pixels(cell)
        cx = px + self.cell_size // 2
        cy = py + self.cell_size // 2
        radius = max(self.cell_size // 2 - 4, 1)
        pygame.draw.circle(self.screen, self.COLORS["apple"], (cx, cy), radius)

    def _draw_info(self, snapshot: GameSnapshot):
        """Draws info panel."""
        y = self.grid_size[1] * self.cell_size + 10

        mode = "Progressive" if snapshot.progressive else "Fixed"
        texts = [
            (f"Score: {snapshot.score}", self.COLORS["text"]),
            (f"Length: {snapshot.length}", self.COLORS["text"]),
            (f"{mode} {snapshot.ticks_per_second:.1f}/s", self.COLORS["text"]),
        ]
        if snapshot.phase is GamePhase.GAME_OVER:
            texts.append(("GAME OVER", self.COLORS["game_over"]))
        elif snapshot.phase is GamePhase.BOARD_FULL:
            texts.append(("BOARD FULL", self.COLORS["board_full"]))

        x = 10
        for text, color in texts:
            surface = self.font.render(text, True, color)
            self.screen.blit(surface, (x, y))
            x += surface.get_width() + 20

    def _interpolate_color(
        self,
        color1: Tuple[int, int, int],
        color2: Tuple[int, int, int],
        ratio: float
    ) -> Tuple[int, int, int]:
        """Interpolates between two colors."""
        return tuple(
            int(c1 + (c2 - c1) * ratio)
            for c1, c2 in zip(color1, color2)
        )

    def close(self):
        """Closes pygame."""
        pygame.quit()
