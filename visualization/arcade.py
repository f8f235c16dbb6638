"""
Interactive Pygame arcade for the snake game.

Controls:
    Arrow keys / WASD - steer
    P                 - toggle progressive speed
    SPACE             - pause
    R                 - new game
    ESC               - quit

Usage:
    python -m visualization.arcade
    python -m visualization.arcade --config configs/game.yaml --log-level DEBUG
"""

import argparse
import logging
import random

import pygame

from env.renderer import Renderer
from game.config import GameConfig, load_config
from game.direction import Direction

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class Arcade:
    """
    Drives a GameState from pygame's clock and keyboard.

    Args:
        config: game configuration
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.rng = random.Random(config.seed)

        self.paused = False
        self.games_played = 0
        self.best_score = 0

        self.game = config.new_game(self.rng)
        self._reported_over = False

    def new_game(self) -> None:
        """Replaces the current game with a fresh one."""
        self.game = self.config.new_game(self.rng)
        self._reported_over = False
        self.paused = False

    def handle_key(self, key: int) -> bool:
        """
        Handles a key press.

        Returns:
            False if the arcade should quit
        """
        if key == pygame.K_ESCAPE:
            return False

        if key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_r:
            self.new_game()
        elif key == pygame.K_p:
            self.game.toggle_progressive_speed()
        elif key in KEY_DIRECTIONS and not self.paused:
            self.game.enqueue_direction(KEY_DIRECTIONS[key])
        # anything else is ignored

        return True

    def update(self, elapsed: float) -> bool:
        """
        Advances the game by elapsed seconds.

        Returns:
            True if a logical tick ran
        """
        if self.paused or self.game.game_over:
            return False

        ticked = self.game.advance(elapsed, self.config.width, self.config.height)
        if ticked:
            snapshot = self.game.snapshot()
            logger.debug(
                "Score: %d, Speed: %.1f ticks/s (%s)",
                snapshot.score,
                snapshot.ticks_per_second,
                "Progressive" if snapshot.progressive else "Fixed",
            )

        if self.game.game_over and not self._reported_over:
            self._end_game()
        return ticked

    def _end_game(self) -> None:
        self._reported_over = True
        self.games_played += 1
        self.best_score = max(self.best_score, self.game.score)
        logger.info("Game over! Your score: %d (best %d)", self.game.score, self.best_score)

    def run(self) -> None:
        """Main loop."""
        renderer = Renderer(
            grid_size=self.config.grid_size,
            cell_size=self.config.cell_size,
            render_mode="human",
        )
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self.handle_key(event.key) and running

            elapsed = clock.tick(self.config.updates_per_second) / 1000.0
            self.update(elapsed)
            renderer.render(self.game.snapshot())

        renderer.close()


def main():
    parser = argparse.ArgumentParser(description="Snake Arcade")
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to config YAML (defaults are used when omitted)"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for apple placement (overrides the config)"
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.seed is not None:
        config.seed = args.seed

    Arcade(config).run()


if __name__ == "__main__":
    main()
