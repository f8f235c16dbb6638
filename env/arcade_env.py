"""
Gymnasium environment around the arcade game core.
"""

import random
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from game.apple import AppleSpawner
from game.direction import Direction
from game.speed import SpeedController, SpeedMode
from game.state import GameState


class SnakeArcadeEnv(gym.Env):
    """
    Classic single-apple snake driven one tick per step.

    Actions (absolute directions, reversals are ignored by the game):
        0: Up
        1: Down
        2: Left
        3: Right

    Observation: 3D grid with channels [head, body, apple].

    Rewards:
        - Apple: +10
        - Death (wall/body): -10
        - Each step: -0.01
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 10}

    ACTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

    REWARD_APPLE = 10.0
    DEATH_PENALTY = -10.0
    STEP_PENALTY = -0.01

    def __init__(
        self,
        grid_size: Tuple[int, int] = (16, 16),
        max_steps: int = 1000,
        cell_size: int = 30,
        render_mode: Optional[str] = None,
    ):
        """
        Args:
            grid_size: field size (width, height)
            max_steps: max steps per episode
            cell_size: pixels per cell when rendering
            render_mode: rendering mode
        """
        super().__init__()

        self.grid_size = grid_size
        self.max_steps = max_steps
        self.cell_size = cell_size
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(len(self.ACTIONS))
        self.observation_space = spaces.Box(
            low=0, high=1,
            shape=(3, grid_size[1], grid_size[0]),
            dtype=np.float32
        )

        # Game state (initialized in reset)
        self.game: Optional[GameState] = None
        self.steps: int = 0

        # Renderer (initialized on first render)
        self.renderer = None

    def reset(
        self,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Starts a new game."""
        super().reset(seed=seed)

        rng = random.Random(int(self.np_random.integers(2 ** 31)))
        width, height = self.grid_size
        self.game = GameState.for_arena(
            width, height,
            spawner=AppleSpawner(rng),
            speed=SpeedController(mode=SpeedMode.FIXED),
        )
        self.steps = 0

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Executes one game tick.

        Returns:
            observation, reward, terminated, truncated, info
        """
        # Finished game: nothing moves, nothing is charged
        if self.game.game_over:
            return self._get_observation(), 0.0, True, False, self._get_info()

        self.steps += 1
        reward = self.STEP_PENALTY

        score_before = self.game.score
        self.game.enqueue_direction(self.ACTIONS[int(action)])
        self.game.tick(*self.grid_size)

        if self.game.score > score_before:
            reward += self.REWARD_APPLE
        if self.game.collision is not None:
            reward += self.DEATH_PENALTY

        terminated = self.game.game_over
        truncated = not terminated and self.steps >= self.max_steps

        return self._get_observation(), float(reward), terminated, truncated, self._get_info()

    def _get_observation(self) -> np.ndarray:
        """
        Channels:
        0: head
        1: body
        2: apple
        """
        width, height = self.grid_size
        grid = np.zeros((3, height, width), dtype=np.float32)

        for i, (x, y) in enumerate(self.game.snake.body):
            if 0 <= x < width and 0 <= y < height:
                grid[0 if i == 0 else 1, y, x] = 1

        if self.game.apple is not None:
            ax, ay = self.game.apple
            grid[2, ay, ax] = 1

        return grid

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "length": self.game.snake.length,
            "steps": self.steps,
            "phase": self.game.phase.value,
        }

    def render(self):
        """Renders current state."""
        if self.render_mode is None:
            return None

        if self.renderer is None:
            from .renderer import Renderer
            self.renderer = Renderer(
                grid_size=self.grid_size,
                cell_size=self.cell_size,
                render_mode=self.render_mode
            )

        return self.renderer.render(self.game.snapshot())

    def close(self):
        """Closes environment."""
        if self.renderer:
            self.renderer.close()
            self.renderer = None
