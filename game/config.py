"""
Game configuration loaded from YAML.

Layout of configs/game.yaml:

    arena:    {width, height}
    speed:    {progressive, base_ticks_per_second, speed_step, max_multiplier}
    input:    {max_buffer_size}
    display:  {cell_size, updates_per_second}
    seed:     optional int
"""

import random
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .apple import AppleSpawner
from .snake import START_BODY
from .speed import SpeedController, SpeedMode
from .state import GameState


@dataclass
class GameConfig:
    """Settings shared between the core, the renderer and the drivers."""
    width: int = 16
    height: int = 16
    progressive: bool = True
    base_ticks_per_second: float = 8.0
    speed_step: float = SpeedController.SPEED_STEP
    max_multiplier: float = SpeedController.MAX_MULTIPLIER
    max_buffer_size: int = 2
    cell_size: int = 30
    updates_per_second: int = 60
    seed: Optional[int] = None

    def __post_init__(self):
        min_x = max(x for x, _ in START_BODY) + 1
        min_y = max(y for _, y in START_BODY) + 1
        if self.width < min_x or self.height < min_y:
            raise ValueError(
                f"arena {self.width}x{self.height} is too small for the "
                f"starting snake (needs at least {min_x}x{min_y})"
            )
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.base_ticks_per_second <= 0:
            raise ValueError("base_ticks_per_second must be positive")
        if self.speed_step < 0:
            raise ValueError(f"speed_step must be >= 0, got {self.speed_step}")
        if self.max_multiplier < 1:
            raise ValueError(f"max_multiplier must be >= 1, got {self.max_multiplier}")
        if self.updates_per_second <= 0:
            raise ValueError("updates_per_second must be positive")
        if self.max_buffer_size < 1:
            raise ValueError("max_buffer_size must be >= 1")

    @property
    def grid_size(self):
        return (self.width, self.height)

    @classmethod
    def from_dict(cls, config: Optional[dict]) -> "GameConfig":
        """Builds a config from the nested YAML dict; missing keys use defaults."""
        config = config or {}
        arena = config.get("arena") or {}
        speed = config.get("speed") or {}
        inputs = config.get("input") or {}
        display = config.get("display") or {}
        defaults = {f.name: f.default for f in fields(cls)}

        def pick(section, key):
            return section.get(key, defaults[key])

        return cls(
            width=int(pick(arena, "width")),
            height=int(pick(arena, "height")),
            progressive=bool(pick(speed, "progressive")),
            base_ticks_per_second=float(pick(speed, "base_ticks_per_second")),
            speed_step=float(pick(speed, "speed_step")),
            max_multiplier=float(pick(speed, "max_multiplier")),
            max_buffer_size=int(pick(inputs, "max_buffer_size")),
            cell_size=int(pick(display, "cell_size")),
            updates_per_second=int(pick(display, "updates_per_second")),
            seed=config.get("seed"),
        )

    def make_speed(self) -> SpeedController:
        mode = SpeedMode.PROGRESSIVE if self.progressive else SpeedMode.FIXED
        return SpeedController(
            mode=mode,
            base_interval=1.0 / self.base_ticks_per_second,
            speed_step=self.speed_step,
            max_multiplier=self.max_multiplier,
        )

    def new_game(self, rng: Optional[random.Random] = None) -> GameState:
        """Creates a fresh game for this arena."""
        if rng is None:
            rng = random.Random(self.seed)
        return GameState.for_arena(
            self.width,
            self.height,
            spawner=AppleSpawner(rng),
            speed=self.make_speed(),
            max_buffer_size=self.max_buffer_size,
        )


def load_config(path: Optional[str] = None) -> GameConfig:
    """Reads a YAML config file; None gives the defaults."""
    if path is None:
        return GameConfig()
    with open(path) as f:
        return GameConfig.from_dict(yaml.safe_load(f))
