"""
Tick pacing: maps score and speed mode to a tick interval.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class SpeedMode(Enum):
    FIXED = "fixed"
    PROGRESSIVE = "progressive"


class SpeedController:
    """
    Gates logical ticks from a stream of elapsed-time deltas.

    In progressive mode the tick interval shrinks with score:
        multiplier = min(1 + score * speed_step, max_multiplier)
        interval = base_interval / multiplier
    """

    BASE_INTERVAL = 1.0 / 8   # seconds, 8 ticks per second
    SPEED_STEP = 0.1          # +10% speed per apple
    MAX_MULTIPLIER = 3.0

    def __init__(
        self,
        mode: SpeedMode = SpeedMode.PROGRESSIVE,
        base_interval: float = BASE_INTERVAL,
        speed_step: float = SPEED_STEP,
        max_multiplier: float = MAX_MULTIPLIER,
    ):
        if base_interval <= 0:
            raise ValueError(f"base_interval must be positive, got {base_interval}")
        if speed_step < 0:
            raise ValueError(f"speed_step must be >= 0, got {speed_step}")
        if max_multiplier < 1:
            raise ValueError(f"max_multiplier must be >= 1, got {max_multiplier}")

        self.mode = mode
        self.base_interval = base_interval
        self.speed_step = speed_step
        self.max_multiplier = max_multiplier
        self.accumulated = 0.0

    @property
    def progressive(self) -> bool:
        return self.mode is SpeedMode.PROGRESSIVE

    def multiplier(self, score: int) -> float:
        """Speed multiplier for the given score (1.0 in fixed mode)."""
        if not self.progressive:
            return 1.0
        return min(1.0 + score * self.speed_step, self.max_multiplier)

    def interval(self, score: int) -> float:
        """Seconds between logical ticks at the given score."""
        return self.base_interval / self.multiplier(score)

    def ticks_per_second(self, score: int) -> float:
        return 1.0 / self.interval(score)

    def advance(self, elapsed: float, score: int) -> bool:
        """
        Accumulates elapsed time.

        Returns:
            True if a tick is due (the accumulator is then reset to zero)
        """
        if elapsed < 0:
            raise ValueError(f"elapsed time must be >= 0, got {elapsed}")

        self.accumulated += elapsed
        if self.accumulated >= self.interval(score):
            self.accumulated = 0.0
            return True
        return False

    def toggle(self) -> SpeedMode:
        """Switches between fixed and progressive mode."""
        if self.progressive:
            self.mode = SpeedMode.FIXED
        else:
            self.mode = SpeedMode.PROGRESSIVE
        logger.info("Speed mode: %s", self.mode.value)
        return self.mode
