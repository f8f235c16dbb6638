"""
Module with the apple spawner.
"""

import logging
import random
from typing import Iterable, Optional, Tuple

Cell = Tuple[int, int]

logger = logging.getLogger(__name__)


class AppleSpawner:
    """Places the apple on a random free cell."""

    MAX_ATTEMPTS = 64
    DENSE_THRESHOLD = 0.5

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_ATTEMPTS,
        dense_threshold: float = DENSE_THRESHOLD,
    ):
        """
        Args:
            rng: random source (seeded or stubbed in tests)
            max_attempts: rejection samples before falling back to free cells
            dense_threshold: occupied fraction at which sampling goes straight
                to the free-cell list
        """
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.dense_threshold = dense_threshold

    def respawn(
        self,
        body: Iterable[Cell],
        current_apple: Optional[Cell],
        width: int,
        height: int,
    ) -> Optional[Cell]:
        """
        Picks a cell for the next apple.

        Args:
            body: snake cells
            current_apple: apple being replaced (never reused)
            width, height: arena size in cells

        Returns:
            Free cell, or None if the board is full
        """
        occupied = set(body)
        if current_apple is not None:
            occupied.add(current_apple)

        total = width * height
        if len(occupied) < total * self.dense_threshold:
            for _ in range(self.max_attempts):
                candidate = (self.rng.randrange(width), self.rng.randrange(height))
                if candidate not in occupied:
                    return candidate

        free_positions = [
            (x, y)
            for x in range(width)
            for y in range(height)
            if (x, y) not in occupied
        ]

        if not free_positions:
            logger.info("No free cell left for an apple")
            return None

        return self.rng.choice(free_positions)
