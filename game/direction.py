"""
Module with the Direction enum and the reversal rule.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Movement directions (y grows downward)."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        """The 180-degree opposite direction."""
        return OPPOSITES[self]

    def step(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        """Returns the cell one grid unit away in this direction."""
        x, y = cell
        dx, dy = self.value
        return (x + dx, y + dy)


OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_reversal(reference: Direction, candidate: Direction) -> bool:
    """True iff candidate points exactly opposite to reference."""
    return OPPOSITES[reference] is candidate
