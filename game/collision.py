"""
Wall and self collision checks.
"""

from enum import Enum
from itertools import islice
from typing import Optional, Sequence, Tuple


class CollisionKind(Enum):
    WALL = "wall"
    SELF = "self"


def in_bounds(cell: Tuple[int, int], width: int, height: int) -> bool:
    """Checks if cell lies within [0, width) x [0, height)."""
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def classify(body: Sequence[Tuple[int, int]], width: int,
             height: int) -> Optional[CollisionKind]:
    """
    Determines whether the head collided and with what.

    Args:
        body: cells from head to tail
        width, height: arena size in cells

    Returns:
        CollisionKind.WALL, CollisionKind.SELF, or None
    """
    head = body[0]
    if not in_bounds(head, width, height):
        return CollisionKind.WALL
    if head in islice(body, 1, None):
        return CollisionKind.SELF
    return None


def detect(body: Sequence[Tuple[int, int]], width: int, height: int) -> bool:
    """True if the head is outside the arena or on another body cell."""
    return classify(body, width, height) is not None
