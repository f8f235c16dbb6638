"""
Module with the Snake body.
"""

from collections import deque
from typing import Iterable, List, Tuple

from .direction import Direction

Cell = Tuple[int, int]

# Starting body used by a fresh game: head first, facing right.
START_BODY: List[Cell] = [(5, 3), (4, 3), (3, 3)]


class Snake:
    """Ordered snake body, head at index 0."""

    def __init__(self, cells: Iterable[Cell] = START_BODY):
        """
        Args:
            cells: body cells from head to tail
        """
        self.body: deque = deque(tuple(cell) for cell in cells)
        if not self.body:
            raise ValueError("snake body must contain at least one cell")

    @property
    def head(self) -> Cell:
        """Head position."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        """Tail position."""
        return self.body[-1]

    @property
    def length(self) -> int:
        """Snake length."""
        return len(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __contains__(self, cell) -> bool:
        return cell in self.body

    def push_head(self, direction: Direction) -> Cell:
        """
        Prepends a new head one cell away in direction.

        The tail is left in place; call drop_tail() unless the snake grows.

        Returns:
            New head position
        """
        new_head = direction.step(self.head)
        self.body.appendleft(new_head)
        return new_head

    def drop_tail(self) -> Cell:
        """Removes and returns the tail cell."""
        return self.body.pop()
