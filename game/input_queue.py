"""
Buffered direction input with reversal prevention.
"""

import logging
from collections import deque
from typing import Iterator, Optional

from .direction import Direction, is_reversal

logger = logging.getLogger(__name__)


class InputQueue:
    """
    Bounded FIFO of pending direction changes.

    Each candidate is validated against the last queued direction (or the
    current direction when nothing is queued), so a quick burst such as
    UP then LEFT while moving RIGHT is accepted, while RIGHT -> LEFT is not.
    """

    def __init__(self, max_buffer_size: int = 2):
        """
        Args:
            max_buffer_size: max pending directions; older ones are dropped
        """
        if max_buffer_size < 1:
            raise ValueError(f"max_buffer_size must be >= 1, got {max_buffer_size}")
        self.max_buffer_size = max_buffer_size
        self._pending: deque = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[Direction]:
        return iter(tuple(self._pending))

    @property
    def last(self) -> Optional[Direction]:
        """Most recently queued direction, if any."""
        return self._pending[-1] if self._pending else None

    def try_enqueue(self, candidate: Direction, current: Direction) -> bool:
        """
        Queues candidate unless it reverses the reference direction.

        Args:
            candidate: requested direction
            current: direction the snake is moving in right now

        Returns:
            True if the candidate was queued
        """
        reference = self._pending[-1] if self._pending else current
        if is_reversal(reference, candidate):
            logger.debug("Rejected %s: reverses %s", candidate.name, reference.name)
            return False

        self._pending.append(candidate)
        # Soft cap: the newest input always gets in, the oldest falls out
        if len(self._pending) > self.max_buffer_size:
            dropped = self._pending.popleft()
            logger.debug("Input buffer full, dropped %s", dropped.name)
        return True

    def dequeue_next(self) -> Optional[Direction]:
        """Pops the oldest pending direction, or None if empty."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def clear(self) -> None:
        self._pending.clear()
