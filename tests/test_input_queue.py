"""
Unit tests for the input queue.
"""

import pytest

from game.direction import Direction
from game.input_queue import InputQueue


class TestInputQueue:
    def setup_method(self):
        self.queue = InputQueue(max_buffer_size=2)

    def test_empty_dequeue(self):
        assert self.queue.dequeue_next() is None

    def test_rejects_reversal_of_current(self):
        assert not self.queue.try_enqueue(Direction.LEFT, Direction.RIGHT)
        assert len(self.queue) == 0

    def test_accepts_turn(self):
        assert self.queue.try_enqueue(Direction.UP, Direction.RIGHT)
        assert self.queue.dequeue_next() is Direction.UP

    def test_accepts_same_direction(self):
        assert self.queue.try_enqueue(Direction.RIGHT, Direction.RIGHT)
        assert len(self.queue) == 1

    def test_validates_against_last_queued(self):
        # RIGHT -> UP queued, LEFT is then a legal turn from UP
        assert self.queue.try_enqueue(Direction.UP, Direction.RIGHT)
        assert self.queue.try_enqueue(Direction.LEFT, Direction.RIGHT)
        assert list(self.queue) == [Direction.UP, Direction.LEFT]

    def test_rejects_reversal_of_last_queued(self):
        assert self.queue.try_enqueue(Direction.UP, Direction.RIGHT)
        assert not self.queue.try_enqueue(Direction.DOWN, Direction.RIGHT)
        assert list(self.queue) == [Direction.UP]

    def test_soft_cap_drops_oldest(self):
        self.queue.try_enqueue(Direction.UP, Direction.RIGHT)
        self.queue.try_enqueue(Direction.LEFT, Direction.RIGHT)
        assert self.queue.try_enqueue(Direction.DOWN, Direction.RIGHT)
        assert len(self.queue) == 2
        assert list(self.queue) == [Direction.LEFT, Direction.DOWN]

    def test_fifo_order(self):
        self.queue.try_enqueue(Direction.UP, Direction.RIGHT)
        self.queue.try_enqueue(Direction.LEFT, Direction.RIGHT)
        assert self.queue.dequeue_next() is Direction.UP
        assert self.queue.dequeue_next() is Direction.LEFT
        assert self.queue.dequeue_next() is None

    def test_last(self):
        assert self.queue.last is None
        self.queue.try_enqueue(Direction.DOWN, Direction.LEFT)
        assert self.queue.last is Direction.DOWN

    def test_clear(self):
        self.queue.try_enqueue(Direction.UP, Direction.RIGHT)
        self.queue.clear()
        assert len(self.queue) == 0

    def test_invalid_buffer_size(self):
        with pytest.raises(ValueError):
            InputQueue(max_buffer_size=0)
