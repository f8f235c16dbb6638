"""
Game state and the per-tick update rule.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .apple import AppleSpawner
from .collision import CollisionKind, classify, in_bounds
from .direction import Direction, is_reversal
from .input_queue import InputQueue
from .snake import START_BODY, Snake
from .speed import SpeedController

Cell = Tuple[int, int]

START_APPLE: Cell = (10, 10)

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game for renderers."""
    body: Tuple[Cell, ...]
    apple: Optional[Cell]
    score: int
    direction: Direction
    phase: GamePhase
    progressive: bool
    ticks_per_second: float

    @property
    def game_over(self) -> bool:
        return self.phase is not GamePhase.PLAYING

    @property
    def length(self) -> int:
        return len(self.body)


class GameState:
    """
    Authoritative state of one snake game.

    Each logical tick:
        1. apply the next buffered direction (if not a reversal)
        2. move the head one cell
        3. check wall/self collision -> GAME_OVER
        4. eat the apple (grow, score, respawn) or drop the tail

    The state is owned by the caller; several instances can run side by side.
    """

    def __init__(
        self,
        body: Iterable[Cell] = START_BODY,
        direction: Direction = Direction.RIGHT,
        apple: Optional[Cell] = START_APPLE,
        speed: Optional[SpeedController] = None,
        spawner: Optional[AppleSpawner] = None,
        max_buffer_size: int = 2,
    ):
        """
        Args:
            body: starting cells, head first
            direction: starting direction
            apple: starting apple cell
            speed: tick pacing (default: progressive)
            spawner: apple placement (default: unseeded)
            max_buffer_size: pending input limit
        """
        self.snake = Snake(body)
        self.direction = direction
        self.apple = apple
        self.speed = speed if speed is not None else SpeedController()
        self.spawner = spawner if spawner is not None else AppleSpawner()
        self.inputs = InputQueue(max_buffer_size)

        self.score: int = 0
        self.ticks: int = 0
        self.phase = GamePhase.PLAYING
        self.collision: Optional[CollisionKind] = None

    @classmethod
    def for_arena(
        cls,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        **kwargs,
    ) -> "GameState":
        """
        Creates a fresh game whose starting apple fits the arena.

        The usual (10, 10) apple is kept when it is inside the arena and off
        the body, otherwise a free cell is drawn.
        """
        if "spawner" not in kwargs:
            kwargs["spawner"] = AppleSpawner(rng)
        state = cls(**kwargs)

        apple = state.apple
        if apple is None or not in_bounds(apple, width, height) or apple in state.snake:
            state.apple = state.spawner.respawn(state.snake, None, width, height)
        if state.apple is None:
            state.phase = GamePhase.BOARD_FULL
        return state

    @property
    def body(self) -> Tuple[Cell, ...]:
        return tuple(self.snake.body)

    @property
    def game_over(self) -> bool:
        """True once the game reached a terminal phase."""
        return self.phase is not GamePhase.PLAYING

    @property
    def progressive(self) -> bool:
        return self.speed.progressive

    def enqueue_direction(self, candidate: Direction) -> bool:
        """Buffers a direction change for an upcoming tick."""
        if self.game_over:
            return False
        return self.inputs.try_enqueue(candidate, self.direction)

    def toggle_progressive_speed(self) -> bool:
        """Flips between fixed and progressive speed; returns the new flag."""
        self.speed.toggle()
        return self.progressive

    def advance(self, elapsed: float, width: int, height: int) -> bool:
        """
        Feeds elapsed time in and runs a tick when one is due.

        Args:
            elapsed: seconds since the previous call
            width, height: arena size in cells

        Returns:
            True if a tick ran
        """
        if self.game_over:
            return False
        if not self.speed.advance(elapsed, self.score):
            return False
        self.tick(width, height)
        return True

    def tick(self, width: int, height: int) -> None:
        """Runs one logical tick regardless of the clock."""
        if self.game_over:
            return

        self.ticks += 1

        # Input is applied before moving, movement before collision/apple
        queued = self.inputs.dequeue_next()
        if queued is not None and not is_reversal(self.direction, queued):
            if queued is not self.direction:
                logger.debug("Direction %s -> %s", self.direction.name, queued.name)
            self.direction = queued

        new_head = self.snake.push_head(self.direction)

        collision = classify(self.snake.body, width, height)
        if collision is not None:
            self.collision = collision
            self.phase = GamePhase.GAME_OVER
            logger.info("Game over (%s collision) at tick %d with score %d",
                        collision.value, self.ticks, self.score)
            return

        if new_head == self.apple:
            self.score += 1
            logger.info("Apple eaten at %s, score %d", new_head, self.score)
            self.apple = self.spawner.respawn(self.snake, self.apple, width, height)
            if self.apple is None:
                self.phase = GamePhase.BOARD_FULL
                logger.info("Board full at tick %d with score %d", self.ticks, self.score)
        else:
            self.snake.drop_tail()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            body=self.body,
            apple=self.apple,
            score=self.score,
            direction=self.direction,
            phase=self.phase,
            progressive=self.progressive,
            ticks_per_second=self.speed.ticks_per_second(self.score),
        )
