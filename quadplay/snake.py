"""Snake on a square grid: steering, growing and dying."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum
from typing import Optional

Point = tuple[int, int]

SQUARES = 16
START_SPEED = 0.3
FRUIT_SCORE = 100
SPEEDUP = 0.9


class Direction(Enum):
    """Unit step of the snake's head."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeGame:
    """State of a snake game; time is passed in explicitly."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        now: float = 0.0,
        squares: int = SQUARES,
    ) -> None:
        if squares <= 0:
            raise ValueError("grid size must be positive")
        self._rng = rng if rng is not None else random.Random()
        self.squares = squares
        self.restart(now)

    def _random_fruit(self) -> Point:
        return (self._rng.randrange(self.squares), self._rng.randrange(self.squares))

    def restart(self, now: float) -> None:
        """Reset the snake, score and speed; the clock starts at now."""
        self.head: Point = (0, 0)
        self.body: deque[Point] = deque()
        self.direction = Direction.RIGHT
        self.fruit: Point = self._random_fruit()
        self.score = 0
        self.speed = START_SPEED
        self.last_update = now
        self.navigation_lock = False
        self.game_over = False

    def steer(self, direction: Direction) -> bool:
        """Turn the snake; refused when reversing, locked or game over."""
        if (
            self.game_over
            or self.navigation_lock
            or direction is self.direction.opposite
        ):
            return False
        self.direction = direction
        self.navigation_lock = True
        return True

    def tick(self) -> None:
        """Move the snake one square, eating and checking for death."""
        if self.game_over:
            return
        self.body.appendleft(self.head)
        dx, dy = self.direction.value
        self.head = (self.head[0] + dx, self.head[1] + dy)
        if self.head == self.fruit:
            self.fruit = self._random_fruit()
            self.score += FRUIT_SCORE
            self.speed *= SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True
        self.navigation_lock = False

    def update(self, now: float) -> bool:
        """Tick if more than `speed` seconds passed since the last move."""
        if self.game_over or now - self.last_update <= self.speed:
            return False
        self.last_update = now
        self.tick()
        return True