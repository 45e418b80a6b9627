"""Snake game rules: the board, the snake, food, scoring and speed."""

from __future__ import annotations

import random
from enum import Enum

FIELD_WIDTH = 20
FIELD_HEIGHT = 15
DOT_SIZE = 20

START_INTERVAL = 150
MIN_INTERVAL = 50
SPEEDUP_STEP = 10
SPEEDUP_EVERY = 5

START_BODY = ((5, 7), (5, 6), (5, 5))


class Direction(Enum):
    """Heading of the snake; y grows downwards."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return Direction((self.value + 2) % 4)

    def step(self, x: int, y: int) -> tuple[int, int]:
        """The cell one step from (x, y) in this direction."""
        dx, dy = _OFFSETS[self]
        return x + dx, y + dy


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Outcome(Enum):
    """What a single tick did."""

    IDLE = "idle"
    MOVED = "moved"
    ATE = "ate"
    DIED = "died"


class Game:
    """State of one snake game on a rectangular field."""

    def __init__(self, width=FIELD_WIDTH, height=FIELD_HEIGHT, rng=None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.snake: list[tuple[int, int]] = []
        self.food: tuple[int, int] | None = None
        self.direction = Direction.DOWN
        self.pending: Direction | None = None
        self.score = 0
        self.running = False
        self.interval = START_INTERVAL

    def start(self) -> None:
        """Reset the snake, score and speed and begin a new round."""
        self.snake = list(START_BODY)
        self.direction = Direction.DOWN
        self.pending = None
        self.score = 0
        self.interval = START_INTERVAL
        self._place_food()
        self.running = True

    def head(self) -> tuple[int, int]:
        """The cell occupied by the snake's head."""
        return self.snake[0]

    def steer(self, direction: Direction) -> bool:
        """Queue a turn for the next tick; reversing is refused.

        Returns True when the turn was queued.
        """
        if direction is self.direction or direction is self.direction.opposite():
            return False
        self.pending = direction
        return True

    def tick(self) -> Outcome:
        """Advance the snake by one cell."""
        if not self.running:
            return Outcome.IDLE

        if self.pending is not None:
            self.direction = self.pending
            self.pending = None

        new_head = self.direction.step(*self.head())
        self.snake.insert(0, new_head)

        if new_head == self.food:
            self.score += 1
            self._place_food()
            if self.score % SPEEDUP_EVERY == 0:
                self.interval = max(MIN_INTERVAL, self.interval - SPEEDUP_STEP)
            outcome = Outcome.ATE
        else:
            self.snake.pop()
            outcome = Outcome.MOVED

        if self._collided():
            self.running = False
            return Outcome.DIED
        return outcome

    def _collided(self) -> bool:
        x, y = self.head()
        if not (0 <= x < self.width and 0 <= y < self.height):
            return True
        return self.head() in self.snake[1:]

    def _place_food(self) -> None:
        occupied = set(self.snake)
        free = [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if (x, y) not in occupied
        ]
        self.food = self.rng.choice(free) if free else None


def head_triangle(cell, direction, dot_size=DOT_SIZE):
    """Pixel corners of the head triangle, tip first, pointing along direction."""
    x, y = cell[0] * dot_size, cell[1] * dot_size
    half = dot_size // 2
    far = dot_size
    if direction is Direction.UP:
        return [(x + half, y), (x, y + far), (x + far, y + far)]
    if direction is Direction.RIGHT:
        return [(x + far, y + half), (x, y), (x, y + far)]
    if direction is Direction.DOWN:
        return [(x + half, y + far), (x, y), (x + far, y)]
    return [(x, y + half), (x + far, y), (x + far, y + far)]


def food_diamond(cell, dot_size=DOT_SIZE):
    """Pixel corners of the diamond drawn for food: top, right, bottom, left."""
    x, y = cell[0] * dot_size, cell[1] * dot_size
    half = dot_size // 2
    return [
        (x + half, y),
        (x + dot_size, y + half),
        (x + half, y + dot_size),
        (x, y + half),
    ]