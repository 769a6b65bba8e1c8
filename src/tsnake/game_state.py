from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Iterable

from . import config
from .logic import advance_head, hits_body, place_food
from .state import Direction, Point, Snapshot

logger = logging.getLogger(__name__)


class GameState:
    """Snake, food and flags for one game.

    The snake is a deque of points, head first. It never shrinks; eating
    appends a copy of the tail so the new segment fills in on the next step.
    """

    def __init__(
        self,
        width: int = config.GRID_WIDTH,
        height: int = config.GRID_HEIGHT,
        rng: random.Random | None = None,
        snake: Iterable[tuple[int, int]] | None = None,
        direction: Direction = Direction.RIGHT,
        food: tuple[int, int] | None = None,
    ):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()

        if snake is None:
            cx, cy = width // 2, height // 2
            snake = [(cx - i, cy) for i in range(config.INITIAL_SIZE)]
        self.snake: deque[Point] = deque(Point(x, y) for x, y in snake)
        self.initial_size = len(self.snake)

        self.direction = direction
        self.paused = False
        self.game_over = False

        self.food: Point | None = None
        if food is not None:
            self.food = Point(*food)
        else:
            self.place_food()

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def score(self) -> int:
        return self.length - self.initial_size

    def is_game_over(self) -> bool:
        return self.game_over

    def advance_head(self, direction: Direction | None = None) -> Point:
        if direction is None:
            direction = self.direction
        return advance_head(self.head, direction, self.width, self.height)

    def set_direction(self, requested: Direction) -> bool:
        """Returns True if the direction was accepted."""
        if self.paused or requested.is_opposite(self.direction):
            return False
        if requested is not self.direction:
            logger.debug("direction %s -> %s", self.direction.name, requested.name)
        self.direction = requested
        return True

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.debug("paused=%s", self.paused)
        return self.paused

    def place_food(self) -> Point | None:
        """Move food to a random free interior cell; keep it in place if none."""
        cell = place_food(self.snake, self.width, self.height, self.rng)
        if cell is None:
            logger.info("no free cell for food, keeping it at %s", self.food)
            return self.food
        self.food = cell
        logger.debug("food placed at %s", cell)
        return cell

    def step(self) -> None:
        if self.game_over:
            return

        new_head = self.advance_head()
        self.snake.appendleft(new_head)
        self.snake.pop()

        ate = new_head == self.food
        if ate:
            self.snake.append(self.snake[-1])

        if hits_body(self.snake):
            self.game_over = True
            logger.info("snake ran into itself at %s, score %d", new_head, self.score)

        if ate:
            self.place_food()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            width=self.width,
            height=self.height,
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            paused=self.paused,
            game_over=self.game_over,
        )

    def __repr__(self):
        return (
            f"<GameState head={self.head}, length={self.length}, food={self.food}, "
            f"direction={self.direction.name}, paused={self.paused}, game_over={self.game_over}>"
        )
