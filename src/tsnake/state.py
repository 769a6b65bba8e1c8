from __future__ import annotations

from collections import namedtuple
from enum import Enum

Point = namedtuple("Point", ["x", "y"])

Snapshot = namedtuple(
    "Snapshot",
    ["width", "height", "snake", "food", "score", "paused", "game_over"],
)
# snake: tuple[Point, ...], head is first element.
# food: Point


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> Point:
    return Point(a[0] + b[0], a[1] + b[1])


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def is_opposite(self, other: Direction) -> bool:
        return add_vectors(self.value, other.value) == (0, 0)


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_PAUSE = "toggle_pause"
    QUIT = "quit"
    NONE = "none"

    @property
    def direction(self) -> Direction | None:
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}
