from __future__ import annotations

import random
from collections.abc import Iterable
from itertools import islice

from .state import Direction, Point, add_vectors


def advance_head(head: Point, direction: Direction, width: int, height: int) -> Point:
    """Step one cell and tunnel through the border ring.

    Only exact for single-cell steps: landing on or past the ring maps to the
    far interior edge (``x <= 0 -> width - 2``, ``x >= width - 1 -> 1``).
    """
    x, y = add_vectors(head, direction.value)
    if x <= 0:
        x = width - 2
    elif x >= width - 1:
        x = 1
    if y <= 0:
        y = height - 2
    elif y >= height - 1:
        y = 1
    return Point(x, y)


def hits_body(snake) -> bool:
    head = snake[0]
    return any(segment == head for segment in islice(snake, 1, None))


def free_cells(occupied: Iterable[Point], width: int, height: int) -> list[Point]:
    taken = set(occupied)
    return [
        Point(x, y)
        for y in range(1, height - 1)
        for x in range(1, width - 1)
        if (x, y) not in taken
    ]


def place_food(
    occupied: Iterable[Point],
    width: int,
    height: int,
    rng: random.Random,
) -> Point | None:
    """Pick a uniformly random interior cell off the snake, or None if full."""
    cells = free_cells(occupied, width, height)
    if not cells:
        return None
    return rng.choice(cells)
