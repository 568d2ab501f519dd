"""
Movement, screen-wrap and collision rules applied once per tick.
"""

from typing import Tuple

from .constants import DIRECTION_DELTAS
from .snake import Snake


def next_head(head: Tuple[int, int], direction: str) -> Tuple[int, int]:
    """Return the cell one step from head along direction."""
    try:
        dx, dy = DIRECTION_DELTAS[direction]
    except KeyError:
        raise ValueError(f"Unknown direction: {direction!r}") from None
    return (head[0] + dx, head[1] + dy)


def update_snake(snake: Snake, direction: str) -> None:
    """
    Advance the snake one cell.

    Every body segment takes the place of the one in front of it, then the
    head steps from its old position. Because the neck ends up on the old
    head cell, reversing straight back onto it is a self-collision.
    """
    new_head = next_head(snake.head, direction)
    snake.positions.appendleft(new_head)
    snake.positions.pop()


def wrap_head(snake: Snake, max_x: int, max_y: int) -> None:
    """
    Teleport the head back inside the border when it lands on or past it.

    The border occupies column/row 0 and max_x - 1 / max_y - 1, so the
    playable area is 1..max_x - 2 by 1..max_y - 2. Only the head moves;
    the body catches up on later ticks.
    """
    x, y = snake.head

    if x <= 0:
        x = max_x - 2
    elif x >= max_x - 1:
        x = 1

    if y <= 0:
        y = max_y - 2
    elif y >= max_y - 1:
        y = 1

    snake.positions[0] = (x, y)


def check_collision(snake: Snake) -> bool:
    """Return True if the head sits on any other segment."""
    head = snake.head
    for i in range(1, len(snake.positions)):
        if snake.positions[i] == head:
            return True
    return False
