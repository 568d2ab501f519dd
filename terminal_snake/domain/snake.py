"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)

    @classmethod
    def horizontal(cls, head: Tuple[int, int], length: int) -> "Snake":
        """Build a straight snake with the head on the left and the body trailing right."""
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}.")
        hx, hy = head
        return cls([(hx + i, hy) for i in range(length)])

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def extend(self) -> None:
        """Grow by one segment stacked on the current tail."""
        self.positions.append(self.tail)

    def snapshot(self) -> List[Tuple[int, int]]:
        return list(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self)}, head={self.head}>"
