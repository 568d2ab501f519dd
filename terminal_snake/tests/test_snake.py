"""
Tests for the Snake entity.
"""

import os
import sys
from collections import deque

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.snake import Snake  # noqa: E402


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position."""
        snake = Snake([(5, 5)])
        assert list(snake.positions) == [(5, 5)]
        assert len(snake) == 1

    def test_snake_initialization_with_multiple_positions(self):
        """Snake initializes with multiple positions (body segments)."""
        positions = [(5, 5), (6, 5), (7, 5)]
        snake = Snake(positions)
        assert list(snake.positions) == positions

    def test_snake_requires_a_segment(self):
        """An empty body is rejected."""
        with pytest.raises(ValueError):
            Snake([])

    def test_snake_head_and_tail_properties(self):
        snake = Snake([(5, 5), (6, 5), (7, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (7, 5)

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_horizontal_lays_body_to_the_right_of_head(self):
        snake = Snake.horizontal((20, 10), 5)
        assert snake.snapshot() == [(20, 10), (21, 10), (22, 10), (23, 10), (24, 10)]

    def test_horizontal_rejects_zero_length(self):
        with pytest.raises(ValueError):
            Snake.horizontal((20, 10), 0)

    def test_extend_duplicates_tail(self):
        """Growth appends one segment sitting on the current tail."""
        snake = Snake([(5, 5), (6, 5), (7, 5)])
        snake.extend()
        assert len(snake) == 4
        assert snake.positions[-1] == (7, 5)
        assert snake.positions[-2] == (7, 5)

    def test_snapshot_is_a_copy(self):
        snake = Snake([(5, 5), (6, 5)])
        snap = snake.snapshot()
        snake.extend()
        assert snap == [(5, 5), (6, 5)]
