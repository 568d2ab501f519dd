"""
Domain entities for the terminal snake game engine.

This module contains the core game entities and rules that are
independent of the terminal (curses) and of wall-clock time.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, QUIT
from .snake import Snake
from .game_state import GameState
from .growth_timer import GrowthTimer
from .rules import update_snake, wrap_head, check_collision

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'QUIT',
    'Snake',
    'GameState',
    'GrowthTimer',
    'update_snake', 'wrap_head', 'check_collision',
]
