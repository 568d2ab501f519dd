"""
Player implementations for terminal snake.

This module contains the player abstraction and the keyboard player
that turns polled keys into snake movement.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, get_new_direction, is_quit

__all__ = [
    'Player',
    'KeyboardPlayer',
    'get_new_direction',
    'is_quit',
]
