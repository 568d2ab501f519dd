"""
Keyboard player - maps polled key tokens to movement directions.
"""

from typing import Optional

from domain.constants import QUIT, VALID_MOVES
from domain.game_state import GameState
from .base import Player


def get_new_direction(key: Optional[str], current_direction: str) -> str:
    """
    Resolve the direction for this tick.

    Arrow keys select their direction; no key or any other key keeps the
    current one. Reversals are not filtered out.
    """
    if key in VALID_MOVES:
        return key
    return current_direction


def is_quit(key: Optional[str]) -> bool:
    return key == QUIT


class KeyboardPlayer(Player):
    """
    Human player steering with the arrow keys.
    """

    def get_move(self, game_state: GameState, key: Optional[str]) -> str:
        return get_new_direction(key, game_state.direction)
