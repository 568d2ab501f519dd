"""
Tests for key-to-direction resolution.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from domain.growth_timer import GrowthTimer  # noqa: E402
from domain.snake import Snake  # noqa: E402
from players.base import Player  # noqa: E402
from players.keyboard_player import KeyboardPlayer, get_new_direction, is_quit  # noqa: E402


class TestGetNewDirection:

    @pytest.mark.parametrize("key", [UP, DOWN, LEFT, RIGHT])
    def test_arrow_keys_select_direction(self, key):
        assert get_new_direction(key, LEFT) == key

    def test_no_key_keeps_direction(self):
        direction = RIGHT
        for _ in range(10):
            direction = get_new_direction(None, direction)
        assert direction == RIGHT

    @pytest.mark.parametrize("key", ["120", "32", QUIT, ""])
    def test_other_keys_are_ignored(self, key):
        assert get_new_direction(key, DOWN) == DOWN

    def test_reversal_is_allowed(self):
        assert get_new_direction(LEFT, RIGHT) == LEFT


def test_is_quit():
    assert is_quit(QUIT) is True
    assert is_quit(None) is False
    assert is_quit(UP) is False


def test_keyboard_player_uses_state_direction():
    state = GameState(
        snake=Snake([(5, 5), (6, 5)]),
        growth_timer=GrowthTimer(0.0),
        max_x=40,
        max_y=20,
        direction=UP,
    )
    player = KeyboardPlayer()

    assert player.get_move(state, None) == UP
    assert player.get_move(state, RIGHT) == RIGHT


def test_base_player_is_abstract():
    with pytest.raises(NotImplementedError):
        Player().get_move(None, None)
