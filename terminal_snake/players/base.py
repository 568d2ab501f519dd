"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for steering logic.

    A player turns the key polled this tick into the snake's next
    direction.
    """

    def get_move(self, game_state: GameState, key: Optional[str]) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game
            key: Key token polled this tick, or None if nothing was pressed

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
