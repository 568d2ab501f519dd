"""
GameState entity - everything the loop mutates from tick to tick.
"""

from .constants import BORDER_GLYPH, EMPTY_GLYPH, INITIAL_DIRECTION, SNAKE_GLYPH, VALID_MOVES
from .growth_timer import GrowthTimer
from .snake import Snake


class GameState:
    """
    The live state of a single game.

    Attributes:
        snake: the player's snake
        direction: current movement direction (UP, DOWN, LEFT or RIGHT)
        growth_timer: tracks the last growth timestamp
        max_x, max_y: terminal width and height, fixed for the session
        game_over: set once the snake runs into itself
        quit_requested: set when the player presses the quit key
        tick: number of completed ticks
    """

    def __init__(
        self,
        snake: Snake,
        growth_timer: GrowthTimer,
        max_x: int,
        max_y: int,
        direction: str = INITIAL_DIRECTION,
    ):
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")
        self.snake = snake
        self.direction = direction
        self.growth_timer = growth_timer
        self.max_x = max_x
        self.max_y = max_y
        self.game_over = False
        self.quit_requested = False
        self.tick = 0

    @property
    def running(self) -> bool:
        return not (self.game_over or self.quit_requested)

    def print_board(self) -> str:
        """
        Returns a string representation of the frame with:
        # = border
        O = snake segment
        Rows are printed top to bottom, matching the terminal.
        """
        board = [[EMPTY_GLYPH for _ in range(self.max_x)] for _ in range(self.max_y)]

        for x, y in self.snake.positions:
            if 0 <= x < self.max_x and 0 <= y < self.max_y:
                board[y][x] = SNAKE_GLYPH

        for x in range(self.max_x):
            board[0][x] = BORDER_GLYPH
            board[self.max_y - 1][x] = BORDER_GLYPH
        for y in range(self.max_y):
            board[y][0] = BORDER_GLYPH
            board[y][self.max_x - 1] = BORDER_GLYPH

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, direction={self.direction}, "
            f"length={len(self.snake)}, game_over={self.game_over}>"
        )
