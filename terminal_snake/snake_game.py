#!/usr/bin/env python3
"""
Terminal snake - steer with the arrow keys, press q to quit.

The snake grows by one segment every few seconds and wraps around the
screen edges; the game ends when it runs into itself.

Usage:
    python snake_game.py

Environment:
    LOG_LEVEL       logging level (default: WARNING)
    SNAKE_LOG_FILE  write logs to this file instead of stderr
"""

import logging
import os
import sys
import time
from typing import Callable, Optional

from dotenv import load_dotenv

from domain.constants import (
    BORDER_GLYPH,
    EXTEND_INTERVAL,
    GAME_OVER_SECONDS,
    GAME_OVER_TEXT,
    INITIAL_SNAKE_LENGTH,
    MIN_HEIGHT,
    MIN_WIDTH,
    SNAKE_GLYPH,
    SPLASH_SECONDS,
    SPLASH_TEXT,
    TICK_SECONDS,
)
from domain.game_state import GameState
from domain.growth_timer import GrowthTimer
from domain.rules import check_collision, update_snake, wrap_head
from domain.snake import Snake
from players.base import Player
from players.keyboard_player import KeyboardPlayer, is_quit
from services.curses_surface import open_curses_surface
from services.surface import Surface, SurfaceError

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - The rendering surface and its fixed bounds
      - The snake and its direction
      - The growth timer
      - The tick loop, splash and game-over screens

    The clock and sleep functions are injectable so the loop can run on
    simulated time.
    """

    def __init__(
        self,
        surface: Surface,
        player: Optional[Player] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        tick_seconds: float = TICK_SECONDS,
        extend_interval: float = EXTEND_INTERVAL,
        initial_length: int = INITIAL_SNAKE_LENGTH,
    ):
        self.surface = surface
        self.player = player if player is not None else KeyboardPlayer()
        self.clock = clock
        self.sleep = sleep
        self.tick_seconds = tick_seconds
        self.extend_interval = extend_interval
        self.initial_length = initial_length

        # Bounds are queried once; resizing is not tracked
        self.max_x, self.max_y = surface.get_bounds()
        if self.max_x < MIN_WIDTH or self.max_y < MIN_HEIGHT:
            raise SurfaceError(
                f"Terminal too small: {self.max_x}x{self.max_y}, "
                f"need at least {MIN_WIDTH}x{MIN_HEIGHT}."
            )
        logger.info(f"Terminal bounds: {self.max_x}x{self.max_y}")

        self.state: Optional[GameState] = None

    def new_state(self) -> GameState:
        """
        Lay the snake out as a horizontal line starting at the centre of the
        screen, head on the left, and start the growth timer.
        """
        snake = Snake.horizontal((self.max_x // 2, self.max_y // 2), self.initial_length)
        timer = GrowthTimer.started_now(self.clock, self.extend_interval)
        return GameState(snake=snake, growth_timer=timer, max_x=self.max_x, max_y=self.max_y)

    def show_splash_screen(self):
        self.surface.clear()
        self.surface.draw_text((self.max_x - len(SPLASH_TEXT)) // 2, self.max_y // 3, SPLASH_TEXT)
        self.surface.flush()
        self.sleep(SPLASH_SECONDS)
        self.surface.clear()

    def show_game_over(self):
        self.surface.draw_text((self.max_x - len(GAME_OVER_TEXT)) // 2, self.max_y // 2, GAME_OVER_TEXT)
        self.surface.flush()
        self.sleep(GAME_OVER_SECONDS)

    def draw_border(self):
        for x in range(self.max_x):
            self.surface.draw_cell(x, 0, BORDER_GLYPH)
            self.surface.draw_cell(x, self.max_y - 1, BORDER_GLYPH)
        for y in range(self.max_y):
            self.surface.draw_cell(0, y, BORDER_GLYPH)
            self.surface.draw_cell(self.max_x - 1, y, BORDER_GLYPH)

    def run_tick(self):
        """
        Execute one tick:
          1) Poll the keyboard; stop here on quit
          2) Resolve the direction from the key
          3) Erase the snake, move it, wrap the head
          4) Stop on self-collision
          5) Draw snake and border, flush
          6) Grow if the interval has elapsed
          7) Sleep for the tick duration
        """
        state = self.state
        if not state.running:
            logger.warning("Game is already over. No more ticks.")
            return

        key = self.surface.poll_key()
        if is_quit(key):
            state.quit_requested = True
            logger.info(f"Quit requested at tick {state.tick}")
            return

        state.direction = self.player.get_move(state, key)

        for x, y in state.snake.positions:
            self.surface.clear_cell(x, y)

        update_snake(state.snake, state.direction)
        wrap_head(state.snake, self.max_x, self.max_y)

        if check_collision(state.snake):
            state.game_over = True
            logger.info(
                f"Collision at {state.snake.head} on tick {state.tick}, "
                f"length {len(state.snake)}"
            )
            return

        for x, y in state.snake.positions:
            self.surface.draw_cell(x, y, SNAKE_GLYPH)
        self.draw_border()
        self.surface.flush()

        state.growth_timer.maybe_extend(state.snake, self.clock())

        state.tick += 1
        self.sleep(self.tick_seconds)

    def run(self) -> GameState:
        """Play one game from the splash screen to quit or game over."""
        self.show_splash_screen()
        self.state = self.new_state()
        logger.debug(f"Initial snake: {self.state.snake.snapshot()}")

        while self.state.running:
            self.run_tick()

        if self.state.game_over:
            logger.debug("Final frame:\n" + self.state.print_board())
            self.show_game_over()

        return self.state


def run_game(surface: Surface, **game_params) -> GameState:
    """
    Runs a single game on an already opened surface.

    Args:
        surface: The rendering surface to draw on and poll keys from.
        **game_params: Forwarded to SnakeGame (clock, sleep, tick_seconds, ...).

    Returns:
        The final GameState.
    """
    game = SnakeGame(surface, **game_params)
    return game.run()


def configure_logging():
    log_file = os.getenv("SNAKE_LOG_FILE") or None
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=log_file,
    )


def main() -> int:
    load_dotenv()
    configure_logging()

    try:
        with open_curses_surface() as surface:
            state = run_game(surface)
    except SurfaceError as e:
        logger.error(f"Could not start the game: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 0
    except Exception:
        logger.exception("Fatal error during the game")
        return 1

    outcome = "game over" if state.game_over else "quit"
    logger.info(f"Finished after {state.tick} ticks ({outcome}), length {len(state.snake)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
