"""
Curses-backed rendering surface.

Usage:
    with open_curses_surface() as surface:
        run_game(surface)
"""

import curses
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from domain.constants import DOWN, EMPTY_GLYPH, LEFT, QUIT, RIGHT, UP
from services.surface import Surface, SurfaceError

logger = logging.getLogger(__name__)

KEY_MAP = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord('q'): QUIT,
}


class CursesSurface(Surface):
    """Draws onto a curses window configured for non-blocking input."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def get_bounds(self) -> Tuple[int, int]:
        max_y, max_x = self.stdscr.getmaxyx()
        return max_x, max_y

    def poll_key(self) -> Optional[str]:
        ch = self.stdscr.getch()
        if ch == -1:
            return None
        return KEY_MAP.get(ch, str(ch))

    def clear(self) -> None:
        self.stdscr.clear()

    def clear_cell(self, x: int, y: int) -> None:
        self.draw_text(x, y, EMPTY_GLYPH)

    def draw_cell(self, x: int, y: int, glyph: str) -> None:
        self.draw_text(x, y, glyph)

    def draw_text(self, x: int, y: int, text: str) -> None:
        try:
            self.stdscr.addstr(y, x, text)
        except curses.error:
            pass  # writing the bottom-right cell moves the cursor off-screen

    def flush(self) -> None:
        self.stdscr.refresh()


@contextmanager
def open_curses_surface() -> Iterator[CursesSurface]:
    """
    Put the terminal into game mode and hand back a surface.

    The terminal is restored when the block exits, whether the game was
    quit, lost, or interrupted by an exception.
    """
    try:
        stdscr = curses.initscr()
    except curses.error as e:
        raise SurfaceError(f"Could not initialize the terminal: {e}") from e

    try:
        curses.cbreak()
        curses.noecho()
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")
        stdscr.keypad(True)
        stdscr.nodelay(True)
        yield CursesSurface(stdscr)
    finally:
        stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        logger.debug("Terminal restored")
