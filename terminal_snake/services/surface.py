"""
Rendering surface interface used by the game loop.

The loop never touches the terminal directly; it draws through a surface
handle that is acquired at startup and released on every exit path.
"""

from typing import Optional, Tuple


class SurfaceError(RuntimeError):
    """Raised when the rendering surface cannot be initialized or sized."""


class Surface:
    """
    Base class/interface for a character-cell rendering surface.

    Coordinates are (x, y) with (0, 0) at the top-left cell.
    """

    def get_bounds(self) -> Tuple[int, int]:
        """Return (width, height) in cells."""
        raise NotImplementedError

    def poll_key(self) -> Optional[str]:
        """
        Non-blocking key poll.

        Returns:
            None if no key is pending, otherwise one of "UP", "DOWN",
            "LEFT", "RIGHT", "QUIT" or an opaque token for any other key.
        """
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def clear_cell(self, x: int, y: int) -> None:
        raise NotImplementedError

    def draw_cell(self, x: int, y: int, glyph: str) -> None:
        raise NotImplementedError

    def draw_text(self, x: int, y: int, text: str) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        raise NotImplementedError
