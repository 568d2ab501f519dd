"""
Growth timer - extends the snake once every fixed interval of clock time.
"""

import logging
from typing import Callable

from .constants import EXTEND_INTERVAL
from .snake import Snake

logger = logging.getLogger(__name__)


class GrowthTimer:
    """
    Tracks when the snake last grew.

    Growth is driven by elapsed clock time rather than tick count, so a slow
    frame never delays or skips a growth event by more than one tick.

    Attributes:
        interval: seconds between growth events
        last_extend_time: clock reading of the last growth (or of the start)
    """

    def __init__(self, start_time: float, interval: float = EXTEND_INTERVAL):
        if interval <= 0:
            raise ValueError(f"Growth interval must be positive, got {interval}.")
        self.interval = interval
        self.last_extend_time = start_time

    @classmethod
    def started_now(cls, clock: Callable[[], float], interval: float = EXTEND_INTERVAL) -> "GrowthTimer":
        return cls(clock(), interval)

    def is_due(self, now: float) -> bool:
        return now - self.last_extend_time >= self.interval

    def maybe_extend(self, snake: Snake, now: float) -> bool:
        """
        Extend the snake if the interval has elapsed.

        Returns:
            True if a segment was appended on this call.
        """
        if not self.is_due(now):
            return False

        snake.extend()
        self.last_extend_time = now
        logger.debug(f"Snake extended to {len(snake)} segments at t={now:.2f}")
        return True
