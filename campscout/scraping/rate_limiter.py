"""
Jittered request throttling.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable


class JitterRateLimiter:
    """
    Produces randomized waits before and between outbound calls.

    ``sleep`` and ``rng`` are injectable so callers can run the pipeline
    without real delays.
    """

    def __init__(
        self,
        *,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self._sleep = sleep
        self._rng = rng or random.Random()

    def interval(self, *, min_seconds: float, max_seconds: float) -> float:
        """
        Draw one delay from ``[min_seconds, max_seconds)``.
        """

        low = max(0.0, min_seconds)
        high = max(low, max_seconds)
        return low + self._rng.random() * (high - low)

    def wait(self, *, min_seconds: float = 0.0, max_seconds: float) -> float:
        """
        Sleep for a jittered interval and return the number of seconds waited.
        """

        seconds = self.interval(min_seconds=min_seconds, max_seconds=max_seconds)
        if seconds > 0:
            self._sleep(seconds)
        return seconds

    def pause(self, seconds: float) -> None:
        """
        Sleep for a fixed interval.
        """

        if seconds > 0:
            self._sleep(seconds)
