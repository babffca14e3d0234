"""Frame rate limiting and measurement."""

from __future__ import annotations

import time
from typing import Callable

NANOSECONDS_PER_SECOND = 1_000_000_000


class FixedFrameRate:
    """Keeps a loop at a fixed number of frames per second.

    A rate of zero or less leaves the frame rate unlocked.
    """

    def __init__(
        self,
        rate: int = 0,
        clock: Callable[[], int] = time.perf_counter_ns,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._fixed_rate = 0
        self._fixed_frame_time = 0
        self.fixed_rate = rate
        self._delta_ns = 0
        self._timestamp = clock()

    @property
    def fixed_rate(self) -> int:
        return self._fixed_rate

    @fixed_rate.setter
    def fixed_rate(self, rate: int) -> None:
        self._fixed_rate = rate
        if rate > 0:
            self._fixed_frame_time = NANOSECONDS_PER_SECOND // rate

    @property
    def is_locked(self) -> bool:
        return self._fixed_rate > 0

    def wait(self) -> None:
        """Measure the frame just finished and sleep out the rest of its slot."""
        self._delta_ns = self._clock() - self._timestamp
        if self._fixed_rate > 0:
            wait_ns = self._fixed_frame_time - self._delta_ns
            self._delta_ns += wait_ns
            if wait_ns > 0:
                self._sleep(wait_ns / NANOSECONDS_PER_SECOND)
        self._timestamp = self._clock()

    @property
    def delta_time(self) -> float:
        """Length of the last frame in seconds."""
        return self._delta_ns / NANOSECONDS_PER_SECOND

    @property
    def current_frame_rate(self) -> int:
        """Frames per second implied by the last frame, 0 before any frame."""
        if self._delta_ns <= 0:
            return 0
        return NANOSECONDS_PER_SECOND // self._delta_ns