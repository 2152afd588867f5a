"""Stopwatch for timing frames."""

from __future__ import annotations

import math
import time
from typing import Callable


class Clock:
    """Measures the time between ``start`` and ``stop``.

    ``timer`` returns the current time in nanoseconds.
    """

    def __init__(self, timer: Callable[[], int] = time.perf_counter_ns) -> None:
        self._timer = timer
        self._start_ns = 0
        self._stop_ns = 0
        self._elapsed = 0.0

    def start(self) -> None:
        self._start_ns = self._timer()

    def stop(self) -> None:
        self._stop_ns = self._timer()
        self._elapsed = (self._stop_ns - self._start_ns) / 1e9

    def elapsed_seconds(self) -> float:
        """Seconds measured by the last ``stop``."""
        return self._elapsed

    def fps(self) -> float:
        """Frames per second implied by the measured interval."""
        duration_ns = self._stop_ns - self._start_ns
        if duration_ns == 0:
            return math.inf
        return 1e9 / duration_ns

    def __enter__(self) -> Clock:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()