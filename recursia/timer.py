"""A stopwatch that accumulates time over several start/stop intervals."""

from __future__ import annotations

import time


class Timer:
    """Accumulates elapsed wall-clock time between start() and stop() calls."""

    def __init__(self):
        self._total_ns = 0
        self._started_ns = None

    def start(self):
        self._started_ns = time.perf_counter_ns()

    def stop(self):
        if self._started_ns is None:
            raise RuntimeError("Timer.stop() called before Timer.start().")
        self._total_ns += time.perf_counter_ns() - self._started_ns
        self._started_ns = None

    def elapsed(self):
        """Total measured time in seconds."""
        return self._total_ns / 1e9

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False