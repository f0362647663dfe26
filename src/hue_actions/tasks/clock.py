"""Clocks that tasks read time from and sleep against."""

from __future__ import annotations

import threading
import time
from typing import Protocol


class Clock(Protocol):
    """Source of time for an Execution."""

    def now(self) -> float:
        """Current timestamp in seconds."""
        ...

    def sleep(self, duration: float, interrupt: threading.Event) -> bool:
        """
        Sleep for duration seconds.

        Returns False if interrupt was set before the sleep completed.
        """
        ...


class SystemClock:
    """Wall clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, duration: float, interrupt: threading.Event) -> bool:
        if duration <= 0:
            return not interrupt.is_set()
        return not interrupt.wait(duration)


class ClockForTesting:
    """
    Deterministic clock whose sleep returns at once and advances time.

    Args:
        current: Starting timestamp in seconds
    """

    def __init__(self, current: float = 0.0):
        self._lock = threading.Lock()
        self.current = current

    def now(self) -> float:
        with self._lock:
            return self.current

    def sleep(self, duration: float, interrupt: threading.Event) -> bool:
        if interrupt.is_set():
            return False
        with self._lock:
            self.current += duration
        return not interrupt.is_set()
