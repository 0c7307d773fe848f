"""
Block Clock
===========

Source of block timestamps.

Admission rejects any candidate whose timestamp is not strictly after the
head's, so the clock must advance between two blocks. Wall-clock time in
nanoseconds is fine for normal use. Tests inject a deterministic source.
"""

from dataclasses import dataclass, field
from threading import Lock
from time import time_ns
from typing import Callable

TimeSource = Callable[[], int]
"""Callable returning the current time in nanoseconds since the Unix epoch."""


@dataclass(slots=True)
class BlockClock:
    """
    Wall-clock timestamps that never repeat or go backwards.

    When the system clock is coarse or steps backwards, the last issued
    value plus one is returned instead.
    """

    time_fn: TimeSource = time_ns
    """Time source function (injectable for testing)."""

    last_issued: int = -1
    """Highest timestamp handed out so far. Every later call returns more."""

    _lock: Lock = field(default_factory=Lock, repr=False)

    def __call__(self) -> int:
        """Return the next timestamp in nanoseconds."""
        with self._lock:
            now = self.time_fn()
            if now <= self.last_issued:
                now = self.last_issued + 1
            self.last_issued = now
            return now

    def advance_past(self, timestamp: int) -> None:
        """Make every later timestamp strictly greater than `timestamp`."""
        with self._lock:
            self.last_issued = max(self.last_issued, timestamp)
