"""Test helpers for pos_spec unit tests."""

from __future__ import annotations

from itertools import count

from pos_spec.subspecs.chain import TimeSource


def ticking_clock(start: int, step: int = 1) -> TimeSource:
    """
    Deterministic clock returning `start`, `start + step`, ... on each call.

    A zero step freezes time, which makes candidate timestamps collide with
    the head.
    """
    ticks = count(start, step)
    return lambda: next(ticks)
