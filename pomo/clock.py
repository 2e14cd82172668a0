"""Monotonic clock source and saturating time arithmetic.

All instants and spans are float seconds. Instants come from a monotonic
source, so they are only meaningful relative to each other.
"""

import math
import time
from typing import Optional, Protocol

from .constants import MAX_SPAN


class Clock(Protocol):
    """Anything that can report the current monotonic instant."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """Clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


def clamp_span(value: float, floor: float = 0.0, ceiling: float = MAX_SPAN) -> float:
    """Clamp a span into [floor, ceiling]. NaN becomes ``floor``."""
    if math.isnan(value):
        return floor
    return min(max(value, floor), ceiling)


def saturating_add(value: float, delta: float, ceiling: float = MAX_SPAN) -> float:
    """Add two spans, clamping the result at ``ceiling``."""
    return min(value + delta, ceiling)


def saturating_sub(value: float, delta: float, floor: float = 0.0) -> float:
    """Subtract two spans, clamping the result at ``floor``."""
    return max(value - delta, floor)


def checked_shift(instant: float, delta: float) -> Optional[float]:
    """Move ``instant`` by ``delta`` seconds.

    Returns:
        The shifted instant, or None if it is NaN or outside [0, MAX_SPAN].
    """
    shifted = instant + delta
    if math.isnan(shifted) or shifted < 0.0 or shifted > MAX_SPAN:
        return None
    return shifted


def duration_since(later: float, earlier: float) -> float:
    """Span from ``earlier`` to ``later``; zero if the clock went backwards."""
    return max(later - earlier, 0.0)
