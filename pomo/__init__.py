"""Work/rest interval timer."""

from .clock import Clock, MonotonicClock
from .scheduler import IntervalTimer, Phase, TimerSnapshot, format_remaining
from .shared import SharedTimer

__all__ = [
    "Clock",
    "IntervalTimer",
    "MonotonicClock",
    "Phase",
    "SharedTimer",
    "TimerSnapshot",
    "format_remaining",
]
