"""Lock-guarded access to one IntervalTimer from several callers."""

import threading
from contextlib import contextmanager
from typing import Iterator

from .scheduler import IntervalTimer, TimerSnapshot


class SharedTimer:
    """Single owner of an IntervalTimer for hosts with many command sources.

    Every caller goes through write() or read(), so commands coming from
    input handlers, a poll loop and other threads are serialized.
    """

    def __init__(self, timer: IntervalTimer):
        self._timer = timer
        self._lock = threading.RLock()

    @contextmanager
    def write(self) -> Iterator[IntervalTimer]:
        """Hold the lock and yield the timer for mutation."""
        with self._lock:
            yield self._timer

    def read(self) -> TimerSnapshot:
        """Advance the timer if due and return its current state."""
        with self._lock:
            self._timer.update()
            return self._timer.snapshot()

    def update(self) -> bool:
        """Flip the timer if its phase has timed out."""
        with self._lock:
            return self._timer.update()
