"""Shared fixtures for timer tests."""

import pytest

from pomo.scheduler import IntervalTimer

MINUTE = 60


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class AlertRecorder:
    """Alert sink that counts calls."""

    def __init__(self):
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def alert() -> AlertRecorder:
    return AlertRecorder()


@pytest.fixture
def timer(clock, alert) -> IntervalTimer:
    """25 minute work / 5 minute rest timer on a fake clock."""
    return IntervalTimer(25 * MINUTE, 5 * MINUTE, clock=clock, alert=alert)
