"""Unit tests for clock.py."""

from pomo.clock import (
    clamp_span,
    MonotonicClock,
    checked_shift,
    duration_since,
    saturating_add,
    saturating_sub,
)
from pomo.constants import MAX_SPAN


class TestMonotonicClock:
    """Test the real clock source."""

    def test_never_goes_backwards(self):
        """Successive readings never decrease."""
        clock = MonotonicClock()
        first = clock.now()
        second = clock.now()
        assert second >= first


class TestSaturatingArithmetic:
    """Test clamped span arithmetic."""

    def test_add_within_range(self):
        assert saturating_add(60.0, 30.0) == 90.0

    def test_add_clamps_at_ceiling(self):
        """Adding past MAX_SPAN stops at MAX_SPAN."""
        assert saturating_add(MAX_SPAN, 60.0) == MAX_SPAN

    def test_add_custom_ceiling(self):
        assert saturating_add(50.0, 20.0, ceiling=60.0) == 60.0

    def test_sub_within_range(self):
        assert saturating_sub(60.0, 30.0) == 30.0

    def test_sub_clamps_at_zero(self):
        assert saturating_sub(30.0, 60.0) == 0.0

    def test_sub_custom_floor(self):
        assert saturating_sub(400.0, 3600.0, floor=300.0) == 300.0


class TestClampSpan:
    """Test span clamping."""

    def test_within_range(self):
        assert clamp_span(90.0) == 90.0

    def test_negative_is_floor(self):
        assert clamp_span(-5.0) == 0.0

    def test_nan_is_floor(self):
        assert clamp_span(float("nan"), floor=300.0) == 300.0

    def test_infinity_is_ceiling(self):
        assert clamp_span(float("inf")) == MAX_SPAN


class TestCheckedShift:
    """Test instant shifting."""

    def test_forward(self):
        assert checked_shift(100.0, 50.0) == 150.0

    def test_backward(self):
        assert checked_shift(100.0, -50.0) == 50.0

    def test_underflow_returns_none(self):
        """Shifting before the clock origin is rejected."""
        assert checked_shift(10.0, -50.0) is None

    def test_overflow_returns_none(self):
        assert checked_shift(MAX_SPAN, 1.0) is None

    def test_nan_returns_none(self):
        assert checked_shift(100.0, float("nan")) is None


class TestDurationSince:
    """Test span measurement."""

    def test_forward_span(self):
        assert duration_since(130.0, 100.0) == 30.0

    def test_clock_backwards_is_zero(self):
        """A later reading below the earlier one gives zero, not negative."""
        assert duration_since(90.0, 100.0) == 0.0
