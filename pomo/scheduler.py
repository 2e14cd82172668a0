"""Pure logic for the work/rest interval timer state machine."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from .clock import (
    Clock,
    MonotonicClock,
    checked_shift,
    clamp_span,
    duration_since,
    saturating_add,
    saturating_sub,
)
from .constants import DEFAULT_WORK_SECS, MIN_WORK_SECS, REST_DIVISOR

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Timer phase types."""
    INACTIVE = auto()
    WORKING = auto()
    RESTING = auto()
    PAUSED = auto()


RUNNING_PHASES = (Phase.WORKING, Phase.RESTING)


def format_remaining(seconds: float) -> str:
    """Render a span as ``M:SS``, e.g. ``24:05``."""
    whole = int(clamp_span(seconds))
    return f"{whole // 60}:{whole % 60:02d}"


@dataclass(frozen=True)
class TimerSnapshot:
    """Point-in-time view of an IntervalTimer for display code."""
    phase: Phase
    paused_phase: Optional[Phase]
    remaining: float
    work_duration: float
    rest_duration: float
    progress: float
    label: str

    @property
    def display(self) -> str:
        return format_remaining(self.remaining)


class IntervalTimer:
    """Work/rest interval timer.

    Remaining time is always measured against one absolute deadline on a
    monotonic clock. The host polls update() on its own cadence; the timer
    never sleeps or schedules anything itself.
    """

    def __init__(
        self,
        work_duration: float = DEFAULT_WORK_SECS,
        rest_duration: Optional[float] = None,
        clock: Optional[Clock] = None,
        alert: Optional[Callable[[], None]] = None,
    ):
        """Initialize the timer in the Inactive phase.

        Args:
            work_duration: Work phase length in seconds.
            rest_duration: Rest phase length in seconds. Defaults to
                work_duration / 5 and is recomputed on every duration edit.
            clock: Monotonic time source. Defaults to time.monotonic().
            alert: Called with no arguments on every work/rest flip.
        """
        self._work = clamp_span(float(work_duration))
        if rest_duration is None:
            self._rest = self._work / REST_DIVISOR
        else:
            self._rest = clamp_span(float(rest_duration))
        self.clock = clock or MonotonicClock()
        self.alert = alert

        self._phase = Phase.INACTIVE
        self._deadline: Optional[float] = None
        self._paused_at: Optional[float] = None
        self._paused_phase: Optional[Phase] = None

    @property
    def current_phase(self) -> Phase:
        """Current phase."""
        return self._phase

    @property
    def paused_phase(self) -> Optional[Phase]:
        """Phase that was running when the timer paused, if paused."""
        return self._paused_phase

    @property
    def work_duration(self) -> float:
        return self._work

    @property
    def rest_duration(self) -> float:
        return self._rest

    @property
    def deadline(self) -> Optional[float]:
        """Monotonic instant the current phase ends; None while inactive."""
        return self._deadline

    @property
    def progress(self) -> float:
        """Progress through current phase (0.0 to 1.0)."""
        if self._phase == Phase.INACTIVE:
            return 0.0
        active = self._paused_phase if self._phase == Phase.PAUSED else self._phase
        total = self._rest if active == Phase.RESTING else self._work
        if total <= 0:
            return 1.0
        return min(max(1.0 - self.remaining_time() / total, 0.0), 1.0)

    @property
    def phase_label(self) -> str:
        """Human-readable phase label."""
        labels = {
            Phase.INACTIVE: "Ready",
            Phase.WORKING: "Work",
            Phase.RESTING: "Rest",
            Phase.PAUSED: "Paused",
        }
        return labels[self._phase]

    def remaining_time(self) -> float:
        """Seconds left in the current phase, never negative.

        While paused this is the span that was left when pausing began.
        While inactive it is the full work duration.
        """
        return self._remaining_at(self.clock.now())

    def _remaining_at(self, now: float) -> float:
        if self._phase == Phase.INACTIVE or self._deadline is None:
            return self._work
        if self._phase == Phase.PAUSED:
            return duration_since(self._deadline, self._paused_at)
        return duration_since(self._deadline, now)

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self._phase,
            paused_phase=self._paused_phase,
            remaining=self.remaining_time(),
            work_duration=self._work,
            rest_duration=self._rest,
            progress=self.progress,
            label=self.phase_label,
        )

    def start(self) -> None:
        """Start a work phase, or resume if paused."""
        if self._phase == Phase.INACTIVE:
            if self._work == 0:
                logger.debug("Start ignored: work duration is zero")
                return
            self._deadline = saturating_add(self.clock.now(), self._work)
            self._phase = Phase.WORKING
            logger.info("Timer started: work=%ss", self._work)
        elif self._phase == Phase.PAUSED:
            self._resume(self.clock.now())
        else:
            logger.debug("Start ignored: already %s", self._phase.name)

    def stop(self) -> None:
        """Pause a running phase, freezing its remaining time."""
        if self._phase not in RUNNING_PHASES:
            logger.debug("Stop ignored: timer is %s", self._phase.name)
            return
        self._paused_at = self.clock.now()
        self._paused_phase = self._phase
        self._phase = Phase.PAUSED
        logger.info(
            "Timer paused: phase=%s remaining=%.0fs",
            self._paused_phase.name,
            self._remaining_at(self._paused_at),
        )

    def pause(self) -> None:
        """Same as stop()."""
        self.stop()

    def resume(self) -> None:
        """Continue the phase that was running when the timer paused."""
        if self._phase != Phase.PAUSED:
            logger.debug("Resume ignored: timer is %s", self._phase.name)
            return
        self._resume(self.clock.now())

    def _resume(self, now: float) -> None:
        # Push the deadline out by exactly the time spent paused.
        paused_for = duration_since(now, self._paused_at)
        self._deadline = saturating_add(self._deadline, paused_for)
        self._phase = self._paused_phase or Phase.WORKING
        self._paused_at = None
        self._paused_phase = None
        logger.info("Timer resumed: phase=%s paused_for=%.0fs", self._phase.name, paused_for)

    def toggle_pause(self) -> None:
        """Toggle between running and paused."""
        if self._phase in RUNNING_PHASES:
            self.stop()
        else:
            self.start()

    def reset(self) -> None:
        """Return to Inactive, discarding the deadline and pause state."""
        self._phase = Phase.INACTIVE
        self._deadline = None
        self._paused_at = None
        self._paused_phase = None
        logger.info("Timer reset")

    def update(self) -> bool:
        """Flip phase if the running phase has timed out.

        Performs at most one flip per call, however late the poll is.

        Returns:
            True if the phase flipped, False otherwise.
        """
        if self._phase not in RUNNING_PHASES:
            return False
        now = self.clock.now()
        if self._remaining_at(now) > 0:
            return False
        self._flip(now)
        return True

    def tick(self) -> bool:
        """Same as update()."""
        return self.update()

    def flip(self) -> None:
        """Switch to the next phase immediately and start its full duration."""
        self._flip(self.clock.now())

    def _flip(self, now: float) -> None:
        if self._phase == Phase.WORKING:
            next_phase = Phase.RESTING
        elif self._phase == Phase.PAUSED and self._paused_phase == Phase.WORKING:
            next_phase = Phase.RESTING
        else:
            next_phase = Phase.WORKING

        length = self._rest if next_phase == Phase.RESTING else self._work
        old_phase = self._phase
        self._deadline = saturating_add(now, length)
        self._phase = next_phase
        self._paused_at = None
        self._paused_phase = None
        logger.info("Timer flipped: %s -> %s (%ss)", old_phase.name, next_phase.name, length)

        if self.alert:
            self.alert()

    def increase_duration(self, delta: float) -> None:
        """Lengthen the work phase by ``delta`` seconds.

        Rest duration is defined as 1/5 of the work duration. An in-progress
        phase gets exactly ``delta`` more remaining time.
        """
        delta = clamp_span(float(delta))
        self._set_work(saturating_add(self._work, delta))
        self._shift_deadline(delta)

    def decrease_duration(self, delta: float) -> None:
        """Shorten the work phase by ``delta`` seconds, down to 5 minutes.

        Rest duration is defined as 1/5 of the work duration. An in-progress
        phase loses exactly ``delta`` of its remaining time.
        """
        delta = clamp_span(float(delta))
        self._set_work(saturating_sub(self._work, delta, floor=MIN_WORK_SECS))
        self._shift_deadline(-delta)

    def _set_work(self, work: float) -> None:
        self._work = work
        self._rest = work / REST_DIVISOR
        logger.debug("Durations set: work=%ss rest=%ss", self._work, self._rest)

    def _shift_deadline(self, delta: float) -> None:
        if self._deadline is None:
            return
        shifted = checked_shift(self._deadline, delta)
        if shifted is None:
            logger.debug("Deadline shift by %ss out of range; left unchanged", delta)
            return
        self._deadline = shifted

    def __str__(self) -> str:
        return format_remaining(self.remaining_time())
