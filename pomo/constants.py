"""Timer defaults and limits."""

from datetime import timedelta

MINUTE = 60

# Default work phase (25 minutes); rest is derived from it.
DEFAULT_WORK_SECS = 25 * MINUTE

# Rest phase is always work / REST_DIVISOR.
REST_DIVISOR = 5

# decrease_duration() never goes below this.
MIN_WORK_SECS = 5 * MINUTE

# Amount the +/- controls adjust the work phase by.
DEFAULT_STEP_SECS = 5 * MINUTE

# Largest span the timer will represent, in seconds.
MAX_SPAN = timedelta.max.total_seconds()

# Host poll cadence in seconds.
TICK_INTERVAL = 1.0
