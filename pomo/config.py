"""Runtime configuration for the timer app."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_STEP_SECS, DEFAULT_WORK_SECS, MINUTE


@dataclass(frozen=True)
class TimerConfig:
    """Settings collected from the command line."""

    work_secs: float = DEFAULT_WORK_SECS
    step_secs: float = DEFAULT_STEP_SECS
    notify_enabled: bool = True
    verbose: bool = False
    log_file: Optional[Path] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TimerConfig":
        """Build a config from parsed arguments.

        Raises:
            ValueError: If a duration is out of range.
        """
        if args.work < 0:
            raise ValueError("--work must not be negative")
        if args.step <= 0:
            raise ValueError("--step must be greater than zero")

        return cls(
            work_secs=args.work * MINUTE,
            step_secs=args.step * MINUTE,
            notify_enabled=not args.no_notify,
            verbose=args.verbose,
            log_file=args.log_file,
        )
