"""Entry point for python -m pomo."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from textual.logging import TextualHandler

from .config import TimerConfig
from .notifications import phase_alert
from .scheduler import IntervalTimer
from .ui import run_ui

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="pomo",
        description="Terminal work/rest interval timer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  Space/p  Pause/Resume (starts the timer when inactive)
  f        Flip between work and rest
  i        Increase duration
  d        Decrease duration
  n        New timer (reset)
  q        Quit

Rest phases last one fifth of the work phase.

Examples:
  pomo                  # 25 minutes work, 5 minutes rest
  pomo --work 50        # 50 minutes work, 10 minutes rest
  pomo --step 1         # +/- adjust by one minute
""",
    )

    parser.add_argument(
        "--work",
        type=int,
        default=25,
        metavar="MINS",
        help="Work phase duration in minutes (default: 25)",
    )
    parser.add_argument(
        "--step",
        type=int,
        default=5,
        metavar="MINS",
        help="Minutes added or removed by increase/decrease (default: 5)",
    )
    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Disable notifications (bell and system)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Also write log messages to PATH",
    )
    return parser


def configure_logging(config: TimerConfig) -> None:
    """Route log records to the Textual console and an optional file."""
    handlers: list[logging.Handler] = [TextualHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = TimerConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(config)

    timer = IntervalTimer(work_duration=config.work_secs)
    if config.notify_enabled:
        timer.alert = phase_alert(timer)
    logger.info("Starting with work=%ss rest=%ss", timer.work_duration, timer.rest_duration)

    try:
        run_ui(timer, step_secs=config.step_secs)
    except KeyboardInterrupt:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
