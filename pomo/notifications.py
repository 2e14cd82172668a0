"""Notification support for the interval timer."""

import logging
import platform
import subprocess
import sys
from typing import Callable

from .scheduler import IntervalTimer, Phase

logger = logging.getLogger(__name__)


def _send_bell() -> None:
    """Send terminal bell."""
    sys.stdout.write("\a")
    sys.stdout.flush()


def _run_notifier(command: list[str]) -> bool:
    """Run a desktop notifier command.

    Returns:
        True if the command ran, False if it was missing or failed.
    """
    try:
        subprocess.run(command, capture_output=True, timeout=5)
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as exc:
        logger.debug("Notifier %s unavailable: %s", command[0], exc)
        return False


def _send_macos_notification(title: str, message: str) -> bool:
    script = f'display notification "{message}" with title "{title}"'
    return _run_notifier(["osascript", "-e", script])


def _send_linux_notification(title: str, message: str) -> bool:
    return _run_notifier(["notify-send", title, message])


def notify(title: str, message: str, bell: bool = True) -> None:
    """Send a notification.

    Rings the terminal bell and tries a native notification. Fails silently
    if native notifications are not available.

    Args:
        title: Notification title.
        message: Notification message.
        bell: Whether to ring terminal bell.
    """
    if bell:
        _send_bell()

    system = platform.system()
    if system == "Darwin":
        _send_macos_notification(title, message)
    elif system == "Linux":
        _send_linux_notification(title, message)
    # Windows and other platforms: bell only
    logger.info("Alert: %s - %s", title, message)


def phase_message(phase: Phase) -> tuple[str, str]:
    """Title and message announcing the phase that just began."""
    if phase == Phase.RESTING:
        return "Work complete!", "Time for a rest."
    return "Rest over", "Back to work!"


def phase_alert(timer: IntervalTimer, bell: bool = True) -> Callable[[], None]:
    """Build an alert sink announcing ``timer``'s new phase on every flip."""

    def alert() -> None:
        title, message = phase_message(timer.current_phase)
        notify(title, message, bell=bell)

    return alert
