"""Unit tests for notifications.py."""

import subprocess
from unittest.mock import patch

from pomo import notifications
from pomo.notifications import notify, phase_alert, phase_message
from pomo.scheduler import IntervalTimer, Phase

MINUTE = 60


class TestNotify:
    """Test notification dispatch."""

    def test_bell_written(self, capsys):
        with patch.object(notifications.platform, "system", return_value="Windows"):
            notify("Title", "Message")
        assert capsys.readouterr().out == "\a"

    def test_no_bell(self, capsys):
        with patch.object(notifications.platform, "system", return_value="Windows"):
            notify("Title", "Message", bell=False)
        assert capsys.readouterr().out == ""

    def test_linux_uses_notify_send(self):
        with patch.object(notifications.platform, "system", return_value="Linux"), \
                patch.object(notifications.subprocess, "run") as run:
            notify("Title", "Message", bell=False)
        assert run.call_args[0][0] == ["notify-send", "Title", "Message"]

    def test_macos_uses_osascript(self):
        with patch.object(notifications.platform, "system", return_value="Darwin"), \
                patch.object(notifications.subprocess, "run") as run:
            notify("Title", "Message", bell=False)
        assert run.call_args[0][0][0] == "osascript"

    def test_missing_notifier_is_ignored(self):
        """A missing notifier binary does not raise."""
        with patch.object(notifications.platform, "system", return_value="Linux"), \
                patch.object(notifications.subprocess, "run", side_effect=FileNotFoundError):
            notify("Title", "Message", bell=False)

    def test_timeout_is_ignored(self):
        error = subprocess.TimeoutExpired(cmd="notify-send", timeout=5)
        with patch.object(notifications.platform, "system", return_value="Linux"), \
                patch.object(notifications.subprocess, "run", side_effect=error):
            notify("Title", "Message", bell=False)


class TestPhaseAlert:
    """Test the alert sink built for a timer."""

    def test_messages(self):
        assert phase_message(Phase.RESTING) == ("Work complete!", "Time for a rest.")
        assert phase_message(Phase.WORKING) == ("Rest over", "Back to work!")

    def test_alert_announces_new_phase(self, clock):
        timer = IntervalTimer(25 * MINUTE, clock=clock)
        timer.alert = phase_alert(timer, bell=False)
        with patch.object(notifications, "notify") as notify_mock:
            timer.start()
            clock.advance(25 * MINUTE)
            timer.update()
        notify_mock.assert_called_once_with("Work complete!", "Time for a rest.", bell=False)
