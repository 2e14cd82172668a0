"""Textual-based UI for the interval timer."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.timer import Timer
from textual.widgets import Button, Digits, Footer, ProgressBar, Static

from .constants import DEFAULT_STEP_SECS, TICK_INTERVAL
from .scheduler import IntervalTimer, Phase

HELP_TEXT = """\
[b]Keys[/b]
 [b]f[/b]  flip the timer
 [b]i[/b]  increase duration
 [b]n[/b]  new timer
 [b]d[/b]  decrease duration
 [b]p[/b]  pause"""

PHASE_CLASSES = {
    Phase.INACTIVE: "inactive",
    Phase.WORKING: "work",
    Phase.RESTING: "rest",
    Phase.PAUSED: "paused",
}

# Buttons shown for each phase.
CONTROLS = {
    Phase.INACTIVE: ("decrease", "start", "increase"),
    Phase.WORKING: ("pause",),
    Phase.RESTING: ("pause",),
    Phase.PAUSED: ("resume",),
}


class Countdown(Digits):
    """Big M:SS countdown."""

    def __init__(self, timer: IntervalTimer, **kwargs) -> None:
        super().__init__(str(timer), **kwargs)
        self.pomo_timer = timer

    def update_display(self) -> None:
        self.update(str(self.pomo_timer))


class PhaseLabel(Static):
    """Phase label with rest length."""

    def __init__(self, timer: IntervalTimer, **kwargs) -> None:
        super().__init__(**kwargs)
        self.pomo_timer = timer

    def on_mount(self) -> None:
        self.update_display()

    def update_display(self) -> None:
        label = self.pomo_timer.phase_label
        paused = self.pomo_timer.paused_phase
        if paused is not None:
            label = f"{label} ({'Rest' if paused == Phase.RESTING else 'Work'})"
        rest_mins = int(self.pomo_timer.rest_duration // 60)
        self.update(f"─── {label} · {rest_mins} min rest ───")


class PomoApp(App):
    """Interval timer application."""

    CSS_PATH = "pomo.tcss"
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("space", "toggle", "Pause/Resume", priority=True),
        Binding("p", "toggle", "Pause", show=False),
        Binding("f", "flip", "Flip"),
        Binding("i", "increase", "+"),
        Binding("d", "decrease", "-"),
        Binding("n", "reset", "New"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, timer: IntervalTimer, step_secs: float = DEFAULT_STEP_SECS) -> None:
        super().__init__()
        self.pomo_timer = timer
        self.step_secs = step_secs
        self._tick_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Container(id="main"):
            with Vertical(id="timer-container"):
                yield PhaseLabel(self.pomo_timer, id="phase-label")
                yield Countdown(self.pomo_timer, id="countdown")
                yield ProgressBar(id="progress", total=100, show_eta=False, show_percentage=False)
                with Horizontal(id="controls"):
                    yield Button("-", id="decrease")
                    yield Button("Start", id="start", variant="primary")
                    yield Button("+", id="increase")
                    yield Button("Pause", id="pause")
                    yield Button("Resume", id="resume", variant="primary")
                yield Static(HELP_TEXT, id="help")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_display()
        self._tick_timer = self.set_interval(TICK_INTERVAL, self._tick)

    def _tick(self) -> None:
        """Called every second."""
        self.pomo_timer.update()
        self._refresh_display()

    def _refresh_display(self) -> None:
        """Update all display elements."""
        phase = self.pomo_timer.current_phase
        self.query_one("#countdown", Countdown).update_display()
        self.query_one("#phase-label", PhaseLabel).update_display()
        self.query_one("#progress", ProgressBar).update(
            total=100, progress=self.pomo_timer.progress * 100
        )

        visible = CONTROLS[phase]
        for button in self.query("#controls Button"):
            button.display = button.id in visible
        self.query_one("#help").display = phase == Phase.INACTIVE

        container = self.query_one("#timer-container")
        container.remove_class(*PHASE_CLASSES.values())
        container.add_class(PHASE_CLASSES[phase])

    def on_button_pressed(self, event: Button.Pressed) -> None:
        actions = {
            "decrease": self.action_decrease,
            "start": self.action_toggle,
            "increase": self.action_increase,
            "pause": self.action_toggle,
            "resume": self.action_toggle,
        }
        action = actions.get(event.button.id or "")
        if action:
            action()

    def action_toggle(self) -> None:
        """Start, pause or resume."""
        self.pomo_timer.toggle_pause()
        self._refresh_display()

    def action_flip(self) -> None:
        """Switch between work and rest."""
        self.pomo_timer.flip()
        self._refresh_display()

    def action_increase(self) -> None:
        self.pomo_timer.increase_duration(self.step_secs)
        self._refresh_display()

    def action_decrease(self) -> None:
        self.pomo_timer.decrease_duration(self.step_secs)
        self._refresh_display()

    def action_reset(self) -> None:
        """Start over with a fresh, inactive timer."""
        self.pomo_timer.reset()
        self._refresh_display()


def run_ui(timer: IntervalTimer, step_secs: float = DEFAULT_STEP_SECS) -> None:
    """Run the timer UI.

    Args:
        timer: The timer instance.
        step_secs: Seconds added or removed by the +/- controls.
    """
    app = PomoApp(timer, step_secs)
    app.run()
