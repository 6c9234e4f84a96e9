"""Allow ``python -m blinktimer``."""

from blinktimer.cli import app

app(prog_name="timer")
