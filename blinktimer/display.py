"""Rich terminal output: the in-place renderer, the bell, and message helpers."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Protocol

from rich.console import Console
from rich.style import Style
from rich.text import Text

from blinktimer.duration import format_kitchen

log = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

# DEC save / restore cursor. rich has no Control for these.
_SAVE_CURSOR = "\x1b7"
_RESTORE_CURSOR = "\x1b8"

USAGE_LINES: tuple[str, str] = ("Usage: timer <duration>", "timer 2m30s")


class Terminal(Protocol):
    """What the countdown engine needs from the terminal."""

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def save_cursor_position(self) -> None: ...

    def restore_cursor_position(self) -> None: ...

    def write(self, text: str, color: str) -> None: ...


class Alert(Protocol):
    def __call__(self) -> None: ...


def styled(text: str, color: str) -> Text:
    """Build a Text with *color* as its foreground."""
    return Text(text, style=Style(color=color))


class RichTerminal:
    """Terminal renderer backed by a rich Console.

    Cursor control codes are only emitted when the console is attached to a
    terminal, so piped output stays clean.
    """

    def __init__(self, out: Optional[Console] = None) -> None:
        self.console = out or console

    def _raw(self, code: str) -> None:
        if self.console.is_terminal:
            self.console.file.write(code)
            self.console.file.flush()

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def save_cursor_position(self) -> None:
        self._raw(_SAVE_CURSOR)

    def restore_cursor_position(self) -> None:
        self._raw(_RESTORE_CURSOR)

    def write(self, text: str, color: str) -> None:
        self.console.print(styled(text, color), end="", soft_wrap=True)


class BellAlert:
    """Ring the terminal bell. Failures are logged and ignored."""

    def __init__(self, out: Optional[Console] = None) -> None:
        self.console = out or console

    def __call__(self) -> None:
        try:
            self.console.bell()
        except OSError:
            log.debug("Bell failed", exc_info=True)


def print_start(duration: str) -> None:
    """Print the start line, e.g. ``Starting 2m30s timer.``"""
    console.print(f"Starting {duration} timer.", markup=False, highlight=False)


def print_expired(moment: datetime, color: str = "#ff0000") -> None:
    """Print the completion line in *color*."""
    # On a terminal the countdown leaves the cursor at the start of the
    # readout and the message overwrites it. Elsewhere the readout line
    # still needs ending.
    if not console.is_terminal:
        console.print()
    console.print(styled(f"Timer expired at {format_kitchen(moment)}", color))


def print_usage() -> None:
    """Print the two-line usage message."""
    for line in USAGE_LINES:
        console.print(line, markup=False, highlight=False)


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    err_console.print(f"[yellow]{message}[/yellow]")
