"""Tests for terminal output."""

from __future__ import annotations

import io
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from blinktimer import display
from blinktimer.display import USAGE_LINES, BellAlert, RichTerminal, styled


def _console(terminal: bool) -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    out = Console(file=buf, force_terminal=terminal, color_system="truecolor" if terminal else None)
    return out, buf


class TestRichTerminal:
    def test_cursor_codes_on_terminal(self) -> None:
        out, buf = _console(terminal=True)
        term = RichTerminal(out)
        term.hide_cursor()
        term.save_cursor_position()
        term.restore_cursor_position()
        term.show_cursor()
        assert buf.getvalue() == "\x1b[?25l\x1b7\x1b8\x1b[?25h"

    def test_no_cursor_codes_when_piped(self) -> None:
        out, buf = _console(terminal=False)
        term = RichTerminal(out)
        term.hide_cursor()
        term.save_cursor_position()
        term.restore_cursor_position()
        term.show_cursor()
        assert buf.getvalue() == ""

    def test_write_colored(self) -> None:
        out, buf = _console(terminal=True)
        RichTerminal(out).write("01:30", "#ff0000")
        value = buf.getvalue()
        assert "01:30" in value
        assert "\x1b[38;2;255;0;0m" in value
        assert not value.endswith("\n")

    def test_write_plain_when_piped(self) -> None:
        out, buf = _console(terminal=False)
        RichTerminal(out).write("01:30", "red")
        assert buf.getvalue() == "01:30"


class TestStyled:
    def test_foreground(self) -> None:
        text = styled("hi", "color(196)")
        assert text.plain == "hi"
        assert text.style.color.number == 196


class TestBellAlert:
    def test_rings(self) -> None:
        out, buf = _console(terminal=True)
        BellAlert(out)()
        assert buf.getvalue() == "\x07"

    def test_failure_ignored(self) -> None:
        out = MagicMock()
        out.bell.side_effect = OSError("no tty")
        BellAlert(out)()
        out.bell.assert_called_once_with()


class TestMessages:
    def test_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        display.print_usage()
        assert capsys.readouterr().out == "\n".join(USAGE_LINES) + "\n"

    def test_start(self, capsys: pytest.CaptureFixture[str]) -> None:
        display.print_start("2m30s")
        assert capsys.readouterr().out == "Starting 2m30s timer.\n"

    def test_expired(self, capsys: pytest.CaptureFixture[str]) -> None:
        display.print_expired(datetime(2024, 1, 1, 15, 4))
        assert "Timer expired at 3:04PM" in capsys.readouterr().out
