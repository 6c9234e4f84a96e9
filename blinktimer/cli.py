"""blinktimer CLI -- a blinking, colour-cycling countdown in your terminal."""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from blinktimer import display
from blinktimer.countdown import run_countdown
from blinktimer.duration import format_duration, parse_duration
from blinktimer.errors import InvalidColorError, InvalidDurationError
from blinktimer.models import TimerConfig
from blinktimer.palette import default_palette, parse_palette

log = logging.getLogger(__name__)

app = typer.Typer(
    name="timer",
    help="Count down a duration such as 2m30s, then ring the bell.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=display.err_console, show_path=False)],
        force=True,
    )


def _usage() -> NoReturn:
    """Print usage and exit with status 1."""
    display.print_usage()
    raise typer.Exit(1)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    duration: Optional[str] = typer.Argument(None, help="How long to count down, e.g. 2m30s"),
    palette: Optional[str] = typer.Option(
        None, "--palette", help="Colours to cycle through, comma or space separated",
    ),
    no_bell: bool = typer.Option(False, "--no-bell", help="Do not ring the bell at the end"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Start a countdown timer."""
    _configure_logging(verbose)

    # Exactly one positional argument.
    if duration is None or ctx.args:
        _usage()

    try:
        length = parse_duration(duration)
    except InvalidDurationError as exc:
        log.info("parse_duration: %s", exc)
        _usage()

    try:
        colors = default_palette(parse_palette(palette) if palette else ())
    except InvalidColorError as exc:
        display.print_warning(f"Unknown colour {exc.code!r} in --palette.")
        raise typer.Exit(1)

    try:
        config = TimerConfig(duration=length, palette=colors, bell=not no_bell)
    except ValidationError as exc:
        log.info("TimerConfig: %s", exc)
        _usage()

    display.print_start(format_duration(config.duration))

    result = run_countdown(config)
    if not result.completed:
        # Interrupted: no completion message, no bell.
        return

    display.print_expired(result.finished_at, config.expired_color)
    if config.bell:
        alert: display.Alert = display.BellAlert()
        alert()
