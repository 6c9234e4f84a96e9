"""Parse and format human-readable durations such as ``2m30s`` or ``1.5h``."""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation

from blinktimer.errors import InvalidDurationError

# Unit suffix -> microseconds. Nanoseconds are kept for parsing but timedelta
# truncates anything below a microsecond.
_UNITS: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # micro sign
    "μs": Decimal(1),  # greek mu
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_COMPONENT = re.compile(r"(\d*(?:\.\d*)?)([^\d.]+)")

_US_PER_SECOND = 1_000_000


def parse_duration(text: str) -> timedelta:
    """Parse a duration string into a non-negative timedelta.

    A duration is a sequence of decimal numbers, each with an optional
    fraction and a unit suffix, e.g. ``300ms``, ``1.5h`` or ``2h45m``. Valid
    units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. The
    bare string ``0`` is accepted without a unit.

    Raises:
        InvalidDurationError: the text is malformed or the duration is negative.
    """
    s = text
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return timedelta(0)
    if not s:
        raise InvalidDurationError(text, "empty duration")

    total = Decimal(0)
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        if match is None:
            raise InvalidDurationError(text, "missing unit")
        number, unit = match.groups()
        if number in ("", "."):
            raise InvalidDurationError(text, "expected a number")
        factor = _UNITS.get(unit)
        if factor is None:
            raise InvalidDurationError(text, f"unknown unit {unit!r}")
        try:
            total += Decimal(number) * factor
        except InvalidOperation as exc:
            raise InvalidDurationError(text, "bad number") from exc
        pos = match.end()

    if negative and total != 0:
        raise InvalidDurationError(text, "duration must not be negative")
    try:
        return timedelta(microseconds=int(total))
    except OverflowError as exc:
        raise InvalidDurationError(text, "duration out of range") from exc


def _trim(value: int, scale: int) -> str:
    """Render ``value / scale`` with trailing fractional zeros removed."""
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    digits = str(frac).rjust(len(str(scale)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"


def format_duration(td: timedelta) -> str:
    """Format a timedelta compactly: ``2m30s``, ``1h0m0s``, ``1.5s``, ``300ms``."""
    us = td // timedelta(microseconds=1)
    sign = "-" if us < 0 else ""
    us = abs(us)

    if us == 0:
        return "0s"
    if us < 1_000:
        return f"{sign}{us}µs"
    if us < _US_PER_SECOND:
        return f"{sign}{_trim(us, 1_000)}ms"

    total_seconds, frac = divmod(us, _US_PER_SECOND)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    secs = _trim(seconds * _US_PER_SECOND + frac, _US_PER_SECOND)

    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def format_kitchen(moment: datetime) -> str:
    """Format a wall-clock time as ``3:04PM``."""
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d}{'AM' if moment.hour < 12 else 'PM'}"
