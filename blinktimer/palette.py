"""The colour cycle used for the countdown readout.

Colours are loaded from ``colorcycle.txt`` next to this module: any
whitespace-separated list of colour identifiers. Users can edit that file to
change the cycle. If the file is missing or empty, a small built-in fallback
list is used.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from rich.color import Color, ColorParseError

from blinktimer.errors import InvalidColorError

log = logging.getLogger(__name__)

_PALETTE_FILE = Path(__file__).resolve().parent / "colorcycle.txt"

_FALLBACK_PALETTE: list[str] = [
    "#ff5f5f",
    "#ffaf5f",
    "#ffff5f",
    "#5fff5f",
    "#5fffff",
    "#5f87ff",
    "#af5fff",
    "#ff5fd7",
]

_BARE_HEX = re.compile(r"[0-9a-fA-F]{6}")


def normalize_color(code: str) -> str:
    """Turn a colour identifier into a string rich can parse.

    Accepts named colours (``red``), hex codes with or without ``#`` and
    numeric 256-colour codes (``196`` becomes ``color(196)``).
    """
    value = code.strip()
    if value.isdigit():
        value = f"color({value})"
    candidates = [value]
    if _BARE_HEX.fullmatch(value):
        candidates.append(f"#{value}")

    for candidate in candidates:
        try:
            Color.parse(candidate)
        except ColorParseError:
            continue
        return candidate
    raise InvalidColorError(code)


def parse_palette(text: str) -> list[str]:
    """Split on whitespace and commas, normalising every entry."""
    return [normalize_color(tok) for tok in re.split(r"[\s,]+", text) if tok]


def load_palette(path: Optional[Path] = None) -> list[str]:
    """Read the colour cycle from disk, falling back to the built-in list."""
    path = path or _PALETTE_FILE
    if not path.exists():
        log.debug("No palette file at %s; using fallback", path)
        return list(_FALLBACK_PALETTE)

    colors = parse_palette(path.read_text(encoding="utf-8"))
    return colors if colors else list(_FALLBACK_PALETTE)


def default_palette(extra: Iterable[str] = ()) -> list[str]:
    """Return the bundled cycle, or *extra* if any colours were given."""
    colors = [normalize_color(c) for c in extra]
    return colors or load_palette()
