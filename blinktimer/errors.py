"""Exceptions raised for bad user input."""

from __future__ import annotations


class InvalidDurationError(ValueError):
    """The duration string could not be parsed, or was negative."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"invalid duration {text!r}: {reason}")
        self.text = text
        self.reason = reason


class InvalidColorError(ValueError):
    """A palette entry is not a colour rich can render."""

    def __init__(self, code: str) -> None:
        super().__init__(f"invalid color {code!r}")
        self.code = code
