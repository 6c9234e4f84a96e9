"""Pydantic models — single source of truth for all data types."""

from __future__ import annotations

import enum
from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from blinktimer.palette import load_palette, normalize_color

# Added to the countdown so the last frame shows 00:00 instead of stopping
# one tick early.
DEADLINE_PAD = timedelta(seconds=1)


class CountdownState(str, enum.Enum):
    """Countdown engine lifecycle states."""

    IDLE = "idle"
    COUNTING = "counting"
    DONE = "done"
    INTERRUPTED = "interrupted"


class TimerConfig(BaseModel):
    """Settings for a single countdown."""

    duration: timedelta
    interval: float = Field(default=1.0, gt=0)
    blink: tuple[str, str] = (":", " ")
    palette: list[str] = Field(default_factory=load_palette, min_length=1)
    expired_color: str = "#ff0000"
    bell: bool = True

    @field_validator("duration")
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must not be negative")
        return value

    @field_validator("palette")
    @classmethod
    def _known_colors(cls, value: list[str]) -> list[str]:
        return [normalize_color(c) for c in value]

    @property
    def span_seconds(self) -> float:
        """Seconds from start to deadline, pad included."""
        return (self.duration + DEADLINE_PAD).total_seconds()

    def deadline_from(self, start: float) -> float:
        """Deadline on the same clock as *start*."""
        return start + self.span_seconds


class RemainingTime(BaseModel):
    """Whole minutes and seconds left until the deadline."""

    minutes: int = Field(ge=0)
    seconds: int = Field(ge=0, lt=60)

    @classmethod
    def from_seconds(cls, remaining: float) -> RemainingTime:
        # Rounding to microseconds keeps float noise from dropping a second.
        total = int(round(max(remaining, 0.0), 6))
        return cls(minutes=total // 60, seconds=total % 60)


class Frame(BaseModel):
    """One rendered readout: ``MM<sep>SS`` and its foreground colour."""

    text: str
    color: str

    @classmethod
    def build(cls, remaining: RemainingTime, separator: str, color: str) -> Frame:
        return cls(
            text=f"{remaining.minutes:02d}{separator}{remaining.seconds:02d}",
            color=color,
        )


class CountdownResult(BaseModel):
    """Outcome of one countdown run."""

    state: CountdownState
    frames: int = Field(default=0, ge=0)
    last_frame: Optional[Frame] = None
    finished_at: datetime = Field(default_factory=datetime.now)

    @property
    def completed(self) -> bool:
        return self.state == CountdownState.DONE
