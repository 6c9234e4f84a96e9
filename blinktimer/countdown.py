"""Countdown display loop."""

from __future__ import annotations

import logging
import math
import time
from typing import Callable, Optional

from blinktimer.cycler import Cycler
from blinktimer.display import RichTerminal, Terminal
from blinktimer.interrupt import InterruptHandler
from blinktimer.models import (
    CountdownResult,
    CountdownState,
    Frame,
    RemainingTime,
    TimerConfig,
)

log = logging.getLogger(__name__)

Clock = Callable[[], float]
Wait = Callable[[float], bool]

# Slack for float comparisons between tick offsets and the deadline.
_EPS = 1e-6


def _sleep(timeout: float) -> bool:
    time.sleep(timeout)
    return False


def tick_until(
    start: float,
    deadline: float,
    tick: Callable[[float], None],
    *,
    interval: float = 1.0,
    clock: Clock = time.monotonic,
    wait: Wait = _sleep,
) -> bool:
    """Call *tick* every *interval* seconds from *start* until *deadline*.

    The first tick fires immediately. Ticks are due at ``start + k * interval``
    for every ``k`` whose due time is not past the deadline; *tick* receives
    the due time's offset from *start*. Between ticks the loop blocks in
    ``wait(timeout)``, which wakes at the next tick or at the deadline,
    whichever is sooner. Ticks missed while the process was suspended are
    dropped and only the latest one fires.

    Returns True once the deadline is reached, False if *wait* reported a
    cancellation.
    """
    span = deadline - start
    last = math.floor((span + _EPS) / interval)
    k = 0
    while k <= last:
        due = min(math.floor((clock() - start + _EPS) / interval), last)
        if due > k:
            log.debug("Dropping %d missed tick(s)", due - k)
            k = due

        tick(k * interval)
        k += 1

        target = start + k * interval if k <= last else deadline
        timeout = target - clock()
        if timeout > 0 and wait(timeout):
            return False
    return True


class Countdown:
    """Animate a ``MM:SS`` readout from a duration down to ``00:00``.

    The deadline is ``now + duration + 1s`` so that the final frame shows
    ``00:00``. Each tick takes the next separator from a two-item blink
    cycle and the next colour from the palette cycle, moves the cursor back
    to the saved position and writes the frame over the previous one.

    The cursor is shown again however the loop ends. An engine runs once.
    """

    def __init__(
        self,
        terminal: Terminal,
        config: TimerConfig,
        *,
        clock: Clock = time.monotonic,
        interrupt: Optional[InterruptHandler] = None,
    ) -> None:
        self.terminal = terminal
        self.config = config
        self.state = CountdownState.IDLE
        self.frames = 0
        self.last_frame: Optional[Frame] = None
        self._clock = clock
        self._wait: Wait = interrupt.wait if interrupt is not None else _sleep
        self._blinker: Cycler[str] = Cycler(*config.blink)
        self._colors: Cycler[str] = Cycler(*config.palette)

    def _tick(self, elapsed: float) -> None:
        remaining = RemainingTime.from_seconds(self.config.span_seconds - elapsed)
        frame = Frame.build(remaining, self._blinker(), self._colors())
        self.terminal.restore_cursor_position()
        self.terminal.write(frame.text, frame.color)
        self.frames += 1
        self.last_frame = frame

    def run(self) -> CountdownResult:
        """Count down to the deadline. Blocks until done or interrupted."""
        if self.state is not CountdownState.IDLE:
            raise RuntimeError(f"countdown already {self.state.value}")
        self.state = CountdownState.COUNTING

        start = self._clock()
        deadline = self.config.deadline_from(start)
        log.debug(
            "Counting down %.3fs, deadline in %.3fs",
            self.config.duration.total_seconds(),
            deadline - start,
        )

        self.terminal.hide_cursor()
        try:
            self.terminal.save_cursor_position()
            finished = tick_until(
                start,
                deadline,
                self._tick,
                interval=self.config.interval,
                clock=self._clock,
                wait=self._wait,
            )
        except KeyboardInterrupt:
            finished = False
        finally:
            # Leave the cursor at the start of the readout so the next line
            # written replaces it.
            self.terminal.restore_cursor_position()
            self.terminal.show_cursor()

        self.state = CountdownState.DONE if finished else CountdownState.INTERRUPTED
        log.debug("Countdown %s after %d frame(s)", self.state.value, self.frames)
        return CountdownResult(state=self.state, frames=self.frames, last_frame=self.last_frame)


def run_countdown(config: TimerConfig, terminal: Optional[Terminal] = None) -> CountdownResult:
    """Run a countdown on the terminal with Ctrl-C handling installed."""
    terminal = terminal or RichTerminal()
    with InterruptHandler() as interrupt:
        return Countdown(terminal, config, interrupt=interrupt).run()
