"""Ctrl-C handling for the countdown.

While active, SIGINT (and SIGTERM outside Windows) no longer raises
``KeyboardInterrupt``. The handler runs ``on_interrupt`` straight away,
which the countdown uses to show the cursor again, then sets a flag that
wakes the tick loop so it can stop.
"""

from __future__ import annotations

import logging
import signal
import sys
import threading
from types import FrameType
from typing import Any, Callable, Optional

log = logging.getLogger(__name__)


class InterruptHandler:
    """Context manager that turns termination signals into a cancellation flag.

    Example::

        with InterruptHandler(on_interrupt=terminal.show_cursor) as interrupt:
            while not interrupt.cancelled:
                do_work()
                interrupt.wait(1.0)  # returns early on Ctrl-C
    """

    def __init__(self, on_interrupt: Optional[Callable[[], None]] = None) -> None:
        self._event = threading.Event()
        self._on_interrupt = on_interrupt
        self._previous: dict[int, Any] = {}

    @staticmethod
    def _signals() -> list[int]:
        if sys.platform == "win32":
            return [signal.SIGINT]
        return [signal.SIGINT, signal.SIGTERM]

    def __enter__(self) -> InterruptHandler:
        if threading.current_thread() is not threading.main_thread():
            log.debug("Not on the main thread; signal handlers not installed")
            return self
        for signum in self._signals():
            self._previous[signum] = signal.signal(signum, self._handle)
        return self

    def __exit__(self, *exc_info: object) -> None:
        for signum, handler in self._previous.items():
            signal.signal(signum, handler)
        self._previous.clear()

    def _handle(self, signum: int, frame: Optional[FrameType]) -> None:
        log.info("Interrupted by signal %d", signum)
        if self._on_interrupt is not None:
            self._on_interrupt()
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation without a signal."""
        self._event.set()

    def wait(self, timeout: float) -> bool:
        """Block for up to *timeout* seconds. True if cancelled."""
        return self._event.wait(timeout)
