"""Tests for Ctrl-C handling."""

from __future__ import annotations

import signal
import threading
from unittest.mock import MagicMock

from blinktimer.interrupt import InterruptHandler


class TestInterruptHandler:
    def test_not_cancelled_initially(self) -> None:
        handler = InterruptHandler()
        assert not handler.cancelled
        assert handler.wait(0) is False

    def test_cancel(self) -> None:
        handler = InterruptHandler()
        handler.cancel()
        assert handler.cancelled
        assert handler.wait(5) is True

    def test_sigint_sets_flag_and_calls_callback(self) -> None:
        on_interrupt = MagicMock()
        with InterruptHandler(on_interrupt=on_interrupt) as handler:
            signal.raise_signal(signal.SIGINT)
            assert handler.cancelled
        on_interrupt.assert_called_once_with()

    def test_restores_previous_handler(self) -> None:
        before = signal.getsignal(signal.SIGINT)
        with InterruptHandler():
            assert signal.getsignal(signal.SIGINT) is not before
        assert signal.getsignal(signal.SIGINT) is before

    def test_handle_without_callback(self) -> None:
        handler = InterruptHandler()
        handler._handle(signal.SIGINT, None)
        assert handler.cancelled

    def test_skipped_off_main_thread(self) -> None:
        before = signal.getsignal(signal.SIGINT)
        seen: list[object] = []

        def enter() -> None:
            with InterruptHandler():
                seen.append(signal.getsignal(signal.SIGINT))

        worker = threading.Thread(target=enter)
        worker.start()
        worker.join()
        assert seen == [before]
