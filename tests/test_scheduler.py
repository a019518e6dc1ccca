# Area: Engine Tests
"""Tests for the deadline schedulers."""

import threading
from unittest.mock import MagicMock

from memory_game._engine.scheduler import ThreadingScheduler, VirtualScheduler


class TestVirtualScheduler:
    """Tests for the manually advanced clock."""

    def test_starts_at_zero(self):
        assert VirtualScheduler().now == 0.0

    def test_callback_not_fired_before_due(self):
        scheduler = VirtualScheduler()
        callback = MagicMock()
        scheduler.after(5, callback)
        assert scheduler.advance(4.9) == 0
        callback.assert_not_called()
        assert scheduler.pending() == 1

    def test_callback_fired_when_due(self):
        scheduler = VirtualScheduler()
        callback = MagicMock()
        scheduler.after(5, callback)
        assert scheduler.advance(5) == 1
        callback.assert_called_once()
        assert scheduler.pending() == 0

    def test_cancelled_callback_never_fires(self):
        scheduler = VirtualScheduler()
        callback = MagicMock()
        handle = scheduler.after(1, callback)
        handle.cancel()
        assert scheduler.pending() == 0
        assert scheduler.advance(10) == 0
        callback.assert_not_called()

    def test_fires_in_deadline_order(self):
        scheduler = VirtualScheduler()
        order = []
        scheduler.after(3, lambda: order.append("late"))
        scheduler.after(1, lambda: order.append("early"))
        scheduler.advance(5)
        assert order == ["early", "late"]

    def test_clock_reads_due_time_inside_callback(self):
        scheduler = VirtualScheduler()
        seen = []
        scheduler.after(2, lambda: seen.append(scheduler.now))
        scheduler.advance(10)
        assert seen == [2]
        assert scheduler.now == 10

    def test_chained_callbacks_within_window_fire(self):
        scheduler = VirtualScheduler()
        fired = []

        def first():
            fired.append("first")
            scheduler.after(2, lambda: fired.append("second"))

        scheduler.after(1, first)
        assert scheduler.advance(3) == 2
        assert fired == ["first", "second"]

    def test_chained_callback_beyond_window_waits(self):
        scheduler = VirtualScheduler()
        second = MagicMock()
        scheduler.after(1, lambda: scheduler.after(5, second))
        scheduler.advance(3)
        second.assert_not_called()
        scheduler.advance(3)
        second.assert_called_once()


class TestThreadingScheduler:
    """Tests for the wall-clock scheduler."""

    def test_runs_callback(self):
        done = threading.Event()
        ThreadingScheduler().after(0.01, done.set)
        assert done.wait(2)

    def test_cancel_prevents_callback(self):
        callback = MagicMock()
        handle = ThreadingScheduler().after(0.5, callback)
        handle.cancel()
        handle.join(2)
        callback.assert_not_called()

    def test_threads_are_daemons(self):
        handle = ThreadingScheduler().after(10, MagicMock())
        try:
            assert handle.daemon is True
        finally:
            handle.cancel()
