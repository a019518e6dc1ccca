# Area: Engine
"""
memory_game._engine.scheduler — Deadline scheduling backends
============================================================

The engine never sleeps. It asks a ``Scheduler`` to run a callback
after a delay and keeps the returned handle so the deadline can be
cancelled.

* ``ThreadingScheduler`` — wall-clock deadlines on ``threading.Timer``.
* ``VirtualScheduler`` — a manually advanced clock for tests and
  simulations; callbacks run synchronously inside ``advance()``.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
from typing import Callable, List, Protocol, Tuple

logger = logging.getLogger("memory_game.scheduler")


class ScheduledHandle(Protocol):
    """Handle for one scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from running. Idempotent."""
        ...


class Scheduler(Protocol):
    """Protocol for deadline schedulers."""

    def after(self, seconds: float, callback: Callable[[], None]) -> ScheduledHandle:
        """Run ``callback`` once, ``seconds`` from now."""
        ...


class ThreadingScheduler:
    """Schedules callbacks on daemon ``threading.Timer`` threads."""

    def after(self, seconds: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(seconds, callback)
        timer.daemon = True
        timer.start()
        return timer


class _VirtualHandle:
    def __init__(self, due: float):
        self.due = due
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class VirtualScheduler:
    """
    Deterministic scheduler driven by ``advance()``.

    Usage:
        scheduler = VirtualScheduler()
        game = MemoryGame(defaults, transmitter, scheduler=scheduler)
        ...
        scheduler.advance(5)   # fires every deadline due within 5s
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._counter = itertools.count()
        self._queue: List[Tuple[float, int, _VirtualHandle, Callable[[], None]]] = []

    @property
    def now(self) -> float:
        return self._now

    def after(self, seconds: float, callback: Callable[[], None]) -> _VirtualHandle:
        handle = _VirtualHandle(self._now + seconds)
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle, callback))
        return handle

    def pending(self) -> int:
        """Number of scheduled callbacks not yet fired or cancelled."""
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing due callbacks in deadline order.

        Callbacks scheduled while advancing fire too if they fall due
        before the new time. Returns the number of callbacks fired.
        """
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = due
            callback()
            fired += 1
        self._now = target
        return fired
