# Area: Engine
"""
memory_game._engine.timer — Single-deadline timer controller
============================================================

Owns the one outstanding deadline of a game instance. Arming replaces
any pending deadline; disarming is idempotent. Each arm gets a new
generation number, and a firing callback whose generation is no longer
current is dropped, so a deadline that races with a disarm can never
act on a superseded state.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .scheduler import Scheduler, ScheduledHandle

logger = logging.getLogger("memory_game.timer")


class TimerController:
    """
    At most one pending deadline, guarded by the owner's lock.

    Args:
        scheduler: Backend that runs callbacks after a delay
        lock: The owning engine's lock; fired callbacks run under it
        on_fired: Called after a deadline callback completes, outside
            the lock (used to broadcast state changes)
    """

    def __init__(
        self,
        scheduler: Scheduler,
        lock: threading.RLock,
        on_fired: Optional[Callable[[], None]] = None,
    ):
        self._scheduler = scheduler
        self._lock = lock
        self._on_fired = on_fired
        self._handle: Optional[ScheduledHandle] = None
        self._generation = 0
        self._label: Optional[str] = None

    @property
    def is_armed(self) -> bool:
        return self._handle is not None

    @property
    def label(self) -> Optional[str]:
        """Name of the pending deadline, or None when disarmed."""
        return self._label

    def arm(self, seconds: float, callback: Callable[[], None], label: str = "") -> None:
        """Schedule ``callback`` in ``seconds``, replacing any pending deadline."""
        with self._lock:
            self.disarm()
            self._generation += 1
            generation = self._generation
            self._label = label or getattr(callback, "__name__", "deadline")
            self._handle = self._scheduler.after(
                seconds, lambda: self._fire(generation, callback)
            )
            logger.debug("Deadline armed: %s in %.1fs (gen=%d)",
                         self._label, seconds, generation)

    def disarm(self) -> None:
        """Cancel the pending deadline. No-op if none."""
        with self._lock:
            if self._handle is None:
                return
            self._handle.cancel()
            self._handle = None
            # Invalidate a callback that is already past cancel()
            self._generation += 1
            logger.debug("Deadline disarmed: %s", self._label)
            self._label = None

    def _fire(self, generation: int, callback: Callable[[], None]) -> None:
        with self._lock:
            if generation != self._generation or self._handle is None:
                logger.debug("Stale deadline dropped (gen=%d, current=%d)",
                             generation, self._generation)
                return
            logger.debug("Deadline fired: %s", self._label)
            self._handle = None
            self._label = None
            callback()
        if self._on_fired is not None:
            self._on_fired()
