"""
Console Kernel: Timers

Single-shot delayed callbacks for the simulated round trips (dashboard
loading, report generation, login). Screens keep the handle they get back
and cancel it on teardown so a late callback never touches a closed screen.

Two schedulers share one interface:
  AsyncioScheduler: loop.call_later on the running event loop
  ManualScheduler:  virtual clock advanced by hand (tests, headless hosts)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TimerHandle:
    """A pending callback. cancel() is idempotent and safe after firing."""

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self.cancelled = False
        self.fired = False
        self._on_cancel: Callable[[], None] | None = None

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        if not self.active:
            return
        self.cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()

    def _fire(self) -> None:
        if not self.active:
            return
        self.fired = True
        self._callback()


class Scheduler:
    """Abstract scheduler. Subclasses implement call_later()."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        raise NotImplementedError


class AsyncioScheduler(Scheduler):
    """Schedules on the running asyncio loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        handle = TimerHandle(callback)
        loop_handle = loop.call_later(max(delay, 0.0), handle._fire)
        handle._on_cancel = loop_handle.cancel
        return handle


class ManualScheduler(Scheduler):
    """
    Virtual clock. Nothing fires until advance() moves time past a
    callback's due time. Callbacks due at the same time fire in the order
    they were scheduled.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._seq = 0
        self._pending: list[tuple[float, int, TimerHandle]] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(callback)
        self._seq += 1
        entry = (self.now + max(delay, 0.0), self._seq, handle)
        self._pending.append(entry)

        def drop() -> None:
            if entry in self._pending:
                self._pending.remove(entry)

        handle._on_cancel = drop
        return handle

    @property
    def pending(self) -> int:
        return len(self._pending)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing everything that comes due. Returns the count fired."""
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards: {seconds}")
        deadline = self.now + seconds
        fired = 0
        while True:
            due = [e for e in self._pending if e[0] <= deadline]
            if not due:
                break
            entry = min(due, key=lambda e: (e[0], e[1]))
            self._pending.remove(entry)
            self.now = max(self.now, entry[0])
            entry[2]._fire()
            fired += 1
        self.now = deadline
        return fired

    def run_all(self) -> int:
        """Fire everything pending, including callbacks scheduled while firing."""
        fired = 0
        while self._pending:
            latest = max(e[0] for e in self._pending)
            fired += self.advance(latest - self.now)
        return fired
