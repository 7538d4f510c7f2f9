"""Cancelable deferred callbacks for the reconciler's synthesized phases."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerScheduler(ABC):
    """Runs a callback once after a delay on the caller's event loop."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Schedule *callback* to run after *delay_ms* milliseconds."""
        ...  # pragma: no cover


class AsyncioTimerScheduler(TimerScheduler):
    """Schedules on an asyncio loop (the running loop unless one is given)."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, callback)


class ReconcilerTimers:
    """Owns the completing and completed timer handles of one reconciler."""

    def __init__(self, scheduler: TimerScheduler) -> None:
        self._scheduler = scheduler
        self._completing: TimerHandle | None = None
        self._completed: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._completing is not None or self._completed is not None

    def start_completing(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.cancel_all()

        def _fire() -> None:
            self._completing = None
            callback()

        self._completing = self._scheduler.call_later(delay_ms, _fire)

    def start_completed(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.cancel_all()

        def _fire() -> None:
            self._completed = None
            callback()

        self._completed = self._scheduler.call_later(delay_ms, _fire)

    def cancel_all(self) -> None:
        if self._completing is not None:
            self._completing.cancel()
            self._completing = None
        if self._completed is not None:
            self._completed.cancel()
            self._completed = None
