"""Scraping progress reconciliation.

The remote API reports a progress snapshot only while a bulk fetch is
running, and simply stops reporting once it is done. :class:`ProgressReconciler`
turns that signal into something stable to show: progress never vanishes
mid-run, never flickers back to zero, and a finished run is confirmed with a
short ``completing`` -> ``completed`` sequence before the display clears.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import StrEnum

from foliowatch.contracts.config import ReconcilerConfig
from foliowatch.contracts.exceptions import ConfigError
from foliowatch.contracts.progress import DisplaySnapshot, ProgressSnapshot, ProgressStatus
from foliowatch.engine.timers import ReconcilerTimers, TimerScheduler
from foliowatch.persistence.progress_store import ProgressStore

logger = logging.getLogger(__name__)

DisplayListener = Callable[[DisplaySnapshot | None], None]


class ReconcilerState(StrEnum):
    IDLE = "idle"
    LIVE = "live"
    COMPLETING = "completing"
    COMPLETED = "completed"


def _now_ms() -> int:
    return int(time.time() * 1000)


def _clamp_live(progress: ProgressSnapshot) -> ProgressSnapshot:
    if progress.total_expected > 0 and progress.total_processed > progress.total_expected:
        return progress.model_copy(update={"total_processed": progress.total_expected})
    return progress


def _synthesized(previous: ProgressSnapshot, *, completed: bool) -> DisplaySnapshot:
    processed = previous.total_expected if previous.total_expected > 0 else previous.total_processed
    return DisplaySnapshot(
        status=ProgressStatus.COMPLETED if completed else ProgressStatus.COMPLETING,
        is_complete=completed,
        total_expected=previous.total_expected,
        total_processed=processed,
        just_completed=completed,
    )


class ProgressReconciler:
    """Smooths server-reported progress for one active scope at a time.

    Call :meth:`reconcile` whenever the polled snapshot or the active scope
    changes. The result (also pushed to listeners, including changes made by
    the synthesized-phase timers) is what should be displayed; ``None`` means
    show nothing.

    The store owns persistence: when *config* is given, its ``stale_after_ms``
    and ``storage_key`` must match the store, otherwise :class:`ConfigError`
    is raised.
    """

    def __init__(
        self,
        *,
        store: ProgressStore,
        scheduler: TimerScheduler,
        config: ReconcilerConfig | None = None,
        clock: Callable[[], int] | None = None,
        on_change: DisplayListener | None = None,
    ) -> None:
        if config is None:
            config = ReconcilerConfig(stale_after_ms=store.stale_after_ms, storage_key=store.key)
        elif (config.stale_after_ms, config.storage_key) != (store.stale_after_ms, store.key):
            raise ConfigError("reconciler config disagrees with its progress store on stale_after_ms or storage_key")
        self._store = store
        self._config = config
        self._clock = clock or _now_ms
        self._timers = ReconcilerTimers(scheduler)
        self._listeners: list[DisplayListener] = []
        if on_change is not None:
            self._listeners.append(on_change)

        self._activated = False
        self._scope_id: str | None = None
        self._previous: ProgressSnapshot | None = None
        self._display: DisplaySnapshot | None = None
        self._state = ReconcilerState.IDLE

    @property
    def state(self) -> ReconcilerState:
        return self._state

    @property
    def display(self) -> DisplaySnapshot | None:
        return self._display

    @property
    def scope_id(self) -> str | None:
        return self._scope_id

    @property
    def has_pending_timer(self) -> bool:
        return self._timers.pending

    def add_listener(self, listener: DisplayListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: DisplayListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def reconcile(self, server_snapshot: ProgressSnapshot | None, scope_id: str | None) -> DisplaySnapshot | None:
        if not self._activated or scope_id != self._scope_id:
            self._activate(scope_id, server_snapshot)
        if self._scope_id is None:
            return None
        return self._apply(server_snapshot, self._scope_id)

    def update(self, server_snapshot: ProgressSnapshot | None) -> DisplaySnapshot | None:
        """Reconcile a new server snapshot for the current scope."""
        return self.reconcile(server_snapshot, self._scope_id)

    def close(self) -> None:
        self._timers.cancel_all()

    # -- transitions ---------------------------------------------------------

    def _activate(self, scope_id: str | None, server_snapshot: ProgressSnapshot | None) -> None:
        self._timers.cancel_all()
        if self._activated:
            logger.debug("Scope changed: %s -> %s", self._scope_id, scope_id)
        self._activated = True
        self._scope_id = scope_id
        self._previous = None
        self._state = ReconcilerState.IDLE
        self._set_display(None)

        # Server truth wins over anything persisted by an earlier session.
        if scope_id is None or server_snapshot is not None:
            return
        self._previous = self._store.restore(scope_id, self._clock())

    def _apply(self, server_snapshot: ProgressSnapshot | None, scope_id: str) -> DisplaySnapshot | None:
        if server_snapshot is not None and not server_snapshot.is_stuck_pending:
            self._timers.cancel_all()
            self._store.save(server_snapshot, scope_id, self._clock())
            self._previous = server_snapshot
            self._set_state(ReconcilerState.LIVE)
            self._set_display(DisplaySnapshot.from_progress(_clamp_live(server_snapshot)))
        elif self._state in (ReconcilerState.COMPLETING, ReconcilerState.COMPLETED):
            pass
        elif self._previous is not None and not self._previous.is_terminal:
            self._enter_completing(self._previous)
        else:
            if self._previous is not None:
                self._store.clear()
            self._previous = None
            self._set_state(ReconcilerState.IDLE)
            self._set_display(None)
        return self._display

    def _enter_completing(self, previous: ProgressSnapshot) -> None:
        self._set_state(ReconcilerState.COMPLETING)
        self._set_display(_synthesized(previous, completed=False))
        self._timers.start_completing(self._config.completing_delay_ms, self._on_completing_elapsed)

    def _on_completing_elapsed(self) -> None:
        if self._state is not ReconcilerState.COMPLETING or self._previous is None:
            return
        self._set_state(ReconcilerState.COMPLETED)
        self._set_display(_synthesized(self._previous, completed=True))
        self._timers.start_completed(self._config.completed_delay_ms, self._on_completed_elapsed)

    def _on_completed_elapsed(self) -> None:
        if self._state is not ReconcilerState.COMPLETED:
            return
        self._previous = None
        self._store.clear()
        self._set_state(ReconcilerState.IDLE)
        self._set_display(None)

    # -- helpers -------------------------------------------------------------

    def _set_state(self, state: ReconcilerState) -> None:
        if state is not self._state:
            logger.debug("Progress %s: %s -> %s", self._scope_id, self._state, state)
        self._state = state

    def _set_display(self, display: DisplaySnapshot | None) -> None:
        if display == self._display:
            return
        self._display = display
        for listener in list(self._listeners):
            listener(display)
