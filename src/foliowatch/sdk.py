"""Public SDK entrypoint for foliowatch."""

from __future__ import annotations

import time
from collections.abc import Callable

from pydantic import BaseModel

from foliowatch.contracts.config import FolioWatchConfig
from foliowatch.contracts.progress import DisplaySnapshot, PersistedProgress
from foliowatch.contracts.storage import KeyValueStorage
from foliowatch.engine.reconciler import DisplayListener, ProgressReconciler
from foliowatch.engine.timers import AsyncioTimerScheduler, TimerScheduler
from foliowatch.persistence.progress_store import ProgressStore
from foliowatch.poller.client import ProgressClient
from foliowatch.rendering.banner import ProgressBanner
from foliowatch.storage.factory import create_storage
from foliowatch.watch import ProgressWatcher


class StoredProgressStatus(BaseModel):
    """The persisted record as seen from a given scope at a given time."""

    record: PersistedProgress | None = None
    scope_id: str | None = None
    age_ms: int | None = None
    adoptable: bool = False


def _now_ms() -> int:
    return int(time.time() * 1000)


class FolioWatch:
    """foliowatch SDK public API."""

    def __init__(
        self,
        *,
        config: FolioWatchConfig,
        storage: KeyValueStorage,
        scheduler: TimerScheduler | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._config = config
        self._storage = storage
        self._scheduler = scheduler or AsyncioTimerScheduler()
        self._clock = clock or _now_ms
        self._store = ProgressStore(
            storage,
            key=config.reconciler.storage_key,
            stale_after_ms=config.reconciler.stale_after_ms,
        )

    @classmethod
    def from_config(cls, config: FolioWatchConfig, *, storage: KeyValueStorage | None = None) -> FolioWatch:
        return cls(config=config, storage=storage or create_storage(config.storage))

    @property
    def config(self) -> FolioWatchConfig:
        return self._config

    @property
    def store(self) -> ProgressStore:
        return self._store

    def create_reconciler(self, *, on_change: DisplayListener | None = None) -> ProgressReconciler:
        return ProgressReconciler(
            store=self._store,
            scheduler=self._scheduler,
            config=self._config.reconciler,
            clock=self._clock,
            on_change=on_change,
        )

    async def watch(
        self,
        scope_id: str,
        *,
        banner: ProgressBanner | None = None,
        client: ProgressClient | None = None,
    ) -> DisplaySnapshot | None:
        """Poll *scope_id* until its progress has run its course; return the last displayed state."""
        reconciler = self.create_reconciler()
        if client is not None:
            watcher = ProgressWatcher(
                client, reconciler, banner, interval_seconds=self._config.poller.interval_seconds
            )
            return await watcher.run(scope_id)

        async with ProgressClient(self._config.poller) as owned_client:
            watcher = ProgressWatcher(
                owned_client, reconciler, banner, interval_seconds=self._config.poller.interval_seconds
            )
            return await watcher.run(scope_id)

    def status(self, scope_id: str | None = None) -> StoredProgressStatus:
        """Inspect the persisted record without modifying it."""
        record = self._store.peek()
        if record is None:
            return StoredProgressStatus(scope_id=scope_id)
        now = self._clock()
        adoptable = scope_id is not None and self._store.is_adoptable(record, scope_id, now)
        return StoredProgressStatus(record=record, scope_id=scope_id, age_ms=record.age_ms(now), adoptable=adoptable)

    def clear(self) -> None:
        """Remove the persisted record.

        Raises:
            StorageError: If the backing store cannot be written.
        """
        self._storage.remove(self._config.reconciler.storage_key)
