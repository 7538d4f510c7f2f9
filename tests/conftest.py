"""Shared test fixtures for foliowatch tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from foliowatch.contracts.config import PollerConfig, ReconcilerConfig
from foliowatch.contracts.progress import ProgressSnapshot, ProgressStatus
from foliowatch.engine.reconciler import ProgressReconciler
from foliowatch.persistence.progress_store import ProgressStore
from tests.fakes.storage import FlakyStorage
from tests.fakes.timers import ManualTimerScheduler


@pytest.fixture
def scheduler() -> ManualTimerScheduler:
    return ManualTimerScheduler()


@pytest.fixture
def storage() -> FlakyStorage:
    return FlakyStorage()


@pytest.fixture
def store(storage: FlakyStorage) -> ProgressStore:
    return ProgressStore(storage)


@pytest.fixture
def make_reconciler(
    store: ProgressStore, scheduler: ManualTimerScheduler
) -> Callable[..., ProgressReconciler]:
    def _make(**kwargs: object) -> ProgressReconciler:
        return ProgressReconciler(
            store=store,
            scheduler=scheduler,
            config=ReconcilerConfig(),
            clock=scheduler.clock,
            **kwargs,  # type: ignore[arg-type]
        )

    return _make


@pytest.fixture
def in_progress() -> ProgressSnapshot:
    return ProgressSnapshot(status=ProgressStatus.IN_PROGRESS, is_complete=False, total_expected=50, total_processed=30)


@pytest.fixture
def poller_config() -> PollerConfig:
    return PollerConfig(url_template="https://api.example.test/movements/folder/{scope_id}", interval_seconds=0.01)
