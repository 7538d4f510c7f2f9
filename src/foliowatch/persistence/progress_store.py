"""Single-slot persistence of the in-flight progress record.

Every failure here is absorbed: a broken or full store only means progress
will not survive a restart, never that reconciliation stops.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from foliowatch.contracts.config import DEFAULT_STORAGE_KEY
from foliowatch.contracts.exceptions import StorageError
from foliowatch.contracts.progress import PersistedProgress, ProgressSnapshot
from foliowatch.contracts.storage import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STALE_AFTER_MS = 10 * 60 * 1000


class ProgressStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        stale_after_ms: int = DEFAULT_STALE_AFTER_MS,
    ) -> None:
        self._storage = storage
        self._key = key
        self._stale_after_ms = stale_after_ms

    @property
    def key(self) -> str:
        return self._key

    @property
    def stale_after_ms(self) -> int:
        return self._stale_after_ms

    def save(self, progress: ProgressSnapshot, scope_id: str, now_ms: int) -> None:
        record = PersistedProgress(progress=progress, timestamp=now_ms, scope_id=scope_id)
        try:
            self._storage.set(self._key, record.model_dump_json(by_alias=True))
        except StorageError as exc:
            logger.warning("Error saving progress for %s: %s", scope_id, exc)

    def peek(self) -> PersistedProgress | None:
        """Return the stored record without validating scope or age."""
        try:
            raw = self._storage.get(self._key)
        except StorageError as exc:
            logger.warning("Error reading progress record: %s", exc)
            return None
        if raw is None:
            return None
        try:
            return PersistedProgress.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Ignoring corrupt progress record: %s", exc)
            return None

    def restore(self, scope_id: str, now_ms: int) -> ProgressSnapshot | None:
        """Return the stored progress for *scope_id* if it is still usable.

        Records for another scope, stale records and corrupt records are
        removed.
        """
        try:
            raw = self._storage.get(self._key)
        except StorageError as exc:
            logger.warning("Error loading progress for %s: %s", scope_id, exc)
            return None
        if raw is None:
            return None

        try:
            record = PersistedProgress.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Discarding corrupt progress record: %s", exc)
            self.clear()
            return None

        if record.scope_id != scope_id:
            logger.debug("Discarding progress record for scope %s (active: %s)", record.scope_id, scope_id)
            self.clear()
            return None
        if not record.is_fresh(now_ms, stale_after_ms=self._stale_after_ms):
            logger.debug("Discarding stale progress record for %s (age %d ms)", scope_id, record.age_ms(now_ms))
            self.clear()
            return None

        logger.debug("Restored progress for %s: %s", scope_id, record.progress.status)
        return record.progress

    def is_adoptable(self, record: PersistedProgress, scope_id: str, now_ms: int) -> bool:
        return record.scope_id == scope_id and record.is_fresh(now_ms, stale_after_ms=self._stale_after_ms)

    def clear(self) -> None:
        try:
            self._storage.remove(self._key)
        except StorageError as exc:
            logger.warning("Error removing progress record: %s", exc)
