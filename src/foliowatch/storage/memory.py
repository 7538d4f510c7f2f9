"""In-memory key-value storage."""

from __future__ import annotations

from foliowatch.contracts.exceptions import StorageError
from foliowatch.contracts.storage import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    """Dict-backed storage, lost when the process exits.

    When *quota* is set, writes that would push the total stored characters
    (keys plus values) above it fail the way a full ``localStorage`` does.
    """

    def __init__(self, *, quota: int | None = None) -> None:
        self._data: dict[str, str] = {}
        self._quota = quota

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota is not None:
            used = sum(len(k) + len(v) for k, v in self._data.items() if k != key)
            if used + len(key) + len(value) > self._quota:
                raise StorageError(f"storage quota exceeded writing {key!r}", key=key)
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)
