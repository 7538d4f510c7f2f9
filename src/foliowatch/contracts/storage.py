"""Durable key-value storage contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """String key/value store with ``localStorage`` semantics.

    Implementations raise :class:`~foliowatch.contracts.exceptions.StorageError`
    when the backing store is unavailable, full or corrupt.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*. Removing a missing key is not an error."""
