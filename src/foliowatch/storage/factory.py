"""Storage backend factory."""

from __future__ import annotations

from foliowatch.contracts.config import StorageConfig
from foliowatch.contracts.exceptions import ConfigError
from foliowatch.contracts.storage import KeyValueStorage
from foliowatch.storage.file import JsonFileStorage
from foliowatch.storage.memory import MemoryStorage


def create_storage(config: StorageConfig) -> KeyValueStorage:
    if config.backend == "memory":
        return MemoryStorage(quota=config.quota)
    if config.backend == "file":
        if config.path is None:
            raise ConfigError("file storage requires a path")
        return JsonFileStorage(config.path)
    raise ConfigError(f"Unknown storage backend: {config.backend!r}")
