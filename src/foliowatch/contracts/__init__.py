"""Public contracts for foliowatch."""

from foliowatch.contracts.config import (
    DEFAULT_STORAGE_KEY,
    FolioWatchConfig,
    PollerConfig,
    ReconcilerConfig,
    StorageConfig,
)
from foliowatch.contracts.exceptions import ConfigError, FolioWatchError, PollError, StorageError
from foliowatch.contracts.progress import DisplaySnapshot, PersistedProgress, ProgressSnapshot, ProgressStatus
from foliowatch.contracts.storage import KeyValueStorage

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "ConfigError",
    "DisplaySnapshot",
    "FolioWatchConfig",
    "FolioWatchError",
    "KeyValueStorage",
    "PersistedProgress",
    "PollError",
    "PollerConfig",
    "ProgressSnapshot",
    "ProgressStatus",
    "ReconcilerConfig",
    "StorageConfig",
    "StorageError",
]
