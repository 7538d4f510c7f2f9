"""Public API surface for foliowatch."""

__version__ = "1.0.0"

from foliowatch.config import load_config
from foliowatch.contracts.config import FolioWatchConfig, PollerConfig, ReconcilerConfig, StorageConfig
from foliowatch.contracts.exceptions import ConfigError, FolioWatchError, PollError, StorageError
from foliowatch.contracts.progress import DisplaySnapshot, PersistedProgress, ProgressSnapshot, ProgressStatus
from foliowatch.contracts.storage import KeyValueStorage
from foliowatch.engine import AsyncioTimerScheduler, ProgressReconciler, ReconcilerState, TimerScheduler
from foliowatch.persistence import ProgressStore
from foliowatch.poller import ProgressClient
from foliowatch.rendering import BannerView, NullProgressBanner, ProgressBanner, describe_banner
from foliowatch.sdk import FolioWatch, StoredProgressStatus
from foliowatch.storage import JsonFileStorage, MemoryStorage, create_storage
from foliowatch.watch import ProgressWatcher

__all__ = [
    "AsyncioTimerScheduler",
    "BannerView",
    "ConfigError",
    "DisplaySnapshot",
    "FolioWatch",
    "FolioWatchConfig",
    "FolioWatchError",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "NullProgressBanner",
    "PersistedProgress",
    "PollError",
    "PollerConfig",
    "ProgressBanner",
    "ProgressClient",
    "ProgressReconciler",
    "ProgressSnapshot",
    "ProgressStatus",
    "ProgressStore",
    "ProgressWatcher",
    "ReconcilerConfig",
    "ReconcilerState",
    "StorageConfig",
    "StorageError",
    "StoredProgressStatus",
    "TimerScheduler",
    "__version__",
    "create_storage",
    "describe_banner",
    "load_config",
]
