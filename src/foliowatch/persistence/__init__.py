"""Progress record persistence."""

from foliowatch.persistence.progress_store import DEFAULT_STALE_AFTER_MS, ProgressStore

__all__ = ["DEFAULT_STALE_AFTER_MS", "ProgressStore"]
