"""Exception hierarchy for foliowatch."""

from __future__ import annotations


class FolioWatchError(Exception):
    """Base exception for all foliowatch errors."""


class ConfigError(FolioWatchError):
    """Configuration loading or validation failure."""


class StorageError(FolioWatchError):
    """Key-value storage read/write/remove failure."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class PollError(FolioWatchError):
    """Remote progress fetch failure."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
