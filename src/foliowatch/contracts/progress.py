"""Progress snapshot contracts.

JSON field names follow the remote API (camelCase); attributes are snake_case.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ProgressStatus(StrEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    PARTIAL = "partial"
    ERROR = "error"
    COMPLETING = "completing"
    COMPLETED = "completed"


class ProgressSnapshot(BaseModel):
    """One progress report for a bulk fetch of a scope's movements."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: ProgressStatus
    is_complete: bool = Field(default=False, alias="isComplete")
    total_expected: int = Field(default=0, ge=0, alias="totalExpected")
    total_processed: int = Field(default=0, ge=0, alias="totalProcessed")

    @property
    def is_stuck_pending(self) -> bool:
        """The server accepted the job but has not fetched anything yet."""
        return self.status is ProgressStatus.PENDING and self.total_processed == 0

    @property
    def is_terminal(self) -> bool:
        return self.is_complete or self.status is ProgressStatus.COMPLETED

    @property
    def percentage(self) -> int:
        if self.total_expected <= 0:
            return 0
        return round(self.total_processed / self.total_expected * 100)

    def to_json_dict(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


class DisplaySnapshot(ProgressSnapshot):
    """A snapshot ready for presentation."""

    just_completed: bool = Field(default=False, alias="justCompleted")

    @classmethod
    def from_progress(cls, progress: ProgressSnapshot, *, just_completed: bool = False) -> DisplaySnapshot:
        return cls(
            status=progress.status,
            is_complete=progress.is_complete,
            total_expected=progress.total_expected,
            total_processed=progress.total_processed,
            just_completed=just_completed,
        )


class PersistedProgress(BaseModel):
    """The single durable progress record, keyed implicitly by scope."""

    model_config = ConfigDict(populate_by_name=True)

    progress: ProgressSnapshot
    timestamp: int
    scope_id: str = Field(alias="scopeId")

    def age_ms(self, now_ms: int) -> int:
        return now_ms - self.timestamp

    def is_fresh(self, now_ms: int, *, stale_after_ms: int) -> bool:
        return self.age_ms(now_ms) < stale_after_ms
