"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path
from string import Formatter
from typing import Literal
from urllib.parse import quote

from pydantic import BaseModel, Field, model_validator

DEFAULT_STORAGE_KEY = "scrapingProgress"


class ReconcilerConfig(BaseModel):
    stale_after_ms: int = Field(default=10 * 60 * 1000, gt=0)
    completing_delay_ms: int = Field(default=2000, ge=0)
    completed_delay_ms: int = Field(default=5000, ge=0)
    storage_key: str = Field(default=DEFAULT_STORAGE_KEY, min_length=1)

    model_config = {"frozen": True}


class PollerConfig(BaseModel):
    url_template: str
    progress_field: str = DEFAULT_STORAGE_KEY
    interval_seconds: float = Field(default=30.0, gt=0)
    timeout_seconds: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=3, ge=0, le=10)
    token: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_url_template(self) -> PollerConfig:
        try:
            fields = {name for _, name, _, _ in Formatter().parse(self.url_template) if name is not None}
        except ValueError as exc:
            raise ValueError(f"url_template is not a valid format string: {exc}") from exc
        if fields != {"scope_id"}:
            raise ValueError("url_template must contain {scope_id} and no other placeholder")
        if not self.url_template.startswith(("http://", "https://")):
            raise ValueError("url_template must be an http(s) URL")
        return self

    def url_for(self, scope_id: str) -> str:
        return self.url_template.format(scope_id=quote(scope_id, safe=""))


class StorageConfig(BaseModel):
    backend: Literal["file", "memory"] = "file"
    path: Path | None = Path("foliowatch-state.json")
    quota: int | None = Field(default=None, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_backend(self) -> StorageConfig:
        if self.backend == "file" and self.path is None:
            raise ValueError("file storage requires a path")
        return self


class FolioWatchConfig(BaseModel):
    poller: PollerConfig
    reconciler: ReconcilerConfig = Field(default_factory=ReconcilerConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    model_config = {"frozen": True}
