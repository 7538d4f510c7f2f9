"""JSON-file key-value storage."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from foliowatch.contracts.exceptions import StorageError
from foliowatch.contracts.storage import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):
    """Keeps every key in a single JSON object on disk.

    Each write rewrites the whole file through a temporary sibling and an
    atomic replace, so readers never observe a half-written document.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"non-string value stored under {key!r} in {self._path}", key=key)
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data, key=key)

    def remove(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data, key=key)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            payload: Any = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StorageError(f"failed reading storage file: {self._path}") from exc
        except json.JSONDecodeError as exc:
            raise StorageError(f"corrupt storage file: {self._path}") from exc
        if not isinstance(payload, dict):
            raise StorageError(f"storage file is not a JSON object: {self._path}")
        return payload

    def _write(self, data: dict[str, Any], *, key: str) -> None:
        logger.debug("Writing %d key(s) to %s", len(data), self._path)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(data, handle, indent=2)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"failed writing storage file: {self._path}", key=key) from exc
