"""Scripted progress client fake."""

from __future__ import annotations

from foliowatch.contracts.progress import ProgressSnapshot


class ScriptedProgressClient:
    """Returns (or raises) scripted results in order, then ``None`` forever."""

    def __init__(self, results: list[ProgressSnapshot | Exception | None]) -> None:
        self._results = list(results)
        self.calls: list[str] = []

    async def fetch(self, scope_id: str) -> ProgressSnapshot | None:
        self.calls.append(scope_id)
        if not self._results:
            return None
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def __aenter__(self) -> ScriptedProgressClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        pass
