"""Async client fetching a scope's progress snapshot from the remote API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from foliowatch.contracts.config import PollerConfig
from foliowatch.contracts.exceptions import PollError
from foliowatch.contracts.progress import ProgressSnapshot
from foliowatch.poller._retrying_transport import RetryingTransport

logger = logging.getLogger(__name__)

# Same first page the folder view requests; progress rides along with it.
_DEFAULT_PARAMS = {"page": "1", "limit": "10", "sort": "-time"}


class ProgressClient:
    """Fetches ``ProgressSnapshot`` values for a scope.

    The remote endpoint returns a JSON object; the snapshot lives under
    ``config.progress_field`` and is absent or ``null`` when no fetch is
    running.
    """

    def __init__(self, config: PollerConfig, *, http_client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=config.timeout_seconds,
            transport=RetryingTransport(max_retries=config.max_retries),
            headers=self._headers(config),
        )

    @staticmethod
    def _headers(config: PollerConfig) -> dict[str, str]:
        headers = {"Accept": "application/json", "User-Agent": "foliowatch"}
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"
        return headers

    async def __aenter__(self) -> ProgressClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def fetch(self, scope_id: str) -> ProgressSnapshot | None:
        """Return the current snapshot for *scope_id*, or ``None`` if the server reports none.

        Raises:
            PollError: On transport failure, non-2xx status or an unreadable body.
        """
        url = self._config.url_for(scope_id)
        logger.debug("GET %s", url)
        try:
            response = await self._http.get(url, params=_DEFAULT_PARAMS)
        except httpx.HTTPError as exc:
            raise PollError(f"progress request failed for {scope_id}: {exc}") from exc

        if not response.is_success:
            raise PollError(
                f"progress request for {scope_id} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise PollError(f"progress response for {scope_id} is not JSON") from exc
        if not isinstance(payload, dict):
            raise PollError(f"progress response for {scope_id} is not a JSON object")

        raw = payload.get(self._config.progress_field)
        if raw is None:
            return None
        try:
            return ProgressSnapshot.model_validate(raw)
        except ValidationError as exc:
            raise PollError(f"invalid progress snapshot for {scope_id}: {exc}") from exc
