"""httpx async transport wrapper with retry and backoff."""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

_LOG = logging.getLogger(__name__)

# Status codes considered transient and eligible for automatic retry.
_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})

_MAX_BACKOFF_SECONDS = 8.0


class RetryingTransport(httpx.AsyncBaseTransport):
    """Retries transient progress-poll failures.

    - Transport-level errors (connection reset, timeout, ...) are retried.
    - 429 / 502 / 503 / 504 are retried, waiting at least ``Retry-After``.
    - Backoff is exponential with jitter, capped at a few seconds.

    The final response (or error) is returned unchanged once *max_retries*
    is exhausted.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries

    @property
    def max_retries(self) -> int:
        return self._max_retries

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if attempt >= self._max_retries:
                    raise
                _LOG.warning("Progress request to %s failed (%s); retrying", request.url, exc)
                await self._sleep_backoff(attempt, minimum=0.0)
                attempt += 1
                continue

            if response.status_code in _RETRYABLE_STATUS_CODES and attempt < self._max_retries:
                retry_after = self._parse_retry_after(response)
                await response.aclose()
                _LOG.warning("Progress request to %s returned %d; retrying", request.url, response.status_code)
                await self._sleep_backoff(attempt, minimum=retry_after)
                attempt += 1
                continue

            return response

    async def aclose(self) -> None:
        await self._transport.aclose()

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 0.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 0.0

    @staticmethod
    async def _sleep_backoff(attempt: int, *, minimum: float) -> None:
        seconds = min(_MAX_BACKOFF_SECONDS, float(2**attempt)) + random.uniform(0.0, 0.25)
        await asyncio.sleep(max(minimum, seconds))
