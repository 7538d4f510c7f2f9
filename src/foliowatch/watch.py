"""Poll-reconcile-render loop for a single scope."""

from __future__ import annotations

import asyncio
import logging

from foliowatch.contracts.exceptions import PollError
from foliowatch.contracts.progress import DisplaySnapshot, ProgressSnapshot
from foliowatch.engine.reconciler import ProgressReconciler
from foliowatch.poller.client import ProgressClient
from foliowatch.rendering.banner import NullProgressBanner, ProgressBanner

logger = logging.getLogger(__name__)


class ProgressWatcher:
    """Watches one scope until its progress has been shown to completion.

    Polling only continues while progress is displayed and not yet complete.
    A run that the reconciler confirms as completed is held until the
    confirmation window ends, so the whole ``completing`` -> ``completed``
    sequence reaches the banner.

    A failed poll never reaches the reconciler: an absent snapshot would read
    as a finished run. Later failures are logged and skip their tick; a
    failure on the first tick propagates.
    """

    def __init__(
        self,
        client: ProgressClient,
        reconciler: ProgressReconciler,
        banner: ProgressBanner | None = None,
        *,
        interval_seconds: float = 30.0,
    ) -> None:
        self._client = client
        self._reconciler = reconciler
        self._banner = banner or NullProgressBanner()
        self._interval = interval_seconds

    async def run(self, scope_id: str) -> DisplaySnapshot | None:
        """Watch *scope_id* and return the last progress that was displayed.

        Raises:
            PollError: If the first poll fails. The persisted record is left untouched.
        """
        changed = asyncio.Event()
        idle = asyncio.Event()
        last_shown: DisplaySnapshot | None = None

        def _on_change(display: DisplaySnapshot | None) -> None:
            nonlocal last_shown
            self._banner.show(display)
            changed.set()
            if display is None:
                idle.set()
            else:
                idle.clear()
                last_shown = display

        self._reconciler.add_listener(_on_change)
        try:
            snapshot = await self._client.fetch(scope_id)
            display = self._reconciler.reconcile(snapshot, scope_id)

            while display is not None and not display.is_terminal:
                changed.clear()
                await self._wait(changed)
                display = self._reconciler.display
                if display is None or display.is_terminal:
                    break
                ok, snapshot = await self._poll(scope_id)
                if ok:
                    display = self._reconciler.reconcile(snapshot, scope_id)

            if display is not None and display.just_completed:
                await idle.wait()
            return last_shown
        finally:
            self._reconciler.remove_listener(_on_change)
            self._reconciler.close()

    async def _poll(self, scope_id: str) -> tuple[bool, ProgressSnapshot | None]:
        try:
            return True, await self._client.fetch(scope_id)
        except PollError as exc:
            logger.warning("Polling progress for %s failed: %s", scope_id, exc)
            return False, None

    async def _wait(self, changed: asyncio.Event) -> None:
        """Sleep one poll interval, waking early if the display changes."""
        try:
            await asyncio.wait_for(changed.wait(), timeout=self._interval)
        except TimeoutError:
            pass
