"""Banner presentation model for displayed progress."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal

from foliowatch.contracts.progress import DisplaySnapshot, ProgressStatus

Severity = Literal["info", "success"]


@dataclass(frozen=True)
class BannerView:
    """What a progress banner shows for one display snapshot.

    Attributes:
        severity: Alert style.
        title: Banner heading.
        message: One-line detail under the heading.
        progress_value: Percentage for a determinate bar, ``None`` for an
            indeterminate one (or no bar when ``show_progress`` is false).
        show_progress: Whether a bar is drawn at all.
        show_refresh: Whether a manual refresh action makes sense.
        show_close: Whether the banner can be dismissed.
    """

    severity: Severity
    title: str
    message: str
    progress_value: int | None = None
    show_progress: bool = True
    show_refresh: bool = True
    show_close: bool = False


_DOWNLOADING = "Downloading movements"


def describe_banner(display: DisplaySnapshot | None) -> BannerView | None:
    if display is None:
        return None

    processed = display.total_processed
    expected = display.total_expected

    if display.status is ProgressStatus.COMPLETED:
        return BannerView(
            severity="success",
            title="Download complete",
            message=f"{processed} movements fetched",
            show_progress=False,
            show_refresh=False,
            show_close=True,
        )
    if display.status is ProgressStatus.COMPLETING:
        return BannerView(
            severity="info",
            title=_DOWNLOADING,
            message=f"{processed} of {expected} (100%)",
            progress_value=100,
        )
    if display.status is ProgressStatus.IN_PROGRESS:
        return BannerView(
            severity="info",
            title=_DOWNLOADING,
            message=f"{processed} of {expected} ({display.percentage}%)",
            progress_value=display.percentage,
        )
    if display.status is ProgressStatus.PARTIAL:
        return BannerView(
            severity="info",
            title="Waiting for server response",
            message=f"{processed} of {expected} fetched",
        )
    if display.status is ProgressStatus.ERROR:
        return BannerView(
            severity="info",
            title="Reconnecting to server",
            message="Retrying to fetch movements...",
        )
    return BannerView(
        severity="info",
        title="Starting download",
        message="Starting movements download...",
        show_refresh=False,
    )


class ProgressBanner(ABC):
    """Observer that renders display snapshots."""

    @abstractmethod
    def show(self, display: DisplaySnapshot | None) -> None:
        """Render *display*; ``None`` hides the banner."""
        ...  # pragma: no cover


class NullProgressBanner(ProgressBanner):
    """No-op implementation used when nothing should be drawn."""

    def show(self, display: DisplaySnapshot | None) -> None:
        pass
