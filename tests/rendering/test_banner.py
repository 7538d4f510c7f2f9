"""Tests for the banner presentation model."""

from __future__ import annotations

import io

import pytest
from rich.console import Console
from rich.panel import Panel

from foliowatch.contracts.progress import DisplaySnapshot, ProgressStatus
from foliowatch.rendering.banner import BannerView, NullProgressBanner, ProgressBanner, describe_banner
from foliowatch.rendering.rich import RichProgressBanner


def _display(status: ProgressStatus, *, expected: int = 40, processed: int = 10, **kwargs: bool) -> DisplaySnapshot:
    return DisplaySnapshot(status=status, total_expected=expected, total_processed=processed, **kwargs)


class TestDescribeBanner:
    def test_nothing_to_show(self) -> None:
        assert describe_banner(None) is None

    def test_in_progress_is_determinate(self) -> None:
        view = describe_banner(_display(ProgressStatus.IN_PROGRESS))

        assert view == BannerView(
            severity="info", title="Downloading movements", message="10 of 40 (25%)", progress_value=25
        )

    def test_completing_shows_full_bar(self) -> None:
        view = describe_banner(_display(ProgressStatus.COMPLETING, processed=40))

        assert view is not None
        assert view.message == "40 of 40 (100%)"
        assert view.progress_value == 100
        assert view.show_close is False

    def test_completed_is_closable_success(self) -> None:
        view = describe_banner(_display(ProgressStatus.COMPLETED, processed=40, is_complete=True, just_completed=True))

        assert view is not None
        assert view.severity == "success"
        assert view.message == "40 movements fetched"
        assert view.show_progress is False
        assert view.show_refresh is False
        assert view.show_close is True

    @pytest.mark.parametrize(
        ("status", "title"),
        [
            (ProgressStatus.PARTIAL, "Waiting for server response"),
            (ProgressStatus.ERROR, "Reconnecting to server"),
            (ProgressStatus.PENDING, "Starting download"),
        ],
    )
    def test_indeterminate_states(self, status: ProgressStatus, title: str) -> None:
        view = describe_banner(_display(status))

        assert view is not None
        assert view.title == title
        assert view.show_progress is True
        assert view.progress_value is None

    def test_pending_has_no_refresh(self) -> None:
        view = describe_banner(_display(ProgressStatus.PENDING))

        assert view is not None and view.show_refresh is False

    def test_partial_message(self) -> None:
        view = describe_banner(_display(ProgressStatus.PARTIAL))

        assert view is not None and view.message == "10 of 40 fetched"


class TestBanners:
    def test_null_banner_is_noop(self) -> None:
        assert issubclass(NullProgressBanner, ProgressBanner)
        NullProgressBanner().show(_display(ProgressStatus.IN_PROGRESS))
        NullProgressBanner().show(None)

    def test_rich_banner_renders_panel(self) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=False, width=80)

        with RichProgressBanner(console=console) as banner:
            banner.show(_display(ProgressStatus.IN_PROGRESS))
            assert banner.last_view is not None
            assert banner.last_view.progress_value == 25
            banner.show(_display(ProgressStatus.COMPLETED, processed=40, is_complete=True))
            assert banner.last_view is not None and banner.last_view.severity == "success"
            banner.show(None)
            assert banner.last_view is None

    def test_rich_banner_refreshes_between_updates(self) -> None:
        console = Console(file=io.StringIO(), force_terminal=False, width=80)

        with RichProgressBanner(console=console) as banner:
            banner.show(_display(ProgressStatus.PENDING, processed=0))
            assert banner._live.auto_refresh is True
            assert banner._live.is_started
            assert banner.last_view is not None and banner.last_view.progress_value is None

        assert not banner._live.is_started

    def test_render_uses_severity_border(self) -> None:
        view = describe_banner(_display(ProgressStatus.COMPLETED, processed=40, is_complete=True))

        panel = RichProgressBanner.render(view)

        assert isinstance(panel, Panel)
        assert panel.border_style == "green"
        assert panel.title == "Download complete"
