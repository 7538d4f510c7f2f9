"""Rich-based progress banner."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from foliowatch.contracts.progress import DisplaySnapshot
from foliowatch.rendering.banner import BannerView, ProgressBanner, describe_banner


class RichProgressBanner(ProgressBanner):
    """Live terminal banner powered by Rich.

    Use as a context manager so the live display is properly started/stopped::

        with RichProgressBanner() as banner:
            await watcher.run(scope_id)

    The display refreshes on its own between polls so the indeterminate bar
    keeps pulsing.
    """

    _BORDER_STYLES: ClassVar[dict[str, str]] = {
        "info": "cyan",
        "success": "green",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._live = Live(Text(""), console=self._console, transient=False, refresh_per_second=4)
        self._last_view: BannerView | None = None

    @property
    def last_view(self) -> BannerView | None:
        return self._last_view

    def __enter__(self) -> RichProgressBanner:
        self._live.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._live.stop()

    def show(self, display: DisplaySnapshot | None) -> None:
        view = describe_banner(display)
        self._last_view = view
        self._live.update(self.render(view), refresh=True)

    @classmethod
    def render(cls, view: BannerView | None) -> RenderableType:
        if view is None:
            return Text("")

        parts: list[RenderableType] = [Text(view.message)]
        if view.show_progress:
            # total=None draws Rich's pulsing indeterminate bar.
            total = 100 if view.progress_value is not None else None
            parts.append(ProgressBar(total=total, completed=view.progress_value or 0, width=40))

        return Panel(
            Group(*parts),
            title=view.title,
            title_align="left",
            border_style=cls._BORDER_STYLES.get(view.severity, "cyan"),
            expand=False,
        )
