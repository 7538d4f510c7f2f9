"""Watch command."""

from __future__ import annotations

import argparse

from foliowatch.contracts.progress import DisplaySnapshot


def format_watch_summary(scope_id: str, result: DisplaySnapshot | None) -> str:
    lines = ["", f"foliowatch - watch finished for {scope_id}", ""]
    if result is None:
        lines.append("  Status:    no scraping in progress")
    else:
        lines.append(f"  Status:    {result.status}")
        lines.append(f"  Processed: {result.total_processed} of {result.total_expected}")
    lines.append("")
    return "\n".join(lines)


async def run_watch(args: argparse.Namespace) -> DisplaySnapshot | None:
    import foliowatch.cli as cli

    config = cli.load_config(args.config)
    fw = cli.FolioWatch.from_config(config)

    if not args.verbose:
        from foliowatch.rendering.rich import RichProgressBanner

        with RichProgressBanner() as banner:
            result = await fw.watch(args.scope, banner=banner)
    else:
        result = await fw.watch(args.scope)

    print(cli._format_watch_summary(args.scope, result))
    return result


__all__ = ["format_watch_summary", "run_watch"]
