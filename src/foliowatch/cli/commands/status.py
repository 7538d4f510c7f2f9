"""Status and clear commands."""

from __future__ import annotations

import argparse

from foliowatch.sdk import StoredProgressStatus


def format_status_summary(status: StoredProgressStatus) -> str:
    lines = ["", "foliowatch - persisted progress", ""]
    record = status.record
    if record is None:
        lines.append("  Record:    none")
        lines.append("")
        return "\n".join(lines)

    progress = record.progress
    lines.append(f"  Scope:     {record.scope_id}")
    lines.append(f"  Status:    {progress.status}")
    lines.append(f"  Processed: {progress.total_processed} of {progress.total_expected}")
    if status.age_ms is not None:
        lines.append(f"  Age:       {status.age_ms / 1000:.1f}s")
    if status.scope_id is not None:
        verdict = "yes" if status.adoptable else "no"
        lines.append(f"  Restores for {status.scope_id}: {verdict}")
    lines.append("")
    return "\n".join(lines)


def run_status(args: argparse.Namespace) -> StoredProgressStatus:
    import foliowatch.cli as cli

    config = cli.load_config(args.config)
    status = cli.FolioWatch.from_config(config).status(args.scope)
    print(cli._format_status_summary(status))
    return status


def run_clear(args: argparse.Namespace) -> None:
    import foliowatch.cli as cli

    config = cli.load_config(args.config)
    cli.FolioWatch.from_config(config).clear()
    print("foliowatch - persisted progress cleared")


__all__ = ["format_status_summary", "run_clear", "run_status"]
