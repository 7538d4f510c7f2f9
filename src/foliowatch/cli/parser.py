"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("foliowatch")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="foliowatch")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    watch_parser = subparsers.add_parser("watch", help="Follow scraping progress for a folder until it completes")
    watch_parser.add_argument("--config", default="./foliowatch.json", help="Path to foliowatch.json")
    watch_parser.add_argument("--scope", required=True, help="Identifier of the folder being scraped")
    watch_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    status_parser = subparsers.add_parser("status", help="Show the persisted progress record")
    status_parser.add_argument("--config", default="./foliowatch.json", help="Path to foliowatch.json")
    status_parser.add_argument("--scope", default=None, help="Report whether the record would be restored here")
    status_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    clear_parser = subparsers.add_parser("clear", help="Remove the persisted progress record")
    clear_parser.add_argument("--config", default="./foliowatch.json", help="Path to foliowatch.json")
    clear_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
