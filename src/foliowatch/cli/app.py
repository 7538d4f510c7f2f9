"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from foliowatch import ConfigError, PollError, StorageError


def main(argv: list[str] | None = None) -> int:
    import foliowatch.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "watch":
            cli.asyncio.run(cli._run_watch(args))
        elif args.command == "status":
            cli._run_status(args)
        elif args.command == "clear":
            cli._run_clear(args)
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except PollError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except StorageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
