"""Command-line front door for recentfiles.

Records visits and inspects the persisted recent-files list of one scope,
so shell hooks and editor integrations can share the same storage file.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from .config import ConfigError, Settings, load_settings
from .session import RecentFilesSession
from .store import PersistentStore


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recentfiles",
        description="Maintain a persistent most-recently-used list of files.",
    )
    parser.add_argument("--config", metavar="PATH", help="Config file (default: user config dir).")
    parser.add_argument("--storage", metavar="PATH", help="Storage document (overrides config).")
    scope = parser.add_mutually_exclusive_group()
    scope.add_argument("--project", metavar="DIR", help="Project root used as scope (default: cwd).")
    scope.add_argument("--global", dest="global_list", action="store_true", help="Use the global list.")
    parser.add_argument("--max-history", type=_positive_int, default=None, help="Override max_history.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")

    commands = parser.add_subparsers(dest="command", required=True)
    add = commands.add_parser("add", help="Record visits to files, last argument most recent.")
    add.add_argument("paths", nargs="+", metavar="PATH")
    commands.add_parser("list", help="Print full paths, most recent first.")
    commands.add_parser("labels", help="Print row numbers with short display labels.")
    remove = commands.add_parser("remove", help="Remove the entry at a 1-based row.")
    remove.add_argument("row", type=_positive_int)
    commands.add_parser("clear", help="Empty the list for the scope.")
    commands.add_parser("scopes", help="Print every stored scope.")
    return parser


def _cli_settings(args: argparse.Namespace) -> Settings:
    """Load settings and apply command-line overrides; persistence is always on."""
    try:
        settings = load_settings(Path(args.config) if args.config else None)
    except ConfigError as exc:
        raise SystemExit(f"Invalid config: {exc}") from exc

    persistent = dataclasses.replace(
        settings.persistent,
        enabled=True,
        save_on_change=True,
        global_list=args.global_list or settings.persistent.global_list,
        path=Path(args.storage) if args.storage else settings.persistent.path,
    )
    max_history = args.max_history if args.max_history is not None else settings.max_history
    return dataclasses.replace(settings, max_history=max_history, persistent=persistent)


def _print_scopes(store: PersistentStore) -> None:
    records = store.records()
    for key, record in sorted(records.items(), key=lambda item: item[1].last_updated, reverse=True):
        sys.stdout.write(f"{record.last_updated}\t{len(record.items)}\t{key}\n")


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run one command against the persisted list."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    settings = _cli_settings(args)
    session = RecentFilesSession(settings, project_root=args.project)

    if args.command == "scopes":
        _print_scopes(session.store)
        return

    session.load_on_startup()
    if args.command == "add":
        for raw_path in args.paths:
            path = Path(raw_path)
            if not path.is_file():
                raise SystemExit(f"File not found: {path}")
            session.on_file_opened(str(path.resolve()))
    elif args.command == "list":
        for entry in session.entries():
            sys.stdout.write(f"{entry}\n")
    elif args.command == "labels":
        for row, label in enumerate(session.display_labels(), start=1):
            sys.stdout.write(f"{row}\t{label}\n")
    elif args.command == "remove":
        try:
            session.delete_at(args.row)
        except IndexError as exc:
            raise SystemExit(f"No entry at row {args.row}") from exc
    elif args.command == "clear":
        session.clear_all()


if __name__ == "__main__":
    main()
