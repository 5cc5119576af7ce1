"""
Command-line front end for the recent files registry.

Usage:
    python -m recent_registry list [--json]
    python -m recent_registry add PATH [--preview TEXT]
    python -m recent_registry remove PATH
    python -m recent_registry clear
    python -m recent_registry prune
    python -m recent_registry open PATH          # print file, track it
    python -m recent_registry save PATH < text    # write stdin, track it

Exit codes: 0 ok, 1 registry or file error, 2 file I/O done but the
recent list could not be updated.
"""

import argparse
import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from recent_registry.registry import (
    RecentFile,
    RecentFilesError,
    RecentFilesStore,
    RegistryUpdateError,
)
from recent_registry.utils.app_paths import get_recent_files_path
from recent_registry.utils.logger import LogLevel, logger, set_log_level


def format_age(dt: datetime, now: Optional[datetime] = None) -> str:
    """Human readable age: 'Just now', '5 mins ago', '3 days ago', or a date."""
    now = now or datetime.now(timezone.utc)
    diff_s = (now - dt).total_seconds()
    mins = int(diff_s // 60)
    hours = int(diff_s // 3600)
    days = int(diff_s // 86400)

    if mins < 1:
        return "Just now"
    if mins < 60:
        return f"{mins} min{'s' if mins > 1 else ''} ago"
    if hours < 24:
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    if days < 7:
        return f"{days} day{'s' if days > 1 else ''} ago"
    return dt.astimezone().strftime("%Y-%m-%d")


def _print_files(files: List[RecentFile], as_json: bool):
    if as_json:
        print(json.dumps([f.to_dict() for f in files], indent=2))
        return
    if not files:
        print("No recent files")
        return
    for f in files:
        print(f"{f.identifier}\t{format_age(f.modified_at)}\t{f.location}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recent-registry",
        description="Most-recently-used file list",
    )
    parser.add_argument("--data-dir", type=Path,
                        help="Directory holding recent_files.json (default: app data dir)")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Log registry activity (-vv for debug)")

    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Show recent files, newest first")
    p_list.add_argument("--json", action="store_true", help="Print entries as JSON")

    p_add = sub.add_parser("add", help="Add or move a file to the front")
    p_add.add_argument("path")
    p_add.add_argument("--preview", help="Short text snippet to keep with the entry")

    p_remove = sub.add_parser("remove", help="Forget a file")
    p_remove.add_argument("path")

    sub.add_parser("clear", help="Forget all files")
    sub.add_parser("prune", help="Write back the list without missing files")

    p_open = sub.add_parser("open", help="Print a file and track it")
    p_open.add_argument("path")

    p_save = sub.add_parser("save", help="Write stdin to a file and track it")
    p_save.add_argument("path")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose >= 2:
        set_log_level(LogLevel.DEBUG)
    elif args.verbose == 1:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.CRITICAL)

    store = RecentFilesStore(get_recent_files_path(args.data_dir))
    path = os.path.abspath(args.path) if getattr(args, "path", None) else None

    # stdout carries file content and listings
    previous = logger.set_stream(sys.stderr)
    try:
        return _run(store, args, path)
    finally:
        if previous is not None:
            logger.set_stream(previous)


def _run(store: RecentFilesStore, args: argparse.Namespace, path: Optional[str]) -> int:
    try:
        if args.command == "list":
            _print_files(store.list(), args.json)
        elif args.command == "add":
            store.add_or_touch(path, args.preview)
        elif args.command == "remove":
            store.remove(path)
        elif args.command == "clear":
            store.clear()
        elif args.command == "prune":
            dropped = store.prune()
            print(f"Pruned {dropped} file(s)")
        elif args.command == "open":
            sys.stdout.write(store.tracked_read(path))
        elif args.command == "save":
            store.tracked_write(sys.stdin.read(), path)
    except RegistryUpdateError as e:
        if e.content is not None:
            sys.stdout.write(e.content)
        print(f"Warning: {e}", file=sys.stderr)
        return 2
    except RecentFilesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
