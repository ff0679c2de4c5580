# shlog/cli/ggs.py
"""``ggs`` command: list git repositories with a dirty work tree."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from shlog.cli import setup_diagnostics
from shlog.config import get_settings
from shlog.git_status import scan
from shlog.utils.logger import get_logger

logger = get_logger(__name__)

PROG = "ggs"
HELP_TEXT = f"{PROG} just looking for a repositories with dirty tree in home"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("-h", "--help", action="store_true", dest="help")
    parser.add_argument("--root", type=Path, default=None)
    parser.add_argument("--no-progress", action="store_true")
    parser.add_argument("rest", nargs="*")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Scan for dirty repositories and print them with totals.

    Returns:
        0 on success, 1 on an unsupported flag.
    """
    args, unknown = build_parser().parse_known_args(argv)
    flags = [a for a in unknown if a.startswith("-")]
    if flags:
        print(f"Error: Unsupported flag {flags[0]}", file=sys.stderr)
        return 1

    if args.help or args.rest[:1] == ["help"]:
        print(HELP_TEXT)
        return 0

    settings = get_settings()
    setup_diagnostics(settings)

    root = args.root if args.root is not None else settings.scan.root
    progress = settings.scan.progress and not args.no_progress
    logger.info(f"Scanning {root}")
    report = scan(root, command=settings.scan.git_command, progress=progress)

    for repo in report.dirty:
        print(repo)
    print(f"total: {report.total_count}")
    print(f"dirty: {report.dirty_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["HELP_TEXT", "build_parser", "main"]
