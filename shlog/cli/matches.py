# shlog/cli/matches.py
"""``matches`` command: filter candidates by substring and pick one with fzf."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from shlog.cli import setup_diagnostics
from shlog.config import get_settings
from shlog.picker import PickerUnavailableError, filter_candidates, list_directory, pick
from shlog.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_NO_SELECTION = 1
EXIT_PICKER_MISSING = 127


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matches",
        description="Pick one of the entries containing a substring.",
    )
    parser.add_argument("--substring", "-s", default=None)
    parser.add_argument("--dir", "-d", type=Path, default=Path("."))
    parser.add_argument("words", nargs="*", help="Candidates (default: directory listing)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_diagnostics(settings)

    substring = args.substring if args.substring is not None else settings.picker.substring
    candidates = args.words or list_directory(args.dir)
    filtered = filter_candidates(candidates, substring)
    logger.debug(f"{len(filtered)}/{len(candidates)} candidates match {substring!r}")

    try:
        selected = pick(filtered, command=settings.picker.command)
    except PickerUnavailableError as exc:
        logger.error(str(exc))
        return EXIT_PICKER_MISSING

    if selected is None:
        return EXIT_NO_SELECTION
    print(selected)
    return 0


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["build_parser", "main"]
