# shlog/cli/log_cmd.py
"""``shlog`` command: print leveled messages from shell scripts.

The threshold comes from ``SH_LOG`` (info, warn, error, trace; default info).
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from shlog.cli import setup_diagnostics
from shlog.config import LoggerConfig, get_settings
from shlog.leveled import OPERATIONS, LeveledLogger
from shlog.utils.logger import get_logger

logger = get_logger(__name__)

DEMO_TEXT = "text"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shlog",
        description="Print a colored, severity-gated message (threshold from SH_LOG).",
        epilog="Everything after the command is printed as given, including words starting with '-'.",
    )
    parser.add_argument("--no-color", action="store_true", help="Do not emit ANSI colors")
    parser.add_argument(
        "command",
        choices=[*OPERATIONS, "demo"],
        help="Operation to run; demo emits one line per operation",
    )
    parser.add_argument(
        "tokens",
        nargs=argparse.REMAINDER,
        help="Message words, joined with spaces (demo: optional text)",
    )
    return parser


def run_demo(log: LeveledLogger, text: str = DEMO_TEXT) -> None:
    log.log("some", "log", text)
    log.error("some", "error", text)
    log.warning("some", "error", text)
    log.trace("some", "error", text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the ``shlog`` command.

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_diagnostics(settings)

    config = settings.logger
    if args.no_color:
        config = LoggerConfig(threshold=config.threshold, use_colors=False)
    log = LeveledLogger(config)
    logger.debug(f"command={args.command} threshold={config.threshold}")

    if args.command == "demo":
        run_demo(log, args.tokens[0] if args.tokens else DEMO_TEXT)
    else:
        log.emit(OPERATIONS[args.command], *args.tokens)
    return 0


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["build_parser", "main", "run_demo"]
