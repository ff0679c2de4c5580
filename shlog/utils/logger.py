# shlog/utils/logger.py
"""Loguru setup for the tool's own diagnostics (stderr + optional file).

Importing shlog leaves the host application's loguru handlers alone: the
``shlog`` namespace stays disabled until :func:`configure` is called, which
is what the console entry points do.
"""

from __future__ import annotations

import inspect
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

DEFAULT_LEVEL = "WARNING"

_root_logger.disable("shlog")


# ---------- options ----------
@dataclass(slots=True)
class _LogOptions:
    level: str = os.environ.get("SHLOG_DIAG_LEVEL") or DEFAULT_LEVEL
    log_dir: Optional[str] = os.environ.get("SHLOG_DIAG_DIR") or None


_OPTIONS = _LogOptions()
_LOG_FILE: Optional[Path] = None
_LOG_HANDLE: Optional[TextIO] = None


# ---------- sinks as callables ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    # stdout belongs to the leveled logger output
    print(
        f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}",
        file=sys.stderr,
    )


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(
            f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n"
        )
        fh.flush()

    return _file_sink


def _resolve_level(level: str | None) -> tuple[str, bool]:
    """Return a level name loguru knows, and whether the request was honoured."""
    name = (level or "").strip().upper()
    if not name:
        return DEFAULT_LEVEL, True
    try:
        _root_logger.level(name)
    except ValueError:
        return DEFAULT_LEVEL, False
    return name, True


def _close_log_file() -> None:
    global _LOG_FILE, _LOG_HANDLE
    if _LOG_HANDLE is not None:
        _LOG_HANDLE.close()
    _LOG_HANDLE = None
    _LOG_FILE = None


def _configure_logger(level: str | None = None, log_dir: str | Path | None = None) -> None:
    global _LOG_FILE, _LOG_HANDLE

    _root_logger.remove()
    _close_log_file()
    _root_logger.enable("shlog")

    requested = level or _OPTIONS.level
    effective, known = _resolve_level(requested)
    _root_logger.add(_console_sink, level=effective, catch=True)

    target_dir = log_dir if log_dir is not None else _OPTIONS.log_dir
    if target_dir:
        directory = Path(target_dir).expanduser()
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        _LOG_FILE = directory / f"shlog_{timestamp}.log"
        _LOG_HANDLE = _LOG_FILE.open("a", encoding="utf-8")
        _root_logger.add(_make_file_sink(_LOG_HANDLE), level=effective, catch=True)

    if not known:
        get_logger(__name__).warning(
            f"Unknown diagnostics level {requested!r}, using {DEFAULT_LEVEL}"
        )


def get_logger(name: str | None = None) -> LoguruLogger:
    frame = inspect.currentframe()
    module_name = name
    if module_name is None and frame is not None:
        caller_frame = frame.f_back
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    return _root_logger.bind(module=module_name or "unknown")


def configure(level: str | None = None, log_dir: str | Path | None = None) -> None:
    _configure_logger(level=level, log_dir=log_dir)


def current_log_file() -> Optional[Path]:
    return _LOG_FILE


__all__ = ["DEFAULT_LEVEL", "configure", "current_log_file", "get_logger"]
