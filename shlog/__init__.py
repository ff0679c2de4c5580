"""Leveled, colorized terminal logging for shell-style scripts."""

from __future__ import annotations

from shlog.config import LoggerConfig, Settings, Severity, get_settings
from shlog.leveled import LeveledLogger, LogLine, make_logger

__version__ = "0.1.0"

__all__ = [
    "LeveledLogger",
    "LogLine",
    "LoggerConfig",
    "Settings",
    "Severity",
    "get_settings",
    "make_logger",
]
