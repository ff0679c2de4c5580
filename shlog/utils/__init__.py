# shlog/utils/__init__.py
"""Utility package re-exporting shared helpers for shlog."""

from shlog.utils.enums import covers_each_member
from shlog.utils.error_tracker import ErrorTracker
from shlog.utils.logger import configure, get_logger
from shlog.utils.progress import track

__all__ = [
    "ErrorTracker",
    "configure",
    "covers_each_member",
    "get_logger",
    "track",
]
