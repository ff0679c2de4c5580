# shlog/cli/__init__.py
"""Console entry points."""

from __future__ import annotations

from shlog.config import Settings
from shlog.utils.logger import configure


def setup_diagnostics(settings: Settings) -> None:
    """Configure loguru diagnostics from settings."""
    configure(level=settings.diagnostics.level, log_dir=settings.diagnostics.log_dir)


__all__ = ["setup_diagnostics"]
