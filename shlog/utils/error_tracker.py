# shlog/utils/error_tracker.py
"""Failures collected while a batch keeps going over its items."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from shlog.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Per-path failure log for scans that must not stop on one bad item."""

    context: str = "ErrorTracker"
    errors: dict[Path, list[str]] = field(default_factory=dict)

    def record(self, path: Path, error: BaseException | str) -> None:
        message = str(error) or type(error).__name__
        get_logger(self.context).error(f"{path}: {message}")
        self.errors.setdefault(Path(path), []).append(message)

    @property
    def failed(self) -> list[Path]:
        return sorted(self.errors)

    def report(self, total: int) -> dict[Path, list[str]]:
        """Log how many of ``total`` items failed and return the failures."""
        if self.errors:
            get_logger(self.context).warning(
                f"{len(self.errors)} of {total} items failed: "
                + ", ".join(str(p) for p in self.failed)
            )
        return dict(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


__all__ = ["ErrorTracker"]
