"""Find git repositories with a dirty work tree under a directory."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Sequence

from shlog.config import GIT_DIR_NAME, GIT_STATUS_COMMAND
from shlog.utils.error_tracker import ErrorTracker
from shlog.utils.logger import get_logger
from shlog.utils.progress import track

LOGGER = get_logger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class GitStatusError(RuntimeError):
    """``git status`` failed for a repository."""

    def __init__(self, repo: Path, returncode: int, stderr: str = ""):
        self.repo = repo
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = f": {self.stderr}" if self.stderr else ""
        super().__init__(f"git status exited with {returncode} in {repo}{detail}")


@dataclass(slots=True)
class ScanReport:
    """Outcome of :func:`scan`."""

    total: List[Path] = field(default_factory=list)
    dirty: List[Path] = field(default_factory=list)
    failed: dict[Path, list[str]] = field(default_factory=dict)

    @property
    def total_count(self) -> int:
        return len(self.total)

    @property
    def dirty_count(self) -> int:
        return len(self.dirty)


def find_repositories(root: Path) -> List[Path]:
    """Return work tree directories holding a ``.git`` directory, sorted.

    The walk does not descend into ``.git`` directories. Unreadable
    directories are skipped.
    """
    repos: List[Path] = []

    def _on_error(exc: OSError) -> None:
        LOGGER.debug(f"Skipping {exc.filename}: {exc.strerror}")

    for dirpath, dirnames, _filenames in os.walk(root, onerror=_on_error):
        if GIT_DIR_NAME in dirnames:
            repos.append(Path(dirpath))
            dirnames.remove(GIT_DIR_NAME)
    return sorted(repos)


def is_dirty(
    repo: Path,
    *,
    runner: Runner = subprocess.run,
    command: Sequence[str] = GIT_STATUS_COMMAND,
) -> bool:
    """Check whether ``git status --porcelain`` reports anything in ``repo``.

    Raises:
        GitStatusError: if git exits with a non-zero status.
    """
    result = runner(
        list(command),
        cwd=str(repo),
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise GitStatusError(repo, result.returncode, result.stderr or "")
    return bool((result.stdout or "").strip())


def scan(
    root: Path,
    *,
    runner: Runner = subprocess.run,
    command: Sequence[str] = GIT_STATUS_COMMAND,
    progress: bool = True,
) -> ScanReport:
    """Check every repository under ``root``; failures are collected, not raised."""
    repos = find_repositories(root)
    LOGGER.info(f"Found {len(repos)} repositories under {root}")

    report = ScanReport(total=repos)
    tracker = ErrorTracker(context=__name__)
    for repo in track(repos, description="git status", total=len(repos), disable=not progress):
        try:
            dirty = is_dirty(repo, runner=runner, command=command)
        except (GitStatusError, OSError) as exc:
            tracker.record(repo, exc)
            continue
        if dirty:
            report.dirty.append(repo)

    report.failed = tracker.report(len(repos))
    return report


__all__ = ["GitStatusError", "ScanReport", "find_repositories", "is_dirty", "scan"]
