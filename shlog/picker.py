"""Substring filter in front of an interactive fuzzy finder."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from shlog.config import PICK_COMMAND_DEFAULT
from shlog.utils.logger import get_logger

LOGGER = get_logger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class PickerUnavailableError(RuntimeError):
    """The picker executable could not be started."""


def list_directory(path: Path) -> List[str]:
    return sorted(entry.name for entry in Path(path).iterdir())


def filter_candidates(candidates: Iterable[str], substring: str) -> List[str]:
    """Keep candidates containing ``substring``; order is preserved."""
    return [c for c in candidates if substring in c]


def pick(
    candidates: Sequence[str],
    *,
    command: Sequence[str] = PICK_COMMAND_DEFAULT,
    runner: Runner = subprocess.run,
) -> Optional[str]:
    """Let the user choose one candidate.

    Returns the selection, or None if the picker was cancelled or nothing
    was chosen.

    Raises:
        PickerUnavailableError: if ``command`` cannot be executed.
    """
    payload = "\n".join(candidates)
    if payload:
        payload += "\n"
    try:
        result = runner(
            list(command),
            input=payload,
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise PickerUnavailableError(f"{command[0]} not found") from exc

    if result.returncode != 0:
        LOGGER.debug(f"{command[0]} exited with {result.returncode}")
        return None
    selection = (result.stdout or "").strip()
    return selection or None


__all__ = ["PickerUnavailableError", "filter_candidates", "list_directory", "pick"]
