# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
import re
import subprocess
from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell settings out of the tests."""
    for key in (
        "SH_LOG",
        "SHLOG_DIAG_LEVEL",
        "SHLOG_DIAG_DIR",
        "SHLOG_SCAN_ROOT",
        "SHLOG_PICK_SUBSTRING",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def completed() -> Callable[..., subprocess.CompletedProcess]:
    """Factory for fake subprocess results."""

    def _make(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)

    return _make


@pytest.fixture
def repo_tree(tmp_path: Path) -> Path:
    """Directory tree with three repositories, one nested inside another."""
    root = tmp_path / "home"
    for rel in ("alpha", "beta", "alpha/vendor/gamma"):
        (root / rel / ".git" / "objects").mkdir(parents=True)
    (root / "plain" / "docs").mkdir(parents=True)
    return root


@pytest.fixture
def dirty_runner(completed) -> MagicMock:
    """Runner reporting changes only in repositories named ``beta``."""

    def _run(cmd, cwd=None, **_kwargs):
        if Path(cwd).name == "beta":
            return completed(stdout=" M README.md\n")
        return completed(stdout="")

    return MagicMock(side_effect=_run)
