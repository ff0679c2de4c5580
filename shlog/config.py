"""Centralized configuration for shlog.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Final, Mapping, Optional, Tuple

from shlog.utils.enums import covers_each_member
from shlog.utils.logger import DEFAULT_LEVEL, get_logger

LOGGER = get_logger(__name__)

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_THRESHOLD: Final[str] = "SH_LOG"
ENV_DIAG_LEVEL: Final[str] = "SHLOG_DIAG_LEVEL"
ENV_DIAG_DIR: Final[str] = "SHLOG_DIAG_DIR"
ENV_SCAN_ROOT: Final[str] = "SHLOG_SCAN_ROOT"
ENV_PICK_SUBSTRING: Final[str] = "SHLOG_PICK_SUBSTRING"


def _env_str(environ: Mapping[str, str], key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = environ.get(key)
    return value if value is not None else default


def _env_path(environ: Mapping[str, str], key: str, default: Path) -> Path:
    """Resolve path from environment variable with fallback."""
    value = environ.get(key)
    return Path(value).expanduser() if value else default


# ============================================================================
# TERMINAL CONSTANTS
# ============================================================================

ANSI_RED: Final[str] = "\033[31;1m"
ANSI_YELLOW: Final[str] = "\033[33;1m"
ANSI_MAGENTA: Final[str] = "\033[35;1m"
ANSI_BLUE: Final[str] = "\033[34;1m"
ANSI_RESET: Final[str] = "\033[0m"

# ============================================================================
# DEFAULTS
# ============================================================================

DIAG_LEVEL_DEFAULT: Final[str] = DEFAULT_LEVEL
PICK_SUBSTRING_DEFAULT: Final[str] = "exam"
PICK_COMMAND_DEFAULT: Final[Tuple[str, ...]] = ("fzf",)
GIT_STATUS_COMMAND: Final[Tuple[str, ...]] = ("git", "status", "--porcelain")
GIT_DIR_NAME: Final[str] = ".git"

# ============================================================================
# ENUMS
# ============================================================================


class Severity(IntEnum):
    """Message severity, ordered from most to least verbose."""

    TRACE = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    @property
    def literal(self) -> str:
        """Value accepted in the threshold setting."""
        return _LITERALS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Map a threshold literal (``"trace"``, ``"info"``, ...) to a member.

        Matching is exact and case-sensitive.

        Raises:
            ValueError: if ``value`` is not one of the recognized literals.
        """
        for member, literal in _LITERALS.items():
            if literal == value:
                return member
        known = ", ".join(_LITERALS.values())
        raise ValueError(f"Unknown severity {value!r}, expected one of: {known}")

    @classmethod
    def lookup(cls, value: Optional[str]) -> Optional["Severity"]:
        """Like :meth:`parse`, but returns None instead of raising."""
        if value is None:
            return None
        try:
            return cls.parse(value)
        except ValueError:
            return None


_LITERALS: Final[dict[Severity, str]] = {
    Severity.TRACE: "trace",
    Severity.INFO: "info",
    Severity.WARN: "warn",
    Severity.ERROR: "error",
}

_LABELS: Final[dict[Severity, str]] = {
    Severity.TRACE: "TRACE",
    Severity.INFO: "INFO",
    Severity.WARN: "WARNING",
    Severity.ERROR: "ERROR",
}

_COLORS: Final[dict[Severity, str]] = {
    Severity.TRACE: ANSI_MAGENTA,
    Severity.INFO: ANSI_BLUE,
    Severity.WARN: ANSI_YELLOW,
    Severity.ERROR: ANSI_RED,
}

for _table in (_LITERALS, _LABELS, _COLORS):
    if not covers_each_member(_table, Severity):
        raise RuntimeError(f"Severity table is incomplete: {_table!r}")

THRESHOLD_DEFAULT: Final[Severity] = Severity.INFO

# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class LoggerConfig:
    """Leveled logger configuration, read once at process start.

    Attributes:
        threshold: Least severe level that is printed. None means the
            setting was not recognized and every emit call is suppressed.
        use_colors: Wrap labels in ANSI color codes.
    """

    threshold: Optional[Severity] = THRESHOLD_DEFAULT
    use_colors: bool = True

    @classmethod
    def from_value(cls, raw: Optional[str], *, use_colors: bool = True) -> "LoggerConfig":
        if not raw:
            return cls(threshold=THRESHOLD_DEFAULT, use_colors=use_colors)
        threshold = Severity.lookup(raw)
        if threshold is None:
            LOGGER.debug(f"Unrecognized {ENV_THRESHOLD}={raw!r}, all output suppressed")
        return cls(threshold=threshold, use_colors=use_colors)

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, *, use_colors: bool = True
    ) -> "LoggerConfig":
        env = os.environ if environ is None else environ
        return cls.from_value(env.get(ENV_THRESHOLD), use_colors=use_colors)


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Loguru diagnostics for the tool itself (stderr, optional file)."""

    level: str = DIAG_LEVEL_DEFAULT
    log_dir: Optional[Path] = None


@dataclass(frozen=True)
class ScanConfig:
    """Dirty repository scanner configuration."""

    root: Path = field(default_factory=Path.home)
    git_command: Tuple[str, ...] = GIT_STATUS_COMMAND
    progress: bool = True


@dataclass(frozen=True)
class PickerConfig:
    """Fuzzy picker configuration."""

    substring: str = PICK_SUBSTRING_DEFAULT
    command: Tuple[str, ...] = PICK_COMMAND_DEFAULT


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    logger: LoggerConfig
    diagnostics: DiagnosticsConfig
    scan: ScanConfig
    picker: PickerConfig


def get_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        SH_LOG: Leveled logger threshold (info, warn, error, trace)
        SHLOG_DIAG_LEVEL: Diagnostics level (loguru level name)
        SHLOG_DIAG_DIR: Directory for diagnostics log files
        SHLOG_SCAN_ROOT: Root directory for the dirty repository scan
        SHLOG_PICK_SUBSTRING: Default substring for the fuzzy picker
    """
    env = os.environ if environ is None else environ

    diag_dir = env.get(ENV_DIAG_DIR)
    diagnostics = DiagnosticsConfig(
        level=_env_str(env, ENV_DIAG_LEVEL, "").strip().upper() or DIAG_LEVEL_DEFAULT,
        log_dir=Path(diag_dir).expanduser() if diag_dir else None,
    )

    return Settings(
        logger=LoggerConfig.from_env(env),
        diagnostics=diagnostics,
        scan=ScanConfig(root=_env_path(env, ENV_SCAN_ROOT, Path.home())),
        picker=PickerConfig(
            substring=_env_str(env, ENV_PICK_SUBSTRING, PICK_SUBSTRING_DEFAULT)
        ),
    )


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    # Main config
    "Settings",
    # Config sections
    "LoggerConfig",
    "DiagnosticsConfig",
    "ScanConfig",
    "PickerConfig",
    # Enums
    "Severity",
    # Constants
    "ANSI_BLUE",
    "ANSI_MAGENTA",
    "ANSI_RED",
    "ANSI_RESET",
    "ANSI_YELLOW",
    "ENV_DIAG_DIR",
    "ENV_DIAG_LEVEL",
    "ENV_PICK_SUBSTRING",
    "ENV_SCAN_ROOT",
    "ENV_THRESHOLD",
    "GIT_DIR_NAME",
    "GIT_STATUS_COMMAND",
    "PICK_COMMAND_DEFAULT",
    "PICK_SUBSTRING_DEFAULT",
    "THRESHOLD_DEFAULT",
]
