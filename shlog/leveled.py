"""Leveled terminal logger.

Prints ``<COLOR><LABEL><RESET>: <message>`` lines on stdout for calls whose
severity is at or above the configured threshold. Example::

    log = LeveledLogger(LoggerConfig.from_value("warn"))
    log.error("disk", "full")      # ERROR: disk full
    log.trace("x")                 # suppressed
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from shlog.config import ANSI_RESET, LoggerConfig, Severity

_UNSET = object()


@dataclass(frozen=True)
class LogLine:
    """A single rendered message; built and written in one step."""

    severity: Severity
    message: str

    @classmethod
    def from_tokens(cls, severity: Severity, tokens: tuple[object, ...]) -> "LogLine":
        return cls(severity=severity, message=" ".join(str(t) for t in tokens))

    @property
    def label(self) -> str:
        return self.severity.label

    @property
    def color(self) -> str:
        return self.severity.color

    def render(self, use_colors: bool = True) -> str:
        if use_colors:
            return f"{self.color}{self.label}{ANSI_RESET}: {self.message}"
        return f"{self.label}: {self.message}"


class LeveledLogger:
    """Severity-gated, colorized line printer.

    Args:
        config: Threshold and color settings. Defaults to threshold INFO.
        stream: Output stream. Defaults to whatever ``sys.stdout`` is at
            write time.
    """

    def __init__(self, config: Optional[LoggerConfig] = None, stream: Optional[TextIO] = None):
        self.config = config if config is not None else LoggerConfig()
        self._stream = stream

    def __repr__(self) -> str:
        threshold = self.threshold.literal if self.threshold is not None else None
        return f"{type(self).__name__}(threshold={threshold!r})"

    @property
    def threshold(self) -> Optional[Severity]:
        return self.config.threshold

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def enabled(self, severity: Severity) -> bool:
        threshold = self.config.threshold
        return threshold is not None and severity >= threshold

    def emit(self, severity: Severity, *tokens: object) -> None:
        if not self.enabled(severity):
            return
        line = LogLine.from_tokens(severity, tokens)
        self.stream.write(line.render(self.config.use_colors) + "\n")

    def info(self, *tokens: object) -> None:
        self.emit(Severity.INFO, *tokens)

    def warn(self, *tokens: object) -> None:
        self.emit(Severity.WARN, *tokens)

    def error(self, *tokens: object) -> None:
        self.emit(Severity.ERROR, *tokens)

    def trace(self, *tokens: object) -> None:
        self.emit(Severity.TRACE, *tokens)

    # aliases
    log = info
    warning = warn


# operation name -> severity, as exposed on the command line
OPERATIONS: Mapping[str, Severity] = {
    "log": Severity.INFO,
    "info": Severity.INFO,
    "warn": Severity.WARN,
    "warning": Severity.WARN,
    "error": Severity.ERROR,
    "trace": Severity.TRACE,
}


def make_logger(
    raw_threshold: object = _UNSET,
    *,
    stream: Optional[TextIO] = None,
    use_colors: bool = True,
) -> LeveledLogger:
    """Build a logger from a raw threshold string.

    When ``raw_threshold`` is omitted, ``SH_LOG`` is read from the
    environment. ``None`` or ``""`` select the default threshold (INFO).
    """
    if raw_threshold is _UNSET:
        config = LoggerConfig.from_env(use_colors=use_colors)
    else:
        config = LoggerConfig.from_value(raw_threshold, use_colors=use_colors)  # type: ignore[arg-type]
    return LeveledLogger(config, stream=stream)


__all__ = ["LeveledLogger", "LogLine", "OPERATIONS", "make_logger"]
