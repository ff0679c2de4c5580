# tests/test_leveled.py
"""Tests for the leveled logger."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest

from shlog.config import ANSI_RED, ANSI_RESET, LoggerConfig, Severity
from shlog.leveled import OPERATIONS, LeveledLogger, LogLine, make_logger

from conftest import strip_ansi

ALL_OPS = ("info", "warn", "error", "trace")

GATING = {
    "trace": {"info", "warn", "error", "trace"},
    "info": {"info", "warn", "error"},
    "warn": {"warn", "error"},
    "error": {"error"},
    None: {"info", "warn", "error"},
    "bogus": set(),
}

LABELS = {"info": "INFO", "warn": "WARNING", "error": "ERROR", "trace": "TRACE"}


def _emitted(threshold, stream: io.StringIO) -> set[str]:
    log = make_logger(threshold, stream=stream)
    for op in ALL_OPS:
        getattr(log, op)("msg")
    lines = strip_ansi(stream.getvalue()).splitlines()
    by_label = {label: op for op, label in LABELS.items()}
    return {by_label[line.split(":", 1)[0]] for line in lines}


@pytest.mark.parametrize("threshold,expected", list(GATING.items()))
def test_gating_table(threshold, expected, stream: io.StringIO) -> None:
    assert _emitted(threshold, stream) == expected


def test_error_at_warn_threshold(stream: io.StringIO) -> None:
    log = make_logger("warn", stream=stream)
    log.error("disk", "full")
    assert stream.getvalue() == f"{ANSI_RED}ERROR{ANSI_RESET}: disk full\n"
    assert strip_ansi(stream.getvalue()) == "ERROR: disk full\n"


def test_trace_at_warn_threshold_writes_nothing() -> None:
    sink = MagicMock()
    log = LeveledLogger(LoggerConfig.from_value("warn"), stream=sink)
    log.trace("x")
    sink.write.assert_not_called()


def test_each_accepted_call_is_one_write() -> None:
    sink = MagicMock()
    log = LeveledLogger(LoggerConfig.from_value("trace"), stream=sink)
    log.info("a", "b")
    log.trace("c")
    assert sink.write.call_count == 2


@pytest.mark.parametrize("message", ["plain", "ERROR: fake", "\033[32mgreen"])
def test_label_and_color_do_not_depend_on_message(message: str, stream: io.StringIO) -> None:
    log = make_logger("trace", stream=stream)
    log.warn(message)
    assert stream.getvalue() == f"{Severity.WARN.color}WARNING{ANSI_RESET}: {message}\n"


def test_tokens_joined_with_single_spaces(stream: io.StringIO) -> None:
    log = make_logger("info", stream=stream)
    log.info("  padded ", "two  spaces", 3)
    assert strip_ansi(stream.getvalue()) == "INFO:   padded  two  spaces 3\n"


def test_no_tokens_gives_empty_message(stream: io.StringIO) -> None:
    make_logger("info", stream=stream).error()
    assert strip_ansi(stream.getvalue()) == "ERROR: \n"


def test_aliases(stream: io.StringIO) -> None:
    log = make_logger("trace", stream=stream)
    log.log("a")
    log.warning("b")
    assert strip_ansi(stream.getvalue()).splitlines() == ["INFO: a", "WARNING: b"]


def test_default_logger_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    log = LeveledLogger()
    log.info("hello")
    log.trace("hidden")
    assert strip_ansi(capsys.readouterr().out) == "INFO: hello\n"


def test_make_logger_reads_env_once(
    monkeypatch: pytest.MonkeyPatch, stream: io.StringIO
) -> None:
    monkeypatch.setenv("SH_LOG", "error")
    log = make_logger(stream=stream)
    monkeypatch.setenv("SH_LOG", "trace")
    log.warn("ignored")
    log.error("kept")
    assert strip_ansi(stream.getvalue()) == "ERROR: kept\n"
    assert log.threshold is Severity.ERROR


def test_colors_can_be_disabled(stream: io.StringIO) -> None:
    make_logger("info", stream=stream, use_colors=False).info("x")
    assert stream.getvalue() == "INFO: x\n"


def test_enabled_with_unrecognized_threshold() -> None:
    log = make_logger("loud")
    assert not any(log.enabled(s) for s in Severity)
    assert repr(log) == "LeveledLogger(threshold=None)"


def test_log_line_render() -> None:
    line = LogLine.from_tokens(Severity.TRACE, ("a", "b"))
    assert line.message == "a b"
    assert line.render(use_colors=False) == "TRACE: a b"
    assert line.render().startswith(Severity.TRACE.color + "TRACE" + ANSI_RESET)


def test_operations_map_names_to_severities() -> None:
    assert OPERATIONS["log"] is Severity.INFO
    assert OPERATIONS["warning"] is Severity.WARN
    assert set(OPERATIONS.values()) == set(Severity)
