from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from arg_input.observability.logging import LogMessage
from arg_input.observability.sinks import (
    JsonlLogSink,
    LevelFilterSink,
    NullLogSink,
    StderrLogSink,
    build_log_sink,
)


class _CollectingSink:
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)


def test_log_message_rejects_empty_or_unknown_level() -> None:
    with pytest.raises(ValueError):
        LogMessage(level="", message="x")
    with pytest.raises(ValueError):
        LogMessage(level="INFO", message="")
    with pytest.raises(ValueError):
        LogMessage(level="TRACE", message="x")


def test_stderr_sink_writes_one_json_object_per_line() -> None:
    stream = io.StringIO()
    StderrLogSink(stream).emit(LogMessage(level="WARNING", message="source skipped", fields={"source": "a"}))
    record = json.loads(stream.getvalue())
    assert record["level"] == "WARNING"
    assert record["message"] == "source skipped"
    assert record["fields"] == {"source": "a"}
    assert record["timestamp"].endswith("Z")


def test_jsonl_sink_opens_lazily_and_appends(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "run.jsonl"
    sink = JsonlLogSink(path)
    assert not path.exists()
    sink.emit(LogMessage(level="INFO", message="one"))
    sink.emit(LogMessage(level="INFO", message="two"))
    sink.close()
    sink.close()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["one", "two"]


def test_level_filter_drops_lower_levels() -> None:
    inner = _CollectingSink()
    sink = LevelFilterSink(inner, "WARNING")
    sink.emit(LogMessage(level="DEBUG", message="d"))
    sink.emit(LogMessage(level="WARNING", message="w"))
    sink.emit(LogMessage(level="ERROR", message="e"))
    assert [m.message for m in inner.messages] == ["w", "e"]


def test_null_sink_accepts_everything() -> None:
    NullLogSink().emit(LogMessage(level="ERROR", message="ignored"))


def test_build_log_sink_validates_settings(tmp_path: Path) -> None:
    assert isinstance(build_log_sink("stderr"), LevelFilterSink)
    assert isinstance(build_log_sink("none", "DEBUG"), LevelFilterSink)
    assert isinstance(build_log_sink("jsonl", "INFO", str(tmp_path / "x.jsonl")), LevelFilterSink)
    with pytest.raises(ValueError):
        build_log_sink("jsonl")
    with pytest.raises(ValueError):
        build_log_sink("syslog")
    with pytest.raises(ValueError):
        build_log_sink("stderr", "LOUD")
