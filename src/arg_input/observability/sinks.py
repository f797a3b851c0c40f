from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from arg_input.observability.logging import LogMessage, level_value


class StderrLogSink:
    # Structured log sink on stderr; stdout is reserved for stream data.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        stream.write(payload + "\n")
        stream.flush()


class JsonlLogSink:
    # File-backed structured log sink; the file is opened lazily and appended to.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._file: TextIO | None = None

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self._path.open("a", encoding="utf-8")
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        # Close is idempotent to simplify shutdown paths.
        if self._file is None:
            return
        self._file.close()
        self._file = None


class NullLogSink:
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        pass


class LevelFilterSink:
    # Drops messages below the configured level before delegating.
    def __init__(self, inner: object, level: str) -> None:
        self._inner = inner
        self._threshold = level_value(level)

    def emit(self, message: LogMessage) -> None:
        if level_value(message.level) >= self._threshold:
            self._inner.emit(message)  # type: ignore[attr-defined]

    def close(self) -> None:
        close = getattr(self._inner, "close", None)
        if callable(close):
            close()


def log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }


def build_log_sink(kind: str, level: str = "WARNING", path: str | None = None) -> LevelFilterSink:
    # Maps the logging config section to a filtered sink.
    inner: StderrLogSink | JsonlLogSink | NullLogSink
    if kind == "stderr":
        inner = StderrLogSink()
    elif kind == "jsonl":
        if not isinstance(path, str) or not path:
            raise ValueError("logging.path must be a non-empty string for the jsonl sink")
        inner = JsonlLogSink(Path(path))
    elif kind == "none":
        inner = NullLogSink()
    else:
        raise ValueError(f"Unknown log sink: {kind}")
    return LevelFilterSink(inner, level)
