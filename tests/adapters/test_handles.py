from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from arg_input.adapters.handles import (
    FileSourceHandle,
    StdinSourceHandle,
    default_stdin,
    open_handle,
)
from arg_input.domain.sources import NamedFile, StandardInput
from arg_input.ports.source_handle import SourceHandle


def test_file_handle_reads_lines_and_bytes(tmp_path: Path) -> None:
    path = tmp_path / "a.txt"
    path.write_bytes(b"one\ntwo")
    handle = FileSourceHandle(str(path))
    assert handle.read_line() == b"one\n"
    assert handle.read_bytes(2) == b"tw"
    assert handle.read_line() == b"o"
    assert handle.read_line() == b""
    handle.close()


def test_file_handle_rewinds_to_start(tmp_path: Path) -> None:
    path = tmp_path / "a.txt"
    path.write_bytes(b"one\ntwo\n")
    handle = FileSourceHandle(str(path))
    handle.read_line()
    assert handle.seekable()
    handle.rewind()
    assert handle.read_line() == b"one\n"
    handle.close()


def test_file_handle_close_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "a.txt"
    path.write_bytes(b"x\n")
    handle = FileSourceHandle(str(path))
    handle.close()
    handle.close()
    assert handle.closed
    assert handle.read_line() == b""
    assert not handle.seekable()


def test_stdin_handle_borrows_stream() -> None:
    # The process stdin is never closed or rewound by the reader.
    stream = io.BytesIO(b"in\n")
    handle = StdinSourceHandle(stream)
    assert handle.read_line() == b"in\n"
    assert not handle.seekable()
    handle.close()
    assert not stream.closed


def test_stdin_handle_without_stream_is_empty() -> None:
    handle = StdinSourceHandle(None)
    assert handle.read_line() == b""
    assert handle.read_bytes(4) == b""


def test_open_handle_dispatches_on_descriptor_kind(tmp_path: Path) -> None:
    path = tmp_path / "a.txt"
    path.write_bytes(b"x\n")
    file_handle = open_handle(NamedFile(str(path)), None)
    stdin_handle = open_handle(StandardInput(), io.BytesIO(b""))
    assert isinstance(file_handle, FileSourceHandle)
    assert isinstance(stdin_handle, StdinSourceHandle)
    assert isinstance(file_handle, SourceHandle)
    file_handle.close()


def test_open_handle_raises_os_error_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        open_handle(NamedFile(str(tmp_path / "missing.txt")), None)


def test_open_handle_rejects_unknown_descriptor_kind() -> None:
    with pytest.raises(TypeError):
        open_handle("a.txt", None)  # type: ignore[arg-type]


def test_default_stdin_uses_binary_buffer(monkeypatch: pytest.MonkeyPatch) -> None:
    buffer = io.BytesIO(b"")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(buffer))
    assert default_stdin() is buffer
    monkeypatch.setattr(sys, "stdin", None)
    assert default_stdin() is None
