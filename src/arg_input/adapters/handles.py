from __future__ import annotations

import sys
from collections.abc import Callable
from typing import BinaryIO

from arg_input.domain.sources import NamedFile, SourceDescriptor, StandardInput
from arg_input.ports.source_handle import SourceHandle


class BufferedSourceHandle(SourceHandle):
    # Shared read logic over a buffered binary stream.
    def __init__(self, stream: BinaryIO | None, *, owns_stream: bool) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def read_line(self) -> bytes:
        if self._stream is None or self._closed:
            return b""
        return self._stream.readline()

    def read_bytes(self, size: int) -> bytes:
        if self._stream is None or self._closed:
            return b""
        # read1 returns what one underlying read yields, so pipes and terminals do not block for `size` bytes.
        read1 = getattr(self._stream, "read1", None)
        if callable(read1):
            return read1(size)
        return self._stream.read(size)

    def seekable(self) -> bool:
        if self._stream is None or self._closed:
            return False
        return self._stream.seekable()

    def rewind(self) -> None:
        if self._stream is None or self._closed:
            raise ValueError("rewind on a closed handle")
        self._stream.seek(0)

    def close(self) -> None:
        # Close is idempotent; borrowed streams are left open for their owner.
        if self._closed:
            return
        self._closed = True
        if self._owns_stream and self._stream is not None:
            self._stream.close()


class FileSourceHandle(BufferedSourceHandle):
    # Exclusively owned file handle for a NamedFile source.
    def __init__(self, path: str) -> None:
        super().__init__(open(path, "rb"), owns_stream=True)
        self.path = path


class StdinSourceHandle(BufferedSourceHandle):
    # Borrowed view of the process's standard input; never closes it and never rewinds.
    def __init__(self, stream: BinaryIO | None) -> None:
        super().__init__(stream, owns_stream=False)

    def seekable(self) -> bool:
        return False


def default_stdin() -> BinaryIO | None:
    # Binary standard input of the process, or None when the process has none.
    stdin = sys.stdin
    if stdin is None:
        return None
    return getattr(stdin, "buffer", None)


def _open_named_file(descriptor: SourceDescriptor, stdin: BinaryIO | None) -> SourceHandle:
    assert isinstance(descriptor, NamedFile)
    return FileSourceHandle(descriptor.path)


def _open_standard_input(descriptor: SourceDescriptor, stdin: BinaryIO | None) -> SourceHandle:
    return StdinSourceHandle(stdin)


HandleOpener = Callable[[SourceDescriptor, BinaryIO | None], SourceHandle]

# Descriptor kind -> opener; new source kinds register here instead of branching in the reader.
_OPENERS: dict[type, HandleOpener] = {
    NamedFile: _open_named_file,
    StandardInput: _open_standard_input,
}


def open_handle(descriptor: SourceDescriptor, stdin: BinaryIO | None) -> SourceHandle:
    """Open the handle for one descriptor.

    Raises OSError when a named file cannot be opened, or ValueError when
    its name cannot be passed to open() at all; standard input never fails
    to open.
    """
    opener = _OPENERS.get(type(descriptor))
    if opener is None:
        raise TypeError(f"No opener registered for source kind {type(descriptor).__name__}")
    return opener(descriptor, stdin)
