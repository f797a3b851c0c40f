from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from arg_input.adapters.handles import HandleOpener, default_stdin, open_handle
from arg_input.domain.errors import NotSeekable, OpenFailed, ReadFailed, SourceError
from arg_input.domain.records import Line
from arg_input.domain.sources import SourceDescriptor, SourceList
from arg_input.observability.logging import LogMessage
from arg_input.ports.log_sink import LogSink
from arg_input.ports.source_handle import SourceHandle

_UNSET = object()


class ChainedReader:
    """Single read cursor over an ordered list of sources.

    Sources are opened lazily, one at a time, in list order. When the open
    source reports end-of-data it is closed and the next one is opened
    within the same read call, so callers only see the boundary through
    ``Line.source_name`` and the reset ``current_line_number``.

    A source that fails to open (OSError, or ValueError for a name open()
    rejects), or fails mid-read with an OSError, is
    skipped: the failure is stored in ``last_error`` and appended to
    ``errors``, and reading continues with the next source. Once every
    source has been consumed or skipped the reader is finished and every
    further read returns None.

    Not reentrant; callers sharing a reader must serialize access.
    """

    def __init__(
        self,
        sources: SourceList,
        *,
        stdin: BinaryIO | None | object = _UNSET,
        opener: HandleOpener = open_handle,
        log_sink: LogSink | None = None,
    ) -> None:
        self._sources = sources
        self._stdin = stdin
        self._opener = opener
        self._log_sink = log_sink
        self._cursor_index = 0
        self._handle: SourceHandle | None = None
        self._global_line_number = 0
        self._current_line_number = 0
        self._finished = False
        self._current_name: str | None = None
        self._source_index: int | None = None
        self.last_error: SourceError | None = None
        self.errors: list[SourceError] = []

    @property
    def sources(self) -> SourceList:
        return self._sources

    @property
    def cursor_index(self) -> int:
        return self._cursor_index

    @property
    def global_line_number(self) -> int:
        return self._global_line_number

    @property
    def current_line_number(self) -> int:
        return self._current_line_number

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def source_index(self) -> int | None:
        return self._source_index

    def current_source_name(self) -> str | None:
        # Name of the open or most recently opened source; None before the first open.
        return self._current_name

    def read_line(self) -> Line | None:
        while True:
            handle = self._acquire()
            if handle is None:
                return None
            try:
                payload = handle.read_line()
            except OSError as exc:
                self._skip(ReadFailed(self._current_name or "", exc))
                continue
            except BaseException:
                self._abandon()
                raise
            if not payload:
                self._advance()
                continue
            self._global_line_number += 1
            self._current_line_number += 1
            return Line(
                payload=payload,
                global_line_number=self._global_line_number,
                current_line_number=self._current_line_number,
                source_name=self._current_name or "",
            )

    def read_bytes(self, size: int) -> bytes | None:
        # Chunks never span two sources; line counters are left untouched.
        if size < 1:
            raise ValueError("read_bytes requires size >= 1")
        while True:
            handle = self._acquire()
            if handle is None:
                return None
            try:
                chunk = handle.read_bytes(size)
            except OSError as exc:
                self._skip(ReadFailed(self._current_name or "", exc))
                continue
            except BaseException:
                self._abandon()
                raise
            if not chunk:
                self._advance()
                continue
            return chunk

    def rewind_current_source(self) -> None:
        handle = self._handle
        if handle is None or not handle.seekable():
            raise NotSeekable(self._current_name)
        handle.rewind()
        self._current_line_number = 0

    def close(self) -> None:
        # Idempotent; a closed reader behaves as finished.
        self._release()
        self._finished = True

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line

    def __enter__(self) -> ChainedReader:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # Handles may already be gone during interpreter shutdown.
        handle = getattr(self, "_handle", None)
        if handle is not None:
            handle.close()

    def _acquire(self) -> SourceHandle | None:
        # Open the descriptor at the cursor, skipping any that fail to open.
        while self._handle is None:
            if self._finished:
                return None
            if self._cursor_index >= len(self._sources):
                self._finish()
                return None
            descriptor = self._sources.at(self._cursor_index)
            try:
                handle = self._opener(descriptor, self._resolve_stdin())
            except (OSError, ValueError) as exc:
                # ValueError covers names open() rejects outright, such as an embedded NUL byte.
                self._record(OpenFailed(descriptor.name, exc))
                self._cursor_index += 1
                continue
            except BaseException:
                self._cursor_index += 1
                raise
            self._opened(descriptor, handle)
        return self._handle

    def _opened(self, descriptor: SourceDescriptor, handle: SourceHandle) -> None:
        self._handle = handle
        self._current_name = descriptor.name
        self._source_index = self._cursor_index
        self._current_line_number = 0
        self._log("DEBUG", "source opened", source=descriptor.name, index=self._cursor_index)

    def _advance(self) -> None:
        # Clean end-of-data: the boundary crossing clears the sticky error.
        self._release()
        self._cursor_index += 1
        self._current_line_number = 0
        self.last_error = None

    def _skip(self, error: SourceError) -> None:
        self._record(error)
        self._release()
        self._cursor_index += 1
        self._current_line_number = 0

    def _abandon(self) -> None:
        # Unexpected failure: release and move past the source so it is never re-read.
        self._release()
        self._cursor_index += 1
        self._current_line_number = 0

    def _release(self) -> None:
        # Close-then-clear, on every path that leaves the open state.
        handle = self._handle
        self._handle = None
        if handle is not None:
            handle.close()

    def _finish(self) -> None:
        self._finished = True
        self._log(
            "DEBUG",
            "stream finished",
            lines=self._global_line_number,
            skipped=len(self.errors),
        )

    def _record(self, error: SourceError) -> None:
        self.last_error = error
        self.errors.append(error)
        self._log(
            "WARNING",
            "source skipped",
            source=error.source,
            error=type(error).__name__,
            cause=str(error.cause),
        )

    def _resolve_stdin(self) -> BinaryIO | None:
        if self._stdin is _UNSET:
            self._stdin = default_stdin()
        return self._stdin  # type: ignore[return-value]

    def _log(self, level: str, message: str, **fields: object) -> None:
        if self._log_sink is not None:
            self._log_sink.emit(LogMessage(level=level, message=message, fields=dict(fields)))
