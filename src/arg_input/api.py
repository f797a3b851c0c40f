from __future__ import annotations

import io
import os
import sys
from collections.abc import Iterable, Iterator
from typing import BinaryIO

from arg_input.adapters.handles import open_handle
from arg_input.adapters.stream import ChainedStream
from arg_input.domain.errors import OpenFailed, SourcesUnavailable
from arg_input.domain.sources import NamedFile, SourceList
from arg_input.kernel.chained_reader import ChainedReader
from arg_input.ports.log_sink import LogSink

_DEFAULT_STDIN = object()

Names = Iterable[str | os.PathLike[str]]


def preflight(sources: SourceList) -> list[OpenFailed]:
    # Open and immediately close every named file, collecting all failures in list order.
    # Unopenable names (e.g. an embedded NUL byte) count as failures too.
    failures: list[OpenFailed] = []
    for descriptor in sources:
        if not isinstance(descriptor, NamedFile):
            continue
        try:
            handle = open_handle(descriptor, None)
        except (OSError, ValueError) as exc:
            failures.append(OpenFailed(descriptor.name, exc))
            continue
        handle.close()
    return failures


def open_reader(
    names: Names,
    *,
    strict: bool = False,
    stdin: BinaryIO | None | object = _DEFAULT_STDIN,
    log_sink: LogSink | None = None,
) -> ChainedReader:
    """Build a ChainedReader over ``names``.

    With ``strict`` every named file is checked up front and
    SourcesUnavailable is raised listing all that cannot be opened;
    otherwise unreadable sources are skipped while reading.
    """
    sources = SourceList.from_names(names)
    if strict:
        failures = preflight(sources)
        if failures:
            raise SourcesUnavailable(failures)
    if stdin is _DEFAULT_STDIN:
        return ChainedReader(sources, log_sink=log_sink)
    return ChainedReader(sources, stdin=stdin, log_sink=log_sink)


def input(
    names: Names,
    *,
    strict: bool = False,
    stdin: BinaryIO | None | object = _DEFAULT_STDIN,
    log_sink: LogSink | None = None,
) -> io.BufferedReader:
    # Whole chain as one buffered binary file; no names means stdin only.
    reader = open_reader(names, strict=strict, stdin=stdin, log_sink=log_sink)
    return io.BufferedReader(ChainedStream(reader))


def input_lines(
    names: Names,
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
    strict: bool = False,
    stdin: BinaryIO | None | object = _DEFAULT_STDIN,
    log_sink: LogSink | None = None,
) -> Iterator[str]:
    # Decoded lines without terminators. Strict failures surface on creation, not on first next().
    reader = open_reader(names, strict=strict, stdin=stdin, log_sink=log_sink)
    return _decoded_lines(reader, encoding, errors)


def _decoded_lines(reader: ChainedReader, encoding: str, errors: str) -> Iterator[str]:
    with reader:
        for line in reader:
            yield line.content.decode(encoding, errors)


def argf(*, strict: bool = False, log_sink: LogSink | None = None) -> io.BufferedReader:
    # Every command-line argument after the program name is a source name.
    return input(sys.argv[1:], strict=strict, log_sink=log_sink)


def argf_lines(
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
    strict: bool = False,
    log_sink: LogSink | None = None,
) -> Iterator[str]:
    return input_lines(sys.argv[1:], encoding=encoding, errors=errors, strict=strict, log_sink=log_sink)
