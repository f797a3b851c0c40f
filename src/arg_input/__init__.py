from .api import argf, argf_lines, input, input_lines, open_reader, preflight
from .domain import (
    STDIN_MARKER,
    Line,
    NamedFile,
    NotSeekable,
    OpenFailed,
    OutOfRange,
    ReadFailed,
    SourceError,
    SourceList,
    SourcesUnavailable,
    StandardInput,
)
from .kernel import ChainedReader

__all__ = [
    "STDIN_MARKER",
    "ChainedReader",
    "Line",
    "NamedFile",
    "NotSeekable",
    "OpenFailed",
    "OutOfRange",
    "ReadFailed",
    "SourceError",
    "SourceList",
    "SourcesUnavailable",
    "StandardInput",
    "argf",
    "argf_lines",
    "input",
    "input_lines",
    "open_reader",
    "preflight",
]
