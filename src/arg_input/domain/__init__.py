from .errors import NotSeekable, OpenFailed, OutOfRange, ReadFailed, SourceError, SourcesUnavailable
from .records import Line
from .sources import STDIN_MARKER, NamedFile, SourceDescriptor, SourceList, StandardInput, descriptor_for

__all__ = [
    "STDIN_MARKER",
    "Line",
    "NamedFile",
    "NotSeekable",
    "OpenFailed",
    "OutOfRange",
    "ReadFailed",
    "SourceDescriptor",
    "SourceError",
    "SourceList",
    "SourcesUnavailable",
    "StandardInput",
    "descriptor_for",
]
