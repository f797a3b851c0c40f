from __future__ import annotations


class SourceError(Exception):
    # Per-source failure; recorded by the reader and never raised out of a read call.
    def __init__(self, source: str, cause: OSError | ValueError) -> None:
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.cause = cause


class OpenFailed(SourceError):
    """A named source could not be opened (not found, permission denied, wrong type)."""


class ReadFailed(SourceError):
    """An already-open source failed mid-read; the rest of it was skipped."""


class NotSeekable(Exception):
    # Raised only by rewind; the stream state is left untouched.
    def __init__(self, source: str | None) -> None:
        super().__init__(f"{source or '<no source>'}: source cannot be rewound")
        self.source = source


class OutOfRange(IndexError):
    # SourceList index misuse is a contract violation, not an I/O condition.
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"source index {index} out of range for {length} sources")
        self.index = index
        self.length = length


class SourcesUnavailable(Exception):
    # Strict mode: every source that failed preflight, in list order.
    def __init__(self, errors: list[OpenFailed]) -> None:
        super().__init__("; ".join(str(error) for error in errors))
        self.errors = list(errors)
