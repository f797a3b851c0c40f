from __future__ import annotations

from typing import Protocol, runtime_checkable


# SourceHandle port is the capability set every open source provides to the reader.
@runtime_checkable
class SourceHandle(Protocol):
    def read_line(self) -> bytes:
        """Return one line including its terminator; b"" means end-of-data."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("SourceHandle is a port; use a concrete adapter.")

    def read_bytes(self, size: int) -> bytes:
        """Return 1..size bytes; b"" means end-of-data."""
        raise NotImplementedError("SourceHandle is a port; use a concrete adapter.")

    def seekable(self) -> bool:
        """Report whether rewind() can reposition this handle."""
        raise NotImplementedError("SourceHandle is a port; use a concrete adapter.")

    def rewind(self) -> None:
        """Reposition the handle to the start of its source."""
        raise NotImplementedError("SourceHandle is a port; use a concrete adapter.")

    def close(self) -> None:
        """Release the underlying resource; safe to call more than once."""
        raise NotImplementedError("SourceHandle is a port; use a concrete adapter.")
