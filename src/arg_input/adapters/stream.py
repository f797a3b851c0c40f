from __future__ import annotations

import io
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arg_input.kernel.chained_reader import ChainedReader


class ChainedStream(io.RawIOBase):
    """Raw binary file object over a ChainedReader.

    Lets the chain be wrapped in ``io.BufferedReader`` or
    ``io.TextIOWrapper`` like any other file. Skipped sources stay
    visible through ``reader.errors``.
    """

    def __init__(self, reader: ChainedReader) -> None:
        super().__init__()
        self.reader = reader

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:  # type: ignore[override]
        view = memoryview(buffer).cast("B")
        if not len(view):
            return 0
        chunk = self.reader.read_bytes(len(view))
        if chunk is None:
            return 0
        view[: len(chunk)] = chunk
        return len(chunk)

    def close(self) -> None:
        if not self.closed:
            self.reader.close()
        super().close()
