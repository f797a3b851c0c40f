from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Line:
    # One line as read from a source; payload keeps its terminator when the source had one.
    payload: bytes
    global_line_number: int
    current_line_number: int
    source_name: str

    @property
    def content(self) -> bytes:
        # Payload without its trailing "\n" or "\r\n".
        if self.payload.endswith(b"\r\n"):
            return self.payload[:-2]
        if self.payload.endswith(b"\n"):
            return self.payload[:-1]
        return self.payload
