from __future__ import annotations

from typing import Protocol, runtime_checkable

from arg_input.observability.logging import LogMessage


# LogSink port receives structured reader/CLI diagnostics.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Deliver one structured log message."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
