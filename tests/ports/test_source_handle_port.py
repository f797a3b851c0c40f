from __future__ import annotations

import pytest

from arg_input.observability.logging import LogMessage
from arg_input.ports.log_sink import LogSink
from arg_input.ports.source_handle import SourceHandle


def test_source_handle_port_default_raises() -> None:
    # Direct port calls without an adapter are wiring errors.
    class _PortOnly(SourceHandle):
        pass

    port = _PortOnly()  # type: ignore[misc]
    with pytest.raises(NotImplementedError):
        port.read_line()
    with pytest.raises(NotImplementedError):
        port.read_bytes(1)
    with pytest.raises(NotImplementedError):
        port.seekable()
    with pytest.raises(NotImplementedError):
        port.rewind()
    with pytest.raises(NotImplementedError):
        port.close()


def test_log_sink_port_default_raises() -> None:
    class _PortOnly(LogSink):
        pass

    port = _PortOnly()  # type: ignore[misc]
    with pytest.raises(NotImplementedError):
        port.emit(LogMessage(level="INFO", message="x"))
