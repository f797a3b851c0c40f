from .handles import (
    BufferedSourceHandle,
    FileSourceHandle,
    HandleOpener,
    StdinSourceHandle,
    default_stdin,
    open_handle,
)
from .stream import ChainedStream

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "BufferedSourceHandle",
    "ChainedStream",
    "FileSourceHandle",
    "HandleOpener",
    "StdinSourceHandle",
    "default_stdin",
    "open_handle",
]
