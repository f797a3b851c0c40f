from .log_sink import LogSink
from .source_handle import SourceHandle

# Public port exports keep wiring explicit at composition time.
__all__ = ["LogSink", "SourceHandle"]
