from .logging import LEVELS, LogMessage, level_value
from .sinks import JsonlLogSink, LevelFilterSink, NullLogSink, StderrLogSink, build_log_sink

__all__ = [
    "LEVELS",
    "LogMessage",
    "level_value",
    "JsonlLogSink",
    "LevelFilterSink",
    "NullLogSink",
    "StderrLogSink",
    "build_log_sink",
]
