from .domain import LogMessage
from .sinks import InMemoryLogSink, JsonlLogSink, LogSink, StreamLogSink, emit_log

__all__ = ["LogMessage", "LogSink", "StreamLogSink", "JsonlLogSink", "InMemoryLogSink", "emit_log"]
