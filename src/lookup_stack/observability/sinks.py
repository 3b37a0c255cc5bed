from __future__ import annotations

import json
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from lookup_stack.observability.domain import LogMessage


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Consume one LogMessage."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")


class StreamLogSink(LogSink):
    # Writes one compact JSON object per line; stderr by default so stdout stays clean for CLI output.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(_dumps(message) + "\n")


class JsonlLogSink(LogSink):
    # File-backed structured log sink.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_dumps(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class InMemoryLogSink(LogSink):
    # Collects messages for tests and embedding callers.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)


def emit_log(sink: LogSink | None, level: str, message: str, **fields: object) -> None:
    # No-op without a sink so adapters can log unconditionally.
    if sink is None:
        return
    sink.emit(LogMessage(level=level, message=message, fields=fields))


def _dumps(message: LogMessage) -> str:
    return json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": _format_dt(message.timestamp),
        "fields": message.fields,
    }


def _format_dt(value: datetime) -> str:
    # RFC3339 UTC with Z suffix.
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")
