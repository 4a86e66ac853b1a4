from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from load_velocity.domain.logging import LogMessage
from load_velocity.ports.diagnostics import DiagnosticsSink


class NullLogSink(DiagnosticsSink):
    # Diagnostics disabled: every call is a no-op.
    def emit(self, message: LogMessage) -> None:
        return None

    def close(self) -> None:
        return None


class StdoutLogSink(DiagnosticsSink):
    # Structured diagnostics, one compact JSON object per line.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(_encode(message) + "\n")

    def close(self) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.flush()


class JsonlLogSink(DiagnosticsSink):
    # File-backed structured diagnostics; appends so repeated runs keep history.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO | None = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            return
        self._file.write(_encode(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is None:
            return
        self._file.close()
        self._file = None


def _encode(message: LogMessage) -> str:
    payload = {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
