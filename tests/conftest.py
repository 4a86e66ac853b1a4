from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from load_velocity.domain.logging import LogMessage


@dataclass
class CollectingDiagnostics:
    # DiagnosticsSink stub keeps emitted messages for assertions.
    messages: list[LogMessage] = field(default_factory=list)
    closed: bool = False

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)

    def close(self) -> None:
        self.closed = True


@dataclass
class CollectingOutputSink:
    # OutputSink stub collects lines in write order.
    lines: list[str] = field(default_factory=list)
    closed: bool = False

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def diagnostics() -> CollectingDiagnostics:
    return CollectingDiagnostics()


@pytest.fixture
def output_sink() -> CollectingOutputSink:
    return CollectingOutputSink()
