from __future__ import annotations

from typing import Protocol, runtime_checkable

from load_velocity.domain.logging import LogMessage


# DiagnosticsSink receives human-readable diagnostics; disabled sinks are no-ops.
@runtime_checkable
class DiagnosticsSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Consume one LogMessage; must not block or raise on normal input."""
        raise NotImplementedError("DiagnosticsSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Flush and release resources held by the sink."""
        raise NotImplementedError("DiagnosticsSink is a port; use a concrete adapter.")
