from __future__ import annotations

from dataclasses import dataclass

from load_velocity.domain.errors import MalformedEvent
from load_velocity.domain.logging import LogMessage
from load_velocity.domain.messages import LoadEvent, RawLine
from load_velocity.ports.diagnostics import DiagnosticsSink
from load_velocity.usecases.normalize import normalize, parse_record


@dataclass(frozen=True, slots=True)
class ParseLoadEvent:
    # Malformed records are dropped with a diagnostic; the stream always continues.
    diagnostics: DiagnosticsSink

    def __call__(self, msg: RawLine, ctx: object | None) -> list[LoadEvent]:
        text = msg.raw_text.strip()
        if not text:
            return []

        try:
            record = parse_record(text)
            event = normalize(record, line_no=msg.line_no)
        except MalformedEvent as exc:
            self.diagnostics.emit(
                LogMessage(
                    level="WARN",
                    message=f"Unable to parse: {text}",
                    fields={
                        "line_no": msg.line_no,
                        "reason": exc.reason.value,
                        "detail": exc.message,
                    },
                )
            )
            return []

        return [event]
