from __future__ import annotations

from dataclasses import dataclass

from load_velocity.ports.output_sink import OutputSink
from load_velocity.usecases.messages import OutputLine


@dataclass(frozen=True, slots=True)
class WriteOutput:
    # Terminal step: the sink owns persistence, the step just delegates.
    output_sink: OutputSink

    def __call__(self, msg: OutputLine, ctx: object | None) -> list[OutputLine]:
        self.output_sink.write_line(msg.json_text)
        return []
