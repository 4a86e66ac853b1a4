from __future__ import annotations

from dataclasses import dataclass


# Step-to-step messages that never leave the pipeline stay in usecases.
@dataclass(frozen=True, slots=True)
class OutputLine:
    # OutputLine is produced by FormatOutput and consumed by WriteOutput.
    line_no: int
    json_text: str
