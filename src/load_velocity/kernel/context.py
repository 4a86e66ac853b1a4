from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(slots=True)
class Context:
    # Context is mutable runtime metadata for one input record (not domain state).
    trace_id: str
    run_id: str
    scenario_id: str
    line_no: int | None
    received_at: datetime


@dataclass(frozen=True, slots=True)
class ContextFactory:
    # ContextFactory owns per-record Context creation.
    run_id: str
    scenario_id: str

    def new(self, *, line_no: int | None = None) -> Context:
        return Context(
            trace_id=uuid.uuid4().hex,
            run_id=self.run_id,
            scenario_id=self.scenario_id,
            line_no=line_no,
            received_at=datetime.now(tz=UTC),
        )
