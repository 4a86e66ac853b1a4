from __future__ import annotations

from dataclasses import dataclass

from load_velocity.domain.decision import Accepted, Decision, Duplicate, Rejected
from load_velocity.domain.logging import LogMessage
from load_velocity.domain.messages import LoadEvent, LoadResult
from load_velocity.ledger.ledger import CustomerLedger
from load_velocity.ledger.state import CustomerSnapshot
from load_velocity.ports.diagnostics import DiagnosticsSink


@dataclass(frozen=True, slots=True)
class ConsumeLoad:
    # Hands each typed event to the ledger and shapes the decision into a result.
    ledger: CustomerLedger
    diagnostics: DiagnosticsSink

    def __call__(self, msg: LoadEvent, ctx: object | None) -> list[LoadResult]:
        before = self.ledger.snapshot(msg.customer_id)
        decision = self.ledger.consume(msg)
        self.diagnostics.emit(_describe(msg, decision, before))

        if isinstance(decision, Duplicate):
            # Duplicates are ignored: no output record, not even accepted=false.
            return []
        return [
            LoadResult(
                line_no=msg.line_no,
                id=msg.id,
                customer_id=msg.customer_id,
                accepted=isinstance(decision, Accepted),
            )
        ]


def _describe(msg: LoadEvent, decision: Decision, before: CustomerSnapshot | None) -> LogMessage:
    fields: dict[str, object] = {
        "line_no": msg.line_no,
        "id": msg.id,
        "customer_id": msg.customer_id,
        "amount": str(msg.amount.amount),
        "time": msg.time.isoformat(),
    }
    if before is not None:
        fields["today_count"] = before.today_count
        fields["today_total"] = str(before.today_total)
        fields["weekly_total"] = str(before.weekly_total)

    if isinstance(decision, Accepted):
        if decision.is_new_week:
            text = "[Accepted] First load of the week"
        elif decision.is_new_day:
            text = "[Accepted] First load of the day"
        elif before is None or before.last_load_time is None:
            text = "[Accepted] Initial load"
        else:
            text = "[Accepted] Load amount within daily limit"
    elif isinstance(decision, Rejected):
        fields["reason"] = decision.reason.value
        text = f"[Rejected] {decision.reason.value}"
    else:
        text = f"[Ignored] Load id ({msg.id}) already exists for this customer"
    return LogMessage(level="DEBUG", message=text, fields=fields)
