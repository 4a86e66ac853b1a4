from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(slots=True)
class CustomerState:
    # Mutable per-customer counters; owned and mutated only by CustomerLedger.
    balance: Decimal = Decimal("0")
    last_load_time: datetime | None = None
    today_total: Decimal = Decimal("0")
    today_count: int = 0
    weekly_total: Decimal = Decimal("0")
    seen_load_ids: set[str] = field(default_factory=set)

    def snapshot(self) -> CustomerSnapshot:
        return CustomerSnapshot(
            balance=self.balance,
            last_load_time=self.last_load_time,
            today_total=self.today_total,
            today_count=self.today_count,
            weekly_total=self.weekly_total,
            seen_load_ids=frozenset(self.seen_load_ids),
        )


@dataclass(frozen=True, slots=True)
class CustomerSnapshot:
    # Read model handed out by the ledger so callers cannot mutate live state.
    balance: Decimal
    last_load_time: datetime | None
    today_total: Decimal
    today_count: int
    weekly_total: Decimal
    seen_load_ids: frozenset[str]
