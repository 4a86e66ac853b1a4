from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from load_velocity.domain.decision import Decision
from load_velocity.domain.messages import LoadEvent
from load_velocity.ledger.policy import apply, evaluate
from load_velocity.ledger.state import CustomerSnapshot, CustomerState


@dataclass
class CustomerLedger:
    # Owns the customer-id -> state mapping for one run; nothing else mutates it.
    # Single-threaded by contract: events for a customer must arrive in order.
    _states: dict[str, CustomerState] = field(default_factory=dict)

    def consume(self, event: LoadEvent) -> Decision:
        state = self._states.get(event.customer_id)
        if state is None:
            state = CustomerState()
        decision = evaluate(event, state)
        apply(state, event, decision)
        # Committed only after the decision so a lazily created state is stored once.
        self._states[event.customer_id] = state
        return decision

    def snapshot(self, customer_id: str) -> CustomerSnapshot | None:
        state = self._states.get(customer_id)
        if state is None:
            return None
        return state.snapshot()

    def customer_ids(self) -> Iterator[str]:
        return iter(tuple(self._states))

    def clear(self) -> None:
        self._states.clear()

    def __contains__(self, customer_id: object) -> bool:
        return customer_id in self._states

    def __len__(self) -> int:
        return len(self._states)
