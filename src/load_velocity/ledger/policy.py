from __future__ import annotations

from load_velocity.domain.decision import Accepted, Decision, Duplicate, Rejected
from load_velocity.domain.limits import DAILY_LIMIT, DAILY_MAX_COUNT, WEEKLY_LIMIT
from load_velocity.domain.messages import LoadEvent
from load_velocity.domain.reasons import ReasonCode
from load_velocity.ledger.state import CustomerState
from load_velocity.ledger.windows import next_day_boundary, next_week_boundary


def evaluate(event: LoadEvent, state: CustomerState) -> Decision:
    """Decide a single load against the customer's current state.

    Pure function: ``state`` is only read. Check order is significant:
    duplicate, absolute cap, first load, ordering, new week, weekly cap,
    new day, daily count, daily amount.
    """
    # Seen ids are never re-evaluated for limits.
    if event.id in state.seen_load_ids:
        return Duplicate()

    amount = event.amount.amount
    if amount > DAILY_LIMIT or amount > WEEKLY_LIMIT:
        return Rejected(ReasonCode.AMOUNT_OVER_LIMIT)

    last = state.last_load_time
    if last is None:
        # First accepted load establishes both windows.
        return Accepted()

    # Comparisons are between instants; boundaries are cut in the zone of the last load.
    if not event.time > last:
        return Rejected(ReasonCode.LOAD_TIME_NOT_AFTER_LAST)

    if event.time >= next_week_boundary(last):
        return Accepted(is_new_week=True)

    # Weekly cap is checked before any daily rule, even within the same day.
    if state.weekly_total + amount > WEEKLY_LIMIT:
        return Rejected(ReasonCode.WEEKLY_AMOUNT_LIMIT)

    if event.time >= next_day_boundary(last):
        return Accepted(is_new_day=True)

    if state.today_count == DAILY_MAX_COUNT:
        return Rejected(ReasonCode.DAILY_ATTEMPT_LIMIT)
    if state.today_total + amount > DAILY_LIMIT:
        return Rejected(ReasonCode.DAILY_AMOUNT_LIMIT)

    return Accepted()


def apply(state: CustomerState, event: LoadEvent, decision: Decision) -> None:
    # The id is recorded for every decision, including rejections and duplicates.
    state.seen_load_ids.add(event.id)

    if not isinstance(decision, Accepted):
        return

    amount = event.amount.amount
    state.balance += amount
    state.last_load_time = event.time

    if decision.resets_day:
        state.today_count = 1
        state.today_total = amount
    else:
        state.today_count += 1
        state.today_total += amount

    if decision.is_new_week:
        state.weekly_total = amount
    else:
        state.weekly_total += amount
