from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

from load_velocity.domain.decision import Accepted, Duplicate, Rejected
from load_velocity.domain.limits import DAILY_LIMIT, DAILY_MAX_COUNT, WEEKLY_LIMIT
from load_velocity.domain.messages import LoadEvent
from load_velocity.domain.money import Money
from load_velocity.domain.reasons import ReasonCode
from load_velocity.ledger.policy import apply, evaluate
from load_velocity.ledger.state import CustomerState

LAST_LOAD_TIME = datetime(2020, 1, 1, 10, 1, 1, tzinfo=UTC)  # WED
LOAD_TIME = datetime(2020, 1, 1, 14, 1, 1, tzinfo=UTC)  # WED, same day


def _event(amount: Decimal | int, *, time: datetime = LOAD_TIME, id_value: str = "0") -> LoadEvent:
    # Helper builds a LoadEvent directly, bypassing the normalizer.
    return LoadEvent(
        line_no=1,
        id=id_value,
        customer_id="0",
        amount=Money(currency="USD", amount=Decimal(amount)),
        time=time,
    )


def _state(**overrides: object) -> CustomerState:
    state = CustomerState(last_load_time=LAST_LOAD_TIME)
    for key, value in overrides.items():
        setattr(state, key, value)
    return state


def test_initial_load_is_accepted_without_flags() -> None:
    assert evaluate(_event(1), CustomerState()) == Accepted()


def test_single_load_over_daily_limit_rejected() -> None:
    decision = evaluate(_event(DAILY_LIMIT + 1), CustomerState())
    assert decision == Rejected(ReasonCode.AMOUNT_OVER_LIMIT)


def test_single_load_over_weekly_limit_rejected() -> None:
    decision = evaluate(_event(WEEKLY_LIMIT + 1), CustomerState())
    assert decision == Rejected(ReasonCode.AMOUNT_OVER_LIMIT)


def test_absolute_cap_applies_regardless_of_history() -> None:
    # Even a fresh week does not rescue an oversized single load.
    state = _state()
    decision = evaluate(_event(DAILY_LIMIT + 1, time=LAST_LOAD_TIME + timedelta(weeks=2)), state)
    assert decision == Rejected(ReasonCode.AMOUNT_OVER_LIMIT)


def test_load_at_exact_daily_limit_accepted() -> None:
    assert evaluate(_event(DAILY_LIMIT), CustomerState()) == Accepted()


def test_duplicate_takes_priority_over_absolute_limit() -> None:
    state = CustomerState(seen_load_ids={"0"})
    assert evaluate(_event(DAILY_LIMIT + 1), state) == Duplicate()


def test_load_count_at_daily_cap_rejected() -> None:
    decision = evaluate(_event(1), _state(today_count=DAILY_MAX_COUNT))
    assert decision == Rejected(ReasonCode.DAILY_ATTEMPT_LIMIT)


def test_same_day_amount_over_daily_limit_rejected() -> None:
    state = _state(today_count=1, today_total=DAILY_LIMIT / 2)
    decision = evaluate(_event(DAILY_LIMIT / 2 + 1), state)
    assert decision == Rejected(ReasonCode.DAILY_AMOUNT_LIMIT)


def test_same_day_amount_at_daily_limit_accepted() -> None:
    state = _state(today_count=2, today_total=Decimal("4000"), weekly_total=Decimal("4000"))
    assert evaluate(_event(1000), state) == Accepted()


def test_same_week_amount_over_weekly_limit_rejected() -> None:
    state = _state(weekly_total=WEEKLY_LIMIT / 2)
    decision = evaluate(_event(WEEKLY_LIMIT / 2 + 1, time=LAST_LOAD_TIME + timedelta(days=1)), state)
    # 10001 is also above the daily cap, so the absolute check fires first.
    assert isinstance(decision, Rejected)


def test_weekly_cap_breach_on_new_day_rejected() -> None:
    state = _state(weekly_total=Decimal("17000"))
    decision = evaluate(_event(4000, time=LAST_LOAD_TIME + timedelta(days=1)), state)
    assert decision == Rejected(ReasonCode.WEEKLY_AMOUNT_LIMIT)


def test_weekly_cap_checked_before_daily_count() -> None:
    state = _state(today_count=DAILY_MAX_COUNT, weekly_total=Decimal("19000"))
    decision = evaluate(_event(2000), state)
    assert decision == Rejected(ReasonCode.WEEKLY_AMOUNT_LIMIT)


def test_load_not_after_last_load_rejected() -> None:
    assert evaluate(_event(1, time=LAST_LOAD_TIME), _state()) == Rejected(
        ReasonCode.LOAD_TIME_NOT_AFTER_LAST
    )
    earlier = LAST_LOAD_TIME - timedelta(seconds=1)
    assert evaluate(_event(1, time=earlier), _state()) == Rejected(ReasonCode.LOAD_TIME_NOT_AFTER_LAST)


def test_load_on_next_day_flags_new_day() -> None:
    decision = evaluate(_event(1, time=LAST_LOAD_TIME + timedelta(days=1)), _state())
    assert decision == Accepted(is_new_day=True)


def test_load_at_midnight_starts_new_day_even_at_count_cap() -> None:
    midnight = datetime(2020, 1, 2, tzinfo=UTC)
    state = _state(today_count=DAILY_MAX_COUNT, today_total=DAILY_LIMIT)
    assert evaluate(_event(1, time=midnight), state) == Accepted(is_new_day=True)


def test_load_on_next_week_flags_new_week() -> None:
    # Exactly one week after a Wednesday load lands in the following ISO week.
    state = _state(weekly_total=WEEKLY_LIMIT, today_count=DAILY_MAX_COUNT)
    decision = evaluate(_event(1, time=LAST_LOAD_TIME + timedelta(weeks=1)), state)
    assert decision == Accepted(is_new_week=True)


def test_load_on_sunday_stays_in_current_week() -> None:
    sunday = datetime(2020, 1, 5, 23, 59, 59, tzinfo=UTC)
    state = _state(weekly_total=Decimal("19999"))
    assert evaluate(_event(2, time=sunday), state) == Rejected(ReasonCode.WEEKLY_AMOUNT_LIMIT)


def test_apply_first_accepted_load_initializes_counters() -> None:
    state = CustomerState()
    event = _event(1)
    apply(state, event, Accepted())
    assert state.balance == Decimal("1")
    assert state.last_load_time == LOAD_TIME
    assert state.today_count == 1
    assert state.today_total == Decimal("1")
    assert state.weekly_total == Decimal("1")
    assert state.seen_load_ids == {"0"}


def test_apply_rejected_only_records_id() -> None:
    state = _state(balance=Decimal("10"), today_count=1, today_total=Decimal("10"), weekly_total=Decimal("10"))
    apply(state, _event(5, id_value="9"), Rejected(ReasonCode.DAILY_AMOUNT_LIMIT))
    assert state.seen_load_ids == {"9"}
    assert state.balance == Decimal("10")
    assert state.last_load_time == LAST_LOAD_TIME
    assert (state.today_count, state.today_total, state.weekly_total) == (1, Decimal("10"), Decimal("10"))


def test_apply_duplicate_only_records_id() -> None:
    state = _state(seen_load_ids={"0"}, balance=Decimal("3"))
    apply(state, _event(7), Duplicate())
    assert state.seen_load_ids == {"0"}
    assert state.balance == Decimal("3")


def test_apply_same_day_accumulates_all_windows() -> None:
    state = _state(balance=Decimal("10"), today_count=1, today_total=Decimal("10"), weekly_total=Decimal("10"))
    apply(state, _event(5), Accepted())
    assert state.balance == Decimal("15")
    assert state.today_count == 2
    assert state.today_total == Decimal("15")
    assert state.weekly_total == Decimal("15")


def test_apply_new_day_resets_daily_counters_only() -> None:
    state = _state(balance=Decimal("10"), today_count=3, today_total=Decimal("10"), weekly_total=Decimal("10"))
    next_day = LAST_LOAD_TIME + timedelta(days=1)
    apply(state, _event(5, time=next_day), Accepted(is_new_day=True))
    assert state.today_count == 1
    assert state.today_total == Decimal("5")
    assert state.weekly_total == Decimal("15")
    assert state.last_load_time == next_day


def test_apply_new_week_resets_daily_and_weekly() -> None:
    state = _state(balance=Decimal("100"), today_count=2, today_total=Decimal("50"), weekly_total=Decimal("100"))
    apply(state, _event(5, time=LAST_LOAD_TIME + timedelta(weeks=1)), Accepted(is_new_week=True))
    assert state.balance == Decimal("105")
    assert state.today_count == 1
    assert state.today_total == Decimal("5")
    assert state.weekly_total == Decimal("5")


EASTERN = timezone(timedelta(hours=-5))


def test_local_evening_load_stays_in_same_day() -> None:
    # 20:00-05:00 is past UTC midnight but still the same local day.
    state = CustomerState(last_load_time=datetime(2000, 1, 3, 12, 0, tzinfo=EASTERN), today_count=DAILY_MAX_COUNT)
    decision = evaluate(_event(1, time=datetime(2000, 1, 3, 20, 0, tzinfo=EASTERN)), state)
    assert decision == Rejected(ReasonCode.DAILY_ATTEMPT_LIMIT)


def test_local_midnight_starts_new_day() -> None:
    state = CustomerState(last_load_time=datetime(2000, 1, 3, 20, 0, tzinfo=EASTERN), today_count=DAILY_MAX_COUNT)
    decision = evaluate(_event(1, time=datetime(2000, 1, 4, 0, 0, tzinfo=EASTERN)), state)
    assert decision == Accepted(is_new_day=True)


def test_local_sunday_evening_stays_in_current_week() -> None:
    # Sunday 20:00-05:00 is Monday 01:00 UTC; the week follows the local calendar.
    state = CustomerState(
        last_load_time=datetime(2000, 1, 7, 12, 0, tzinfo=EASTERN),
        weekly_total=Decimal("19999"),
    )
    decision = evaluate(_event(2, time=datetime(2000, 1, 9, 20, 0, tzinfo=EASTERN)), state)
    assert decision == Rejected(ReasonCode.WEEKLY_AMOUNT_LIMIT)


def test_mixed_zone_boundary_is_cut_in_last_load_zone() -> None:
    # Last load at 23:00 UTC; next event at 23:30-05:00 (04:30 UTC next day) is a new UTC day.
    state = CustomerState(last_load_time=datetime(2000, 1, 3, 23, 0, tzinfo=UTC), today_count=DAILY_MAX_COUNT)
    decision = evaluate(_event(1, time=datetime(2000, 1, 3, 23, 30, tzinfo=EASTERN)), state)
    assert decision == Accepted(is_new_day=True)
