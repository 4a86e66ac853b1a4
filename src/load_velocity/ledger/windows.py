"""Day/week window boundaries anchored to the previous accepted load.

Windows are not wall-clock intervals: a customer's "today" ends at the first
midnight after their last accepted load, and their "week" ends at the first
Monday midnight after it. Both boundaries are computed in the zone carried by
the anchor timestamp.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta


def next_day_boundary(anchor: datetime) -> datetime:
    next_day = anchor.date() + timedelta(days=1)
    return datetime.combine(next_day, time.min, tzinfo=anchor.tzinfo)


def next_week_boundary(anchor: datetime) -> datetime:
    # weekday() is 0 for Monday, so this lands on the Monday after anchor's ISO week.
    day = anchor.date()
    next_monday = day + timedelta(days=7 - day.weekday())
    return datetime.combine(next_monday, time.min, tzinfo=anchor.tzinfo)
