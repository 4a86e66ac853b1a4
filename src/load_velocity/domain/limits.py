from __future__ import annotations

from decimal import Decimal

# Velocity limits are fixed per customer; they are intentionally not configurable.
DAILY_LIMIT = Decimal("5000")
WEEKLY_LIMIT = Decimal("20000")
DAILY_MAX_COUNT = 3
