from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .money import Money


@dataclass(frozen=True, slots=True)
class RawLine:
    # RawLine preserves input order via line_no.
    line_no: int
    raw_text: str


@dataclass(frozen=True, slots=True)
class LoadEvent:
    # Normalized load; time is always timezone-aware.
    line_no: int
    id: str
    customer_id: str
    amount: Money
    time: datetime


@dataclass(frozen=True, slots=True)
class LoadResult:
    # Output record for accepted/rejected loads; duplicates never produce one.
    line_no: int
    id: str
    customer_id: str
    accepted: bool
