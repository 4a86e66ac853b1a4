from __future__ import annotations

from dataclasses import dataclass

from .reasons import ReasonCode


@dataclass(frozen=True, slots=True)
class Accepted:
    is_new_day: bool = False
    is_new_week: bool = False

    @property
    def resets_day(self) -> bool:
        # A new week always starts a new day for counter purposes.
        return self.is_new_day or self.is_new_week


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: ReasonCode


@dataclass(frozen=True, slots=True)
class Duplicate:
    pass


Decision = Accepted | Rejected | Duplicate
