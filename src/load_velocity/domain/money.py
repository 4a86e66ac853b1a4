from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .errors import MalformedAmount


@dataclass(frozen=True, slots=True)
class Money:
    currency: str
    amount: Decimal

    def __post_init__(self) -> None:
        # Loads are non-negative by domain rule.
        if self.amount < 0:
            raise ValueError("Money amount must be non-negative")


# Fixed currency pattern: "$" then digits and an optional fraction; "$.50" is allowed, "$." is not.
_CURRENCY_PATTERN = re.compile(r"^\$(?=\.?\d)(\d*(?:\.\d*)?)$")


def parse_amount(raw: str, *, currency: str = "USD") -> Money:
    if not isinstance(raw, str):
        raise MalformedAmount(f"load_amount must be a string, got {type(raw).__name__}")

    match = _CURRENCY_PATTERN.match(raw.strip())
    if match is None:
        raise MalformedAmount(f"load_amount does not match currency pattern: {raw!r}")

    try:
        amount = Decimal(match.group(1))
    except InvalidOperation as exc:
        raise MalformedAmount(f"load_amount is not a number: {raw!r}") from exc

    return Money(currency=currency, amount=amount)
