from .ledger import CustomerLedger
from .policy import apply, evaluate
from .state import CustomerSnapshot, CustomerState
from .windows import next_day_boundary, next_week_boundary

__all__ = [
    "CustomerLedger",
    "CustomerSnapshot",
    "CustomerState",
    "apply",
    "evaluate",
    "next_day_boundary",
    "next_week_boundary",
]
