from .decision import Accepted, Decision, Duplicate, Rejected
from .errors import MalformedAmount, MalformedEvent, MalformedRecord, MalformedTimestamp
from .limits import DAILY_LIMIT, DAILY_MAX_COUNT, WEEKLY_LIMIT
from .logging import LogMessage
from .messages import LoadEvent, LoadResult, RawLine
from .money import Money, parse_amount
from .reasons import ReasonCode

# Public domain exports keep imports explicit across layers.
__all__ = [
    "Accepted",
    "DAILY_LIMIT",
    "DAILY_MAX_COUNT",
    "Decision",
    "Duplicate",
    "LoadEvent",
    "LoadResult",
    "LogMessage",
    "MalformedAmount",
    "MalformedEvent",
    "MalformedRecord",
    "MalformedTimestamp",
    "Money",
    "RawLine",
    "ReasonCode",
    "Rejected",
    "WEEKLY_LIMIT",
    "parse_amount",
]
