from __future__ import annotations

from enum import Enum


# Stable internal reason codes; they reach diagnostics only, never the output record.
class ReasonCode(str, Enum):
    INPUT_PARSE_ERROR = "INPUT_PARSE_ERROR"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"
    INVALID_AMOUNT_FORMAT = "INVALID_AMOUNT_FORMAT"
    AMOUNT_OVER_LIMIT = "AMOUNT_OVER_LIMIT"
    LOAD_TIME_NOT_AFTER_LAST = "LOAD_TIME_NOT_AFTER_LAST"
    WEEKLY_AMOUNT_LIMIT = "WEEKLY_AMOUNT_LIMIT"
    DAILY_ATTEMPT_LIMIT = "DAILY_ATTEMPT_LIMIT"
    DAILY_AMOUNT_LIMIT = "DAILY_AMOUNT_LIMIT"
