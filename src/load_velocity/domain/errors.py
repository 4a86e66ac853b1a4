from __future__ import annotations

from .reasons import ReasonCode


class MalformedEvent(ValueError):
    # Base for per-record input failures; the record is dropped and the run continues.
    reason: ReasonCode = ReasonCode.INPUT_PARSE_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedRecord(MalformedEvent):
    reason = ReasonCode.INPUT_PARSE_ERROR


class MalformedAmount(MalformedEvent):
    reason = ReasonCode.INVALID_AMOUNT_FORMAT


class MalformedTimestamp(MalformedEvent):
    reason = ReasonCode.INVALID_TIMESTAMP
