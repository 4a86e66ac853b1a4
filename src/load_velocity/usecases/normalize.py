"""Event normalizer: raw NDJSON record -> typed LoadEvent.

Stateless. Every failure is a ``MalformedEvent`` subclass so callers can drop
the record and keep going.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from load_velocity.domain.errors import MalformedRecord, MalformedTimestamp
from load_velocity.domain.messages import LoadEvent
from load_velocity.domain.money import parse_amount


class RawLoadRecord(BaseModel):
    id: str
    customer_id: str
    load_amount: str
    time: str

    # Strict: ids are opaque strings, so numeric JSON ids are rejected rather than coerced.
    model_config = ConfigDict(extra="ignore", strict=True)


def parse_record(raw_text: str) -> RawLoadRecord:
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise MalformedRecord(f"invalid JSON: {exc.msg}") from exc
    except RecursionError as exc:
        raise MalformedRecord("invalid JSON: nesting too deep") from exc

    if not isinstance(payload, dict):
        raise MalformedRecord("record must be a JSON object")

    try:
        return RawLoadRecord.model_validate(payload)
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        raise MalformedRecord(f"invalid or missing fields: {', '.join(fields)}") from exc


def parse_timestamp(value: str) -> datetime:
    # ISO-8601 with explicit offset; the offset is kept so windows follow the customer's zone.
    text = value.strip()
    try:
        ts = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise MalformedTimestamp(f"invalid timestamp: {value!r}") from exc

    if ts.tzinfo is None or ts.utcoffset() is None:
        raise MalformedTimestamp(f"timestamp missing timezone: {value!r}")

    return ts


def normalize(raw: RawLoadRecord | Mapping[str, Any], *, line_no: int = 0) -> LoadEvent:
    if not isinstance(raw, RawLoadRecord):
        try:
            raw = RawLoadRecord.model_validate(dict(raw))
        except ValidationError as exc:
            raise MalformedRecord("invalid or missing fields") from exc

    amount = parse_amount(raw.load_amount)
    time = parse_timestamp(raw.time)
    return LoadEvent(
        line_no=line_no,
        id=raw.id,
        customer_id=raw.customer_id,
        amount=amount,
        time=time,
    )
