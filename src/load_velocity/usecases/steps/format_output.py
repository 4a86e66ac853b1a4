from __future__ import annotations

import json

from load_velocity.domain.messages import LoadResult
from load_velocity.usecases.messages import OutputLine


class FormatOutput:
    def __call__(self, msg: LoadResult, ctx: object | None) -> list[OutputLine]:
        # Only id, customer_id, accepted are emitted, in that key order, compact.
        payload = {"id": msg.id, "customer_id": msg.customer_id, "accepted": msg.accepted}
        json_text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        return [OutputLine(line_no=msg.line_no, json_text=json_text)]
