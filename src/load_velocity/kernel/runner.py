from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from load_velocity.kernel.context import Context, ContextFactory
from load_velocity.kernel.scenario import Scenario


class FinalSink(Protocol):
    # Runner callback for messages left after the last step.
    def __call__(self, msg: object) -> None:
        raise NotImplementedError("Runner final sink is a callback")


@dataclass(frozen=True, slots=True)
class Runner:
    # Runner executes the Scenario per input message in strict arrival order.
    scenario: Scenario
    context_factory: ContextFactory
    on_error: Callable[[Context, Exception], None] | None = None

    def run(self, inputs: Iterable[object], *, output_sink: FinalSink) -> None:
        # Depth-first: each input goes through every step before the next is read,
        # so ledger state seen by record N includes the effects of records 1..N-1.
        for raw in inputs:
            ctx = self.context_factory.new(line_no=getattr(raw, "line_no", None))
            work: list[object] = [raw]
            try:
                for step_spec in self.scenario.steps:
                    next_work: list[object] = []
                    for msg in work:
                        next_work.extend(list(step_spec.step(msg, ctx)))
                    work = next_work
                    if not work:
                        break
            except Exception as exc:
                if self.on_error is not None:
                    self.on_error(ctx, exc)
                    continue
                raise

            for msg in work:
                output_sink(msg)
