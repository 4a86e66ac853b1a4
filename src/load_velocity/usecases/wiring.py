from __future__ import annotations

from typing import Any

from load_velocity.kernel.step_registry import StepRegistry
from load_velocity.usecases.config_models import AppConfig
from load_velocity.usecases.steps import ConsumeLoad, FormatOutput, ParseLoadEvent, WriteOutput


def build_step_registry(config: AppConfig, wiring: dict[str, object]) -> StepRegistry:
    # Step factories receive (step config, wiring); ports come from wiring only.
    registry = StepRegistry()

    registry.register(
        "parse_load_event",
        lambda cfg, w: ParseLoadEvent(diagnostics=_require(w, "diagnostics")),
    )
    registry.register(
        "consume_load",
        lambda cfg, w: ConsumeLoad(
            ledger=_require(w, "ledger"),
            diagnostics=_require(w, "diagnostics"),
        ),
    )
    registry.register("format_output", lambda cfg, w: FormatOutput())
    registry.register(
        "write_output",
        lambda cfg, w: WriteOutput(output_sink=_require(w, "output_sink")),
    )

    return registry


def _require(wiring: dict[str, object], key: str) -> Any:
    # Wiring must provide required ports; raise KeyError to fail fast.
    if key not in wiring:
        raise KeyError(f"Missing wiring dependency: {key}")
    return wiring[key]
