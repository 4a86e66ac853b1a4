from __future__ import annotations

from dataclasses import dataclass

from load_velocity.kernel.context import ContextFactory
from load_velocity.kernel.runner import Runner
from load_velocity.kernel.scenario import Scenario
from load_velocity.kernel.scenario_builder import ScenarioBuilder
from load_velocity.usecases.config_models import AppConfig
from load_velocity.usecases.wiring import build_step_registry


@dataclass(frozen=True, slots=True)
class AppRuntime:
    # AppRuntime is a small bundle for runner + scenario.
    runner: Runner
    scenario: Scenario


def build_runtime(*, config: AppConfig, wiring: dict[str, object], run_id: str = "run") -> AppRuntime:
    # Composition root wires registry, builder and runner from typed config.
    registry = build_step_registry(config, wiring)
    steps = [step.model_dump() for step in config.pipeline.steps]
    scenario = ScenarioBuilder(registry).build(
        scenario_id=config.scenario.name,
        steps=steps,
        wiring=wiring,
    )
    runner = Runner(scenario=scenario, context_factory=ContextFactory(run_id, config.scenario.name))
    return AppRuntime(runner=runner, scenario=scenario)
