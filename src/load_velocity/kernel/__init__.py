from .context import Context, ContextFactory
from .runner import Runner
from .scenario import Scenario, StepSpec
from .scenario_builder import InvalidScenarioConfigError, ScenarioBuilder, StepBuildError
from .step_registry import StepRegistry, UnknownStepError

# Kernel exports are minimal and runtime-focused; composition_root is imported directly
# to avoid a cycle with usecases.
__all__ = [
    "Context",
    "ContextFactory",
    "InvalidScenarioConfigError",
    "Runner",
    "Scenario",
    "ScenarioBuilder",
    "StepBuildError",
    "StepSpec",
    "StepRegistry",
    "UnknownStepError",
]
