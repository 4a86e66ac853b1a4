from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


# Errors are explicit for fast config feedback.
class UnknownStepError(KeyError):
    pass


StepFactory = Callable[[dict[str, object], dict[str, object]], Callable[[object, object], list[object]]]


@dataclass
class StepRegistry:
    # Registry maps step names to factories taking (step config, wiring).
    _factories: dict[str, StepFactory] = field(default_factory=dict)

    def register(self, name: str, factory: StepFactory) -> None:
        # Later registration overrides an earlier one with the same name.
        self._factories[name] = factory

    def get(self, name: str) -> StepFactory:
        if name not in self._factories:
            raise UnknownStepError(f"Unknown step '{name}'; registered: {', '.join(self.names())}")
        return self._factories[name]

    def names(self) -> list[str]:
        return sorted(self._factories)
