from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from load_velocity.usecases.config_models import AppConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "baseline_config.yml"

_ALLOWED_TOP_LEVEL = {"version", "scenario", "pipeline", "input", "output", "diagnostics"}
_REQUIRED_TOP_LEVEL = ("version", "scenario", "pipeline")


# ConfigError is raised for invalid configuration before any input is read.
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _ALLOWED_TOP_LEVEL
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    missing = [key for key in _REQUIRED_TOP_LEVEL if key not in raw]
    if missing:
        raise ConfigError(f"Missing required top-level keys: {', '.join(missing)}")

    pipeline = raw.get("pipeline")
    if not isinstance(pipeline, dict) or "steps" not in pipeline:
        raise ConfigError("pipeline.steps is required")
    if not isinstance(pipeline.get("steps"), list):
        raise ConfigError("pipeline.steps must be a list")
