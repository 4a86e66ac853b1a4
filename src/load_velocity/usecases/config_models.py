from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures; unknown keys fail fast.


class StepDecl(BaseModel):
    # Step declaration mirrors pipeline.steps entries.
    model_config = ConfigDict(extra="forbid")
    name: str
    config: dict[str, Any] = Field(default_factory=dict)


class PipelineConfig(BaseModel):
    # Pipeline configuration holds the ordered step list.
    model_config = ConfigDict(extra="forbid")
    steps: list[StepDecl]


class ScenarioConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    description: str | None = None


class InputConfig(BaseModel):
    # "file" and "file_path" are both accepted and normalized to file_path.
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    file_path: str = Field(default="input.txt", validation_alias=AliasChoices("file_path", "file"))


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    file_path: str = Field(default="output.txt", validation_alias=AliasChoices("file_path", "file"))
    atomic_replace: bool = False


class DiagnosticsJsonlConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str


class DiagnosticsSinkConfig(BaseModel):
    # Only one diagnostics sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stdout", "jsonl"] = "stdout"
    jsonl: DiagnosticsJsonlConfig | None = None

    @model_validator(mode="after")
    def _require_jsonl(self) -> DiagnosticsSinkConfig:
        # For jsonl kind, a jsonl section is required to avoid silent defaults.
        if self.kind == "jsonl" and self.jsonl is None:
            raise ValueError("diagnostics.sink.jsonl is required when kind is 'jsonl'")
        return self


class DiagnosticsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    enabled: bool = False
    sink: DiagnosticsSinkConfig = Field(default_factory=DiagnosticsSinkConfig)


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    scenario: ScenarioConfig
    pipeline: PipelineConfig
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    diagnostics: DiagnosticsConfig = Field(default_factory=DiagnosticsConfig)
