from __future__ import annotations

from pathlib import Path

from load_velocity.adapters.input_source import FileInputSource
from load_velocity.adapters.log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink
from load_velocity.adapters.output_sink import FileOutputSink
from load_velocity.ports.diagnostics import DiagnosticsSink
from load_velocity.usecases.config_models import AppConfig, DiagnosticsConfig


def file_input_source(config: AppConfig) -> FileInputSource:
    return FileInputSource(Path(config.input.file_path))


def file_output_sink(config: AppConfig) -> FileOutputSink:
    return FileOutputSink(Path(config.output.file_path), atomic_replace=config.output.atomic_replace)


def diagnostics_sink(config: DiagnosticsConfig | None) -> DiagnosticsSink:
    # Sink selection: disabled -> no-op, otherwise the configured kind (stdout by default).
    if config is None or not config.enabled:
        return NullLogSink()
    if config.sink.kind == "jsonl":
        assert config.sink.jsonl is not None
        return JsonlLogSink(Path(config.sink.jsonl.path))
    return StdoutLogSink()
