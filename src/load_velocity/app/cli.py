from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from load_velocity.adapters.factory import diagnostics_sink, file_input_source, file_output_sink
from load_velocity.config.loader import DEFAULT_CONFIG_PATH, load_config
from load_velocity.kernel.composition_root import build_runtime
from load_velocity.ledger.ledger import CustomerLedger
from load_velocity.usecases.config_models import AppConfig

# Thin orchestration wrapper; decision logic lives in ledger/ and usecases/.


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fund load velocity limit engine")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (defaults to the bundled baseline config)",
    )
    parser.add_argument("-i", "--input", help="Override input NDJSON file path")
    parser.add_argument("-o", "--output", help="Override output file path")
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=False,
        help="Emit per-record diagnostics",
    )
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_io_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI paths take precedence over config values.
    if getattr(args, "input", None) is not None:
        config.input.file_path = args.input
    if getattr(args, "output", None) is not None:
        config.output.file_path = args.output


def apply_debug_override(config: AppConfig, args: argparse.Namespace) -> None:
    # --debug only turns diagnostics on; the configured sink kind is kept.
    if getattr(args, "debug", False):
        config.diagnostics.enabled = True


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config_path = Path(args.config) if args.config is not None else DEFAULT_CONFIG_PATH
    config = load_config(config_path)
    apply_io_overrides(config, args)
    apply_debug_override(config, args)

    input_source = file_input_source(config)
    output_sink = file_output_sink(config)
    diagnostics = diagnostics_sink(config.diagnostics)
    wiring: dict[str, object] = {
        "ledger": CustomerLedger(),
        "output_sink": output_sink,
        "diagnostics": diagnostics,
    }
    runtime = build_runtime(config=config, wiring=wiring, run_id="cli")
    try:
        runtime.runner.run(input_source.read(), output_sink=lambda _: None)
    finally:
        output_sink.close()
        diagnostics.close()
    return 0
