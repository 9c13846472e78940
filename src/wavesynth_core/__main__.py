# src/wavesynth_core/__main__.py
"""
Command-line entry point: runs the reference pipeline and prints its report.

    python -m wavesynth_core [--log-level LEVEL] [--phase-mode MODE]
                             [--sample-count N] [--window-count K]

Invalid parameters fail before anything is written to stdout: the diagnostic
report goes to stderr and the exit status is 1.
"""
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_RUN_CONFIG, RunConfig
from .errors import WaveSynthError, ConfigurationError, DiagnosableError
from .log_config import setup_logging
from .pipeline import run_pipeline
from .report import format_report
from .waveforms import PhaseMode

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavesynth",
        description="Generate a sine and a square wave, mix them, and report window statistics.",
    )
    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics written to stderr (default: WARNING).",
    )
    parser.add_argument(
        "--phase-mode", default=DEFAULT_RUN_CONFIG.phase_mode.value, choices=[m.value for m in PhaseMode],
        help="How phase offsets map to phase angles (default: quadrature).",
    )
    parser.add_argument(
        "--sample-count", type=int, default=DEFAULT_RUN_CONFIG.sample_count,
        help=f"Samples per waveform (default: {DEFAULT_RUN_CONFIG.sample_count}).",
    )
    parser.add_argument(
        "--window-count", type=int, default=DEFAULT_RUN_CONFIG.window_count,
        help=f"Number of equal statistic windows (default: {DEFAULT_RUN_CONFIG.window_count}).",
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> RunConfig:
    try:
        return dataclasses.replace(
            DEFAULT_RUN_CONFIG,
            phase_mode=PhaseMode(args.phase_mode),
            sample_count=args.sample_count,
            window_count=args.window_count,
        )
    except DiagnosableError as e:
        raise ConfigurationError(e.get_diagnostic_report()) from e


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        config = _config_from_args(args)
        result = run_pipeline(config)
    except WaveSynthError as e:
        print(str(e), file=sys.stderr)
        return 1

    sys.stdout.write(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
