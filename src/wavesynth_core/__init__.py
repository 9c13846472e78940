# src/wavesynth_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.debug("WaveSynth Core package initialized.")

from .units import ureg, pint, Quantity
from .clock import SampleClock, sample_time, sample_times
from .waveforms import Waveform, WaveformKind, WaveformSpec, PhaseMode, InvalidParameterError
from .processing import (
    combine, mean_of_range, sum_of_range, partition_windows, quarter_windows, InvalidRangeError
)
from .config import (
    RunConfig, WaveformConfig, DEFAULT_RUN_CONFIG, ConfigParsingError,
    load_run_config, parse_run_config, parse_run_config_yaml,
)
from .pipeline import run_pipeline, PipelineResult
from .report import format_report
from .errors import WaveSynthError, ConfigurationError, PipelineRunError

__all__ = [
    # Units
    "ureg", "pint", "Quantity",
    # Sample clock
    "SampleClock", "sample_time", "sample_times",
    # Waveforms
    "Waveform", "WaveformKind", "WaveformSpec", "PhaseMode",
    # Processing
    "combine", "mean_of_range", "sum_of_range", "partition_windows", "quarter_windows",
    # Configuration
    "RunConfig", "WaveformConfig", "DEFAULT_RUN_CONFIG",
    "load_run_config", "parse_run_config", "parse_run_config_yaml",
    # Pipeline & report
    "run_pipeline", "PipelineResult", "format_report",
    # Diagnosable errors
    "InvalidParameterError", "InvalidRangeError", "ConfigParsingError",
    # Top-Level Errors (Actionable Diagnostics)
    "WaveSynthError", "ConfigurationError", "PipelineRunError",
]
