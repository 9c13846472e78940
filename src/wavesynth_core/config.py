# src/wavesynth_core/config.py
"""
The run configuration: which two waveforms are mixed, how many samples each one
has, how much of each waveform the report prints, and how the mixed signal is
split into statistic windows.

`DEFAULT_RUN_CONFIG` reproduces the reference run. Raw mappings (for example a
YAML document held in memory) are validated against a Cerberus schema and their
unit strings are parsed with pint before a `RunConfig` is built from them.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

import cerberus
import yaml

from .constants import (
    DEFAULT_SAMPLE_COUNT, DEFAULT_DURATION_S, DEFAULT_EPSILON_S, DEFAULT_WINDOW_COUNT
)
from .errors import ConfigurationError, DiagnosableError, format_diagnostic_report
from .units import to_magnitude, TIME_UNIT, UNIT_CONVERSION_ERRORS
from .waveforms import Waveform, WaveformKind, WaveformSpec, PhaseMode

logger = logging.getLogger(__name__)


@dataclass()
class ConfigParsingError(DiagnosableError, ValueError):
    """Raised when a raw run configuration is malformed or violates the schema."""
    details: str
    errors: Optional[Dict[str, Any]] = None

    def __str__(self):
        return f"Invalid run configuration: {self.details}"

    def get_diagnostic_report(self) -> str:
        details = self.details
        if self.errors:
            error_list_str = "\n".join(f"  - Field '{path}': {message}" for path, message in _flatten_errors(self.errors))
            details = f"{details}\nSee details for the issue(s) below:\n\n{error_list_str}"
        return format_diagnostic_report(
            error_type="Run Configuration Error",
            details=details,
            suggestion="Correct the specified fields. Frequencies accept numbers in Hz or unit strings such as '0.2 kHz'; durations accept numbers in seconds or strings such as '500 ms'.",
            context={}
        )


def _flatten_errors(errors: Any, prefix: str = "") -> List[tuple]:
    """Flattens Cerberus' nested error dictionaries into (dotted.path, message) pairs."""
    flat = []
    if isinstance(errors, dict):
        for key, value in sorted(errors.items(), key=lambda kv: str(kv[0])):
            path = f"{prefix}.{key}" if prefix else str(key)
            flat.extend(_flatten_errors(value, path))
    elif isinstance(errors, list):
        for item in errors:
            flat.extend(_flatten_errors(item, prefix))
    else:
        flat.append((prefix, errors))
    return flat


@dataclass(frozen=True)
class WaveformConfig:
    """One configured input of the mixer: a waveform kind and its spec."""
    kind: WaveformKind
    spec: WaveformSpec

    def build(self, sample_count: int, phase_mode: PhaseMode) -> Waveform:
        return Waveform(self.kind, self.spec, sample_count=sample_count, phase_mode=phase_mode)


def _default_carrier() -> WaveformConfig:
    return WaveformConfig(WaveformKind.SINE, WaveformSpec(10.0, 3.0, 90.0, 200.0))


def _default_modulator() -> WaveformConfig:
    return WaveformConfig(WaveformKind.SQUARE, WaveformSpec(40.0, 1.0, 0.0, 200.0))


@dataclass(frozen=True)
class RunConfig:
    """
    The complete, immutable set of run parameters.

    Attributes:
        carrier: The first mixer input (the sine in the reference run).
        modulator: The second mixer input (the square wave in the reference run).
        sample_count: Number of samples generated for each waveform.
        duration_s: Nominal signal duration; the report prints the samples of each
                    waveform whose time is at most `duration_s + epsilon_s`.
        epsilon_s: Tolerance added to `duration_s` for that cut-off.
        window_count: Number of equal windows the mixed signal is split into.
                      The mean is taken over window 0 and the sum over window 1.
        phase_mode: How phase offsets are turned into phase angles.
    """
    carrier: WaveformConfig = field(default_factory=_default_carrier)
    modulator: WaveformConfig = field(default_factory=_default_modulator)
    sample_count: int = DEFAULT_SAMPLE_COUNT
    duration_s: float = DEFAULT_DURATION_S
    epsilon_s: float = DEFAULT_EPSILON_S
    window_count: int = DEFAULT_WINDOW_COUNT
    phase_mode: PhaseMode = PhaseMode.QUADRATURE

    def __post_init__(self):
        for name in ('sample_count', 'window_count'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigParsingError(details=f"'{name}' must be a positive integer, got {value!r}.")
        # The sum is taken over the second window.
        if self.window_count < 2:
            raise ConfigParsingError(details=f"'window_count' must be at least 2, got {self.window_count}.")
        for name in ('duration_s', 'epsilon_s'):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value) or value < 0:
                raise ConfigParsingError(details=f"'{name}' must be a finite, non-negative number of seconds, got {value!r}.")
        if not isinstance(self.phase_mode, PhaseMode):
            raise ConfigParsingError(details=f"'phase_mode' must be a PhaseMode, got {self.phase_mode!r}.")

    def build_waveforms(self) -> tuple:
        """Returns the (carrier, modulator) `Waveform` pair for this run."""
        return (
            self.carrier.build(self.sample_count, self.phase_mode),
            self.modulator.build(self.sample_count, self.phase_mode),
        )


DEFAULT_RUN_CONFIG = RunConfig()


# --- Raw configuration parsing ---

_quantity_rule = {"type": ["string", "number"]}

_WAVEFORM_SCHEMA = {
    "kind": {"type": "string", "allowed": [kind.value for kind in WaveformKind]},
    "frequency": _quantity_rule,
    "amplitude": {"type": ["string", "number"]},
    "phase_offset": _quantity_rule,
    "sampling_frequency": _quantity_rule,
}

RUN_CONFIG_SCHEMA = {
    "carrier": {"type": "dict", "schema": _WAVEFORM_SCHEMA},
    "modulator": {"type": "dict", "schema": _WAVEFORM_SCHEMA},
    "sample_count": {"type": "integer", "min": 1},
    "duration": _quantity_rule,
    "epsilon": _quantity_rule,
    "window_count": {"type": "integer", "min": 2},
    "phase_mode": {"type": "string", "allowed": [mode.value for mode in PhaseMode]},
}


def _parse_waveform(raw: Optional[Mapping[str, Any]], default: WaveformConfig) -> WaveformConfig:
    if not raw:
        return default
    base = default.spec
    kind = WaveformKind(raw["kind"]) if "kind" in raw else default.kind
    spec = WaveformSpec(
        frequency_hz=raw.get("frequency", base.frequency_hz),
        amplitude=raw.get("amplitude", base.amplitude),
        phase_offset_deg=raw.get("phase_offset", base.phase_offset_deg),
        sampling_frequency_hz=raw.get("sampling_frequency", base.sampling_frequency_hz),
    )
    return WaveformConfig(kind, spec)


def _parse_seconds(raw: Mapping[str, Any], key: str, default: float) -> float:
    if key not in raw:
        return default
    try:
        return to_magnitude(raw[key], TIME_UNIT)
    except UNIT_CONVERSION_ERRORS as e:
        raise ConfigParsingError(details=f"Could not interpret '{key}' as a time: {e}") from e


def parse_run_config(raw: Optional[Mapping[str, Any]]) -> RunConfig:
    """
    Validates a raw configuration mapping and builds a `RunConfig` from it.
    Missing keys (including missing waveform fields) take their default values.

    Raises:
        ConfigParsingError: If the mapping violates the schema or a value cannot be
                            interpreted.
        InvalidParameterError: If a waveform parameter is out of range.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigParsingError(details=f"The run configuration must be a mapping, got {type(raw).__name__}.")

    validator = cerberus.Validator(RUN_CONFIG_SCHEMA)
    if not validator.validate(dict(raw)):
        raise ConfigParsingError(
            details="The run configuration does not conform to the required schema.",
            errors=validator.errors
        )

    defaults = DEFAULT_RUN_CONFIG
    config = RunConfig(
        carrier=_parse_waveform(raw.get("carrier"), defaults.carrier),
        modulator=_parse_waveform(raw.get("modulator"), defaults.modulator),
        sample_count=raw.get("sample_count", defaults.sample_count),
        duration_s=_parse_seconds(raw, "duration", defaults.duration_s),
        epsilon_s=_parse_seconds(raw, "epsilon", defaults.epsilon_s),
        window_count=raw.get("window_count", defaults.window_count),
        phase_mode=PhaseMode(raw["phase_mode"]) if "phase_mode" in raw else defaults.phase_mode,
    )
    logger.debug(f"Parsed run configuration: {config}")
    return config


def parse_run_config_yaml(text: str) -> RunConfig:
    """Parses an in-memory YAML document into a `RunConfig`."""
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParsingError(details=f"Invalid YAML syntax: {e}") from e
    return parse_run_config(raw)


def load_run_config(source: Union[None, str, Mapping[str, Any]] = None) -> RunConfig:
    """
    The public entry point for building a run configuration.

    Args:
        source: None for the defaults, a mapping of raw values, or a YAML document
                as a string.

    Raises:
        ConfigurationError: A user-friendly, diagnosable error wrapping the
                            underlying failure.
    """
    try:
        if isinstance(source, str):
            return parse_run_config_yaml(source)
        return parse_run_config(source)
    except DiagnosableError as e:
        logger.error(f"A diagnosable error occurred while loading the run configuration: {e}")
        raise ConfigurationError(e.get_diagnostic_report()) from e
