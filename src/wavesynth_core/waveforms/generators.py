# src/wavesynth_core/waveforms/generators.py
"""
The sample generators for each `WaveformKind`, and the registry that dispatches
to them.

Every generator has the same signature: it receives the immutable spec, the
phase mode and the sample count, and returns a new float64 array with exactly
`sample_count` samples in index order. Generators are pure functions; caching
is the responsibility of the `Waveform` that owns the result.
"""
import logging
from typing import Callable, Dict

import numpy as np

from ..clock import sample_times
from ..constants import PI, QUADRATURE_PHASE_DEG
from .base_enums import WaveformKind, PhaseMode
from .spec import WaveformSpec

logger = logging.getLogger(__name__)

GeneratorFn = Callable[[WaveformSpec, PhaseMode, int], np.ndarray]

GENERATOR_REGISTRY: Dict[WaveformKind, GeneratorFn] = {}


def register_generator(kind: WaveformKind):
    """
    A decorator to register a sample generator function for a waveform kind.
    """
    def decorator(fn: GeneratorFn) -> GeneratorFn:
        if not isinstance(kind, WaveformKind):
            raise TypeError(f"Generators must be registered for a WaveformKind, got {kind!r}.")
        if kind in GENERATOR_REGISTRY:
            logger.warning(f"Generator for waveform kind '{kind.value}' is being redefined/overwritten.")
        GENERATOR_REGISTRY[kind] = fn
        logger.debug(f"Registered generator for waveform kind '{kind.value}' -> {fn.__name__}")
        return fn
    return decorator


def get_generator(kind: WaveformKind) -> GeneratorFn:
    try:
        return GENERATOR_REGISTRY[kind]
    except KeyError:
        raise KeyError(f"No generator registered for waveform kind {kind!r}.") from None


def phase_angle(phase_offset_deg: float, mode: PhaseMode = PhaseMode.QUADRATURE) -> float:
    """
    Returns the phase angle theta (radians) for a phase offset in degrees.

    In quadrature mode only an offset of exactly 90 degrees is distinguished
    (theta = pi/2); every other offset, including 180 or 45, gives theta = 0.
    Continuous mode converts the offset directly. Both use `constants.PI`.
    """
    if mode is PhaseMode.CONTINUOUS:
        return phase_offset_deg * PI / 180.0
    if phase_offset_deg == QUADRATURE_PHASE_DEG:
        return PI / 2.0
    if phase_offset_deg != 0.0:
        logger.warning(
            f"Phase offset {phase_offset_deg} deg is neither 0 nor {QUADRATURE_PHASE_DEG} deg; "
            f"quadrature phase mode treats it as 0 deg. Use PhaseMode.CONTINUOUS for arbitrary offsets."
        )
    return 0.0


def _underlying_sine(spec: WaveformSpec, mode: PhaseMode, sample_count: int) -> np.ndarray:
    t = sample_times(spec.sampling_frequency_hz, sample_count)
    theta = phase_angle(spec.phase_offset_deg, mode)
    return spec.amplitude * np.sin(2.0 * PI * spec.frequency_hz * t + theta)


@register_generator(WaveformKind.SINE)
def generate_sine(spec: WaveformSpec, mode: PhaseMode, sample_count: int) -> np.ndarray:
    """sample[i] = A * sin(2*pi*f*t_i + theta)"""
    return _underlying_sine(spec, mode, sample_count)


@register_generator(WaveformKind.SQUARE)
def generate_square(spec: WaveformSpec, mode: PhaseMode, sample_count: int) -> np.ndarray:
    """
    A bipolar square wave taken as the sign of the sine with the same parameters:
    +A where the sine is positive, -A where it is negative, and 0.0 exactly where
    the sine value is exactly zero. Transitions sit on the sine's zero-crossings.
    """
    v = _underlying_sine(spec, mode, sample_count)
    out = np.zeros_like(v)
    out[v > 0] = spec.amplitude
    out[v < 0] = -spec.amplitude
    return out
