# src/wavesynth_core/waveforms/__init__.py
import logging
logger = logging.getLogger(__name__)

from .base_enums import WaveformKind, PhaseMode
from .exceptions import InvalidParameterError
from .spec import WaveformSpec
# Importing generators registers the built-in kinds.
from .generators import GENERATOR_REGISTRY, register_generator, get_generator, phase_angle
from .waveform import Waveform

logger.debug(f"Available waveform kinds: {[kind.value for kind in GENERATOR_REGISTRY]}")

__all__ = [
    "WaveformKind",
    "PhaseMode",
    "WaveformSpec",
    "Waveform",
    "GENERATOR_REGISTRY",
    "register_generator",
    "get_generator",
    "phase_angle",
    "InvalidParameterError",
]
