# src/wavesynth_core/waveforms/spec.py
import logging
import math
from dataclasses import dataclass

from ..units import QuantityLike, to_magnitude, FREQUENCY_UNIT, PHASE_UNIT, UNIT_CONVERSION_ERRORS
from .exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def _convert(value: QuantityLike, unit: str, parameter: str) -> float:
    try:
        return to_magnitude(value, unit)
    except UNIT_CONVERSION_ERRORS as e:
        raise InvalidParameterError(
            parameter=parameter,
            value=value,
            details=f"Could not interpret '{parameter}' in units of '{unit}': {e}"
        ) from e


@dataclass(frozen=True)
class WaveformSpec:
    """
    The immutable parameter set of a periodic waveform.

    Values may be given as plain numbers (already in Hz / degrees), as `pint`
    quantities, or as unit strings such as '0.2 kHz' or '90 deg'. They are stored
    as floats in canonical units after construction.

    Raises:
        InvalidParameterError: If a frequency is not positive and finite, or if the
                               amplitude or phase offset is not finite.
    """
    frequency_hz: float
    amplitude: float
    phase_offset_deg: float
    sampling_frequency_hz: float

    def __post_init__(self):
        converted = {
            'frequency_hz': _convert(self.frequency_hz, FREQUENCY_UNIT, 'frequency_hz'),
            'amplitude': _convert(self.amplitude, 'dimensionless', 'amplitude'),
            'phase_offset_deg': _convert(self.phase_offset_deg, PHASE_UNIT, 'phase_offset_deg'),
            'sampling_frequency_hz': _convert(self.sampling_frequency_hz, FREQUENCY_UNIT, 'sampling_frequency_hz'),
        }

        for name in ('frequency_hz', 'sampling_frequency_hz'):
            value = converted[name]
            if not math.isfinite(value) or value <= 0:
                raise InvalidParameterError(
                    parameter=name,
                    value=getattr(self, name),
                    details=f"Parameter '{name}' must be positive and finite, got {value}."
                )
        for name in ('amplitude', 'phase_offset_deg'):
            if not math.isfinite(converted[name]):
                raise InvalidParameterError(
                    parameter=name,
                    value=getattr(self, name),
                    details=f"Parameter '{name}' must be finite, got {converted[name]}."
                )

        # Frozen dataclass: write the canonical floats through object.__setattr__.
        for name, value in converted.items():
            object.__setattr__(self, name, value)

    @property
    def nyquist_ratio(self) -> float:
        """Ratio of the waveform frequency to the Nyquist frequency (fs / 2)."""
        return self.frequency_hz / (self.sampling_frequency_hz / 2.0)
