# src/wavesynth_core/waveforms/base_enums.py
from enum import Enum


class WaveformKind(Enum):
    """
    The closed set of waveform variants the generator registry can produce.
    The value is the display name used in reports and configuration files.
    """
    SINE = "Sine"
    SQUARE = "Square"


class PhaseMode(Enum):
    """
    Defines how a phase offset in degrees is turned into the phase angle theta.
    """
    QUADRATURE = "quadrature"  # theta = pi/2 for exactly 90 degrees, else 0.
    CONTINUOUS = "continuous"  # theta = radians(phase_offset).
