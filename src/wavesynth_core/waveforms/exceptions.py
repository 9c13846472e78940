# src/wavesynth_core/waveforms/exceptions.py
"""
Defines the custom, diagnosable exceptions for the waveforms subsystem.
"""
from dataclasses import dataclass
from typing import Any, Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class InvalidParameterError(DiagnosableError, ValueError):
    """
    Raised when a waveform is constructed with a parameter it cannot be sampled
    with, such as a non-positive frequency or sampling frequency. It is raised at
    construction time so no samples are ever produced from an invalid spec.
    """
    parameter: str
    value: Any
    details: str
    waveform: Optional[str] = None

    def __str__(self):
        return f"Invalid waveform parameter '{self.parameter}' = {self.value!r}: {self.details}"

    def get_diagnostic_report(self) -> str:
        """Generates the diagnostic report for an invalid waveform parameter."""
        return format_diagnostic_report(
            error_type="Invalid Waveform Parameter",
            details=self.details,
            suggestion="Frequencies and sampling frequencies must be positive and finite (e.g. 10, '10 Hz' or '0.2 kHz'). Amplitude and phase offset must be finite numbers.",
            context={
                'waveform': self.waveform,
                'parameter': self.parameter,
                'user_input': self.value,
            }
        )
