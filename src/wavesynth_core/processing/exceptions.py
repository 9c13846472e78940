# src/wavesynth_core/processing/exceptions.py
"""
Defines the custom, diagnosable exceptions for the signal processing stage.
"""
from dataclasses import dataclass
from typing import Any

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class InvalidRangeError(DiagnosableError, ValueError):
    """
    Raised when a window statistic is requested over an empty or out-of-bounds
    index range. The range is rejected before any arithmetic, so an empty window
    never produces a NaN mean.
    """
    start: Any
    end: Any
    length: int
    details: str

    def __str__(self):
        return f"Invalid window [{self.start}, {self.end}) for a sequence of length {self.length}: {self.details}"

    def get_diagnostic_report(self) -> str:
        """Generates the diagnostic report for an invalid window range."""
        return format_diagnostic_report(
            error_type="Invalid Window Range",
            details=self.details,
            suggestion="Window bounds must be integers with 0 <= start < end <= sequence length. For window policies, make sure the sample count is at least the number of windows.",
            context={'window': f"[{self.start}, {self.end})", 'sequence_length': self.length}
        )
