# src/wavesynth_core/clock.py
"""
Maps sample indices to sample times for a fixed sampling frequency.

The time of sample `i` is always `i * (1 / fs)`. The scalar and vectorized forms
below use the same expression so they agree bit for bit, which the report relies
on when it filters samples by time.
"""
import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


def sample_time(sampling_frequency_hz: float, index: int) -> float:
    """Returns the time (s) of sample `index`. The caller guarantees `fs > 0`."""
    return index * (1.0 / sampling_frequency_hz)


def sample_times(sampling_frequency_hz: float, count: int) -> np.ndarray:
    """Returns the times (s) of samples `0 .. count-1` as a float64 array."""
    return np.arange(count, dtype=float) * (1.0 / sampling_frequency_hz)


@dataclass(frozen=True)
class SampleClock:
    """A sampling clock bound to a single sampling frequency."""
    sampling_frequency_hz: float

    @property
    def period_s(self) -> float:
        return 1.0 / self.sampling_frequency_hz

    def time_at(self, index: int) -> float:
        return sample_time(self.sampling_frequency_hz, index)

    def times(self, count: int) -> np.ndarray:
        return sample_times(self.sampling_frequency_hz, count)
