# src/wavesynth_core/waveforms/waveform.py
import logging
from typing import Optional

import numpy as np

from ..clock import SampleClock
from ..constants import DEFAULT_SAMPLE_COUNT
from .base_enums import WaveformKind, PhaseMode
from .exceptions import InvalidParameterError
from .generators import get_generator
from .spec import WaveformSpec

logger = logging.getLogger(__name__)


class Waveform:
    """
    A tagged waveform: one `WaveformKind` paired with one immutable `WaveformSpec`.

    The behavior of each kind lives in the generator registry, so this class is
    the same for every variant. Samples are produced by a single generation pass
    on first access and cached for the lifetime of the object; the cached array
    is read-only.
    """

    def __init__(
        self,
        kind: WaveformKind,
        spec: WaveformSpec,
        sample_count: int = DEFAULT_SAMPLE_COUNT,
        phase_mode: PhaseMode = PhaseMode.QUADRATURE,
    ):
        if not isinstance(kind, WaveformKind):
            raise TypeError(f"kind must be a WaveformKind, got {kind!r}.")
        if not isinstance(phase_mode, PhaseMode):
            raise TypeError(f"phase_mode must be a PhaseMode, got {phase_mode!r}.")
        if isinstance(sample_count, bool) or not isinstance(sample_count, (int, np.integer)) or sample_count <= 0:
            raise InvalidParameterError(
                parameter='sample_count',
                value=sample_count,
                details=f"The sample count must be a positive integer, got {sample_count!r}.",
                waveform=kind.value
            )
        self.kind: WaveformKind = kind
        self.spec: WaveformSpec = spec
        self.sample_count: int = int(sample_count)
        self.phase_mode: PhaseMode = phase_mode
        self._samples: Optional[np.ndarray] = None

        if spec.nyquist_ratio >= 1.0:
            logger.warning(
                f"{kind.value} wave at {spec.frequency_hz} Hz is at or above the Nyquist frequency "
                f"({spec.sampling_frequency_hz / 2.0} Hz); its samples will alias."
            )
        logger.debug(f"Initialized {self!r}")

    @classmethod
    def sine(cls, frequency, amplitude, phase_offset, sampling_frequency, **kwargs) -> "Waveform":
        spec = _build_spec(WaveformKind.SINE, frequency, amplitude, phase_offset, sampling_frequency)
        return cls(WaveformKind.SINE, spec, **kwargs)

    @classmethod
    def square(cls, frequency, amplitude, phase_offset, sampling_frequency, **kwargs) -> "Waveform":
        spec = _build_spec(WaveformKind.SQUARE, frequency, amplitude, phase_offset, sampling_frequency)
        return cls(WaveformKind.SQUARE, spec, **kwargs)

    @property
    def clock(self) -> SampleClock:
        return SampleClock(self.spec.sampling_frequency_hz)

    @property
    def is_generated(self) -> bool:
        return self._samples is not None

    def generate(self) -> np.ndarray:
        """Runs the generation pass if it has not run yet and returns the samples."""
        if self._samples is None:
            samples = get_generator(self.kind)(self.spec, self.phase_mode, self.sample_count)
            samples.setflags(write=False)
            self._samples = samples
            logger.debug(f"Generated {len(samples)} samples for {self!r}")
        return self._samples

    def produce_samples(self) -> np.ndarray:
        """Returns the full, read-only sample sequence, generating it on first use."""
        return self.generate()

    @property
    def samples(self) -> np.ndarray:
        return self.generate()

    def describe(self) -> WaveformSpec:
        return self.spec

    def __len__(self) -> int:
        return self.sample_count

    def __str__(self) -> str:
        return f"{self.kind.value}({self.spec.frequency_hz:g} Hz)"

    def __repr__(self) -> str:
        return (
            f"Waveform(kind={self.kind.value}, f={self.spec.frequency_hz:g} Hz, "
            f"A={self.spec.amplitude:g}, phase={self.spec.phase_offset_deg:g} deg, "
            f"fs={self.spec.sampling_frequency_hz:g} Hz, n={self.sample_count})"
        )


def _build_spec(kind: WaveformKind, frequency, amplitude, phase_offset, sampling_frequency) -> WaveformSpec:
    try:
        return WaveformSpec(
            frequency_hz=frequency,
            amplitude=amplitude,
            phase_offset_deg=phase_offset,
            sampling_frequency_hz=sampling_frequency,
        )
    except InvalidParameterError as e:
        if e.waveform is None:
            e.waveform = kind.value
        raise
