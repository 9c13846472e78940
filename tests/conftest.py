# tests/conftest.py
import pytest
import numpy as np

from wavesynth_core.constants import PI

from wavesynth_core import (
    Waveform, RunConfig, DEFAULT_RUN_CONFIG, run_pipeline
)


# Reference run parameters: Sine(10 Hz, A=3, 90 deg, fs=200 Hz), Square(40 Hz, A=1, 0 deg, fs=200 Hz).
@pytest.fixture
def reference_sine() -> Waveform:
    return Waveform.sine(10, 3, 90, 200)


@pytest.fixture
def reference_square() -> Waveform:
    return Waveform.square(40, 1, 0, 200)


@pytest.fixture
def reference_config() -> RunConfig:
    return DEFAULT_RUN_CONFIG


@pytest.fixture
def reference_result(reference_config):
    return run_pipeline(reference_config)


@pytest.fixture
def expected_sine():
    """Direct evaluation of A*sin(2*pi*f*i/fs + theta) for i in [0, count)."""
    def _evaluate(amplitude, frequency_hz, sampling_frequency_hz, theta, count):
        i = np.arange(count)
        return amplitude * np.sin(2 * PI * frequency_hz * (i / sampling_frequency_hz) + theta)
    return _evaluate
