# tests/test_waveforms/test_waveform_spec.py
import math
import re
from dataclasses import FrozenInstanceError

import pytest

from wavesynth_core import Waveform, WaveformSpec, InvalidParameterError, ureg, Quantity
from wavesynth_core.errors import DiagnosableError


class TestWaveformSpecConstruction:

    def test_plain_numbers_are_stored_as_floats(self):
        spec = WaveformSpec(10, 3, 90, 200)
        assert spec.frequency_hz == 10.0 and isinstance(spec.frequency_hz, float)
        assert spec.amplitude == 3.0 and isinstance(spec.amplitude, float)
        assert spec.phase_offset_deg == 90.0
        assert spec.sampling_frequency_hz == 200.0

    def test_unit_strings_are_converted_to_canonical_units(self):
        spec = WaveformSpec("10 Hz", 3, "90 deg", "0.2 kHz")
        assert spec.frequency_hz == pytest.approx(10.0)
        assert spec.phase_offset_deg == pytest.approx(90.0)
        assert spec.sampling_frequency_hz == pytest.approx(200.0)

    def test_pint_quantities_are_converted(self):
        spec = WaveformSpec(Quantity(1, "kHz"), 1, Quantity(0, "degree"), 8 * ureg.kHz)
        assert spec.frequency_hz == pytest.approx(1000.0)
        assert spec.sampling_frequency_hz == pytest.approx(8000.0)

    def test_spec_is_immutable(self):
        spec = WaveformSpec(10, 3, 90, 200)
        with pytest.raises(FrozenInstanceError):
            spec.frequency_hz = 20.0

    def test_nyquist_ratio(self):
        assert WaveformSpec(40, 1, 0, 200).nyquist_ratio == pytest.approx(0.4)


class TestWaveformSpecValidation:

    @pytest.mark.parametrize("frequency", [0, -10, math.inf, math.nan])
    def test_rejects_invalid_frequency(self, frequency):
        with pytest.raises(InvalidParameterError) as excinfo:
            WaveformSpec(frequency, 1, 0, 200)
        assert excinfo.value.parameter == "frequency_hz"

    @pytest.mark.parametrize("sampling_frequency", [0, -200, "0 Hz", "-1 kHz"])
    def test_rejects_invalid_sampling_frequency(self, sampling_frequency):
        with pytest.raises(InvalidParameterError) as excinfo:
            WaveformSpec(10, 1, 0, sampling_frequency)
        assert excinfo.value.parameter == "sampling_frequency_hz"

    def test_rejects_non_finite_amplitude(self):
        with pytest.raises(InvalidParameterError) as excinfo:
            WaveformSpec(10, math.inf, 0, 200)
        assert excinfo.value.parameter == "amplitude"

    def test_rejects_wrong_dimension(self):
        with pytest.raises(InvalidParameterError) as excinfo:
            WaveformSpec("10 ohm", 1, 0, 200)
        assert "frequency_hz" in str(excinfo.value)

    def test_rejects_unknown_unit(self):
        with pytest.raises(InvalidParameterError):
            WaveformSpec("10 flurbs", 1, 0, 200)

    @pytest.mark.parametrize("text", ["(10 Hz", "10 Hz +", "1/0 Hz", "2**10000 Hz"])
    def test_malformed_unit_strings_raise_invalid_parameter(self, text):
        with pytest.raises(InvalidParameterError) as excinfo:
            WaveformSpec(text, 1, 0, 200)
        assert excinfo.value.parameter == "frequency_hz"

    def test_rejects_boolean_values(self):
        with pytest.raises(InvalidParameterError):
            WaveformSpec(True, 1, 0, 200)

    def test_error_is_diagnosable_and_a_value_error(self):
        with pytest.raises(ValueError) as excinfo:
            WaveformSpec(-1, 1, 0, 200)
        assert isinstance(excinfo.value, DiagnosableError)
        report = excinfo.value.get_diagnostic_report()
        assert "Invalid Waveform Parameter" in report
        assert "frequency_hz" in report


class TestWaveformFactories:

    def test_factory_errors_name_the_waveform(self):
        with pytest.raises(InvalidParameterError) as excinfo:
            Waveform.square(40, 1, 0, 0)
        assert excinfo.value.waveform == "Square"
        assert re.search(r"waveform \.+ Square\n", excinfo.value.get_diagnostic_report())

    @pytest.mark.parametrize("count", [0, -5, 2.5, True])
    def test_rejects_invalid_sample_count(self, count):
        with pytest.raises(InvalidParameterError) as excinfo:
            Waveform.sine(10, 3, 90, 200, sample_count=count)
        assert excinfo.value.parameter == "sample_count"
