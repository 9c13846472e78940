# tests/test_processing/test_combiner.py
import pytest
import numpy as np

from wavesynth_core import combine, Waveform


def test_elementwise_product():
    out = combine([1.0, 2.0, 3.0], [4.0, -5.0, 0.5])
    np.testing.assert_array_equal(out, [4.0, -10.0, 1.5])
    assert out.dtype == np.float64


def test_combine_is_commutative(reference_sine, reference_square):
    ab = combine(reference_sine.samples, reference_square.samples)
    ba = combine(reference_square.samples, reference_sine.samples)
    np.testing.assert_array_equal(ab, ba)


@pytest.mark.parametrize("len_a, len_b", [(10, 10), (10, 7), (3, 12), (501, 500)])
def test_output_length_is_shorter_input_length(len_a, len_b):
    rng = np.random.default_rng(1234)
    a, b = rng.normal(size=len_a), rng.normal(size=len_b)
    out = combine(a, b)
    m = min(len_a, len_b)
    assert len(out) == m
    np.testing.assert_array_equal(out, a[:m] * b[:m])


def test_truncation_is_silent_policy_not_an_error():
    out = combine([1.0, 2.0, 3.0, 4.0], [10.0, 10.0])
    np.testing.assert_array_equal(out, [10.0, 20.0])


@pytest.mark.parametrize("a, b", [([], [1.0, 2.0]), ([1.0, 2.0], []), ([], [])])
def test_combining_with_empty_sequence_is_empty(a, b):
    assert combine(a, b).size == 0


def test_inputs_are_not_modified(reference_sine):
    before = reference_sine.samples.copy()
    combine(reference_sine.samples, np.zeros(501))
    np.testing.assert_array_equal(reference_sine.samples, before)


def test_rejects_multidimensional_input():
    with pytest.raises(ValueError):
        combine(np.zeros((2, 2)), np.zeros(4))


def test_mixing_sine_with_square_flips_sign_where_square_is_negative():
    sine = Waveform.sine(1, 1, 90, 8, sample_count=8)
    square = Waveform.square(1, 1, 0, 8, sample_count=8)
    mixed = combine(sine.samples, square.samples)
    np.testing.assert_allclose(mixed[5:8], -sine.samples[5:8])
    assert mixed[0] == 0.0
