# src/wavesynth_core/processing/combiner.py
import logging
from typing import Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)

SampleLike = Union[np.ndarray, Sequence[float]]


def combine(a: SampleLike, b: SampleLike) -> np.ndarray:
    """
    Multiplies two sample sequences element by element (amplitude modulation).

    The output has length `min(len(a), len(b))`: samples past the end of the
    shorter input are dropped. Unequal lengths are accepted on purpose and are
    not an error. If either input is empty the result is empty.

    Args:
        a: The first sample sequence (e.g. the carrier).
        b: The second sample sequence (e.g. the modulator).

    Returns:
        A new 1D float64 array with `out[i] = a[i] * b[i]`.
    """
    a_arr = np.asarray(a, dtype=float)
    b_arr = np.asarray(b, dtype=float)
    if a_arr.ndim != 1 or b_arr.ndim != 1:
        raise ValueError(
            f"Sample sequences must be one-dimensional, got shapes {a_arr.shape} and {b_arr.shape}."
        )

    m = min(len(a_arr), len(b_arr))
    if len(a_arr) != len(b_arr):
        logger.debug(f"Combining sequences of length {len(a_arr)} and {len(b_arr)}; truncating to {m}.")
    return a_arr[:m] * b_arr[:m]
