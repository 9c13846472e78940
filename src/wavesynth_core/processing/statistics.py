# src/wavesynth_core/processing/statistics.py
"""
Statistics over contiguous, end-exclusive index windows of a sample sequence,
and the equal-partition window policy used by the pipeline.
"""
import logging
from typing import List, Tuple

import numpy as np

from ..constants import DEFAULT_WINDOW_COUNT
from .combiner import SampleLike
from .exceptions import InvalidRangeError

logger = logging.getLogger(__name__)

Window = Tuple[int, int]


def _is_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _checked_window(seq: SampleLike, start, end) -> np.ndarray:
    """Validates `[start, end)` against `seq` and returns that window as an array."""
    arr = np.asarray(seq, dtype=float)
    length = len(arr)
    if not (_is_index(start) and _is_index(end)):
        raise InvalidRangeError(
            start=start, end=end, length=length,
            details=f"Window bounds must be integers, got {type(start).__name__} and {type(end).__name__}."
        )
    if end <= start:
        raise InvalidRangeError(
            start=start, end=end, length=length,
            details="The window is empty: 'end' must be greater than 'start'."
        )
    if start < 0 or end > length:
        raise InvalidRangeError(
            start=start, end=end, length=length,
            details=f"The window lies outside the valid index range [0, {length}]."
        )
    return arr[start:end]


def mean_of_range(seq: SampleLike, start: int, end: int) -> float:
    """
    Arithmetic mean of `seq[start:end]`.

    Computed relative to the first sample of the window (shifted data), so a
    window of identical values returns exactly that value. Falls back to a plain
    mean when the shift would overflow.

    Raises:
        InvalidRangeError: If the window is empty, out of bounds, or not integral.
    """
    window = _checked_window(seq, start, end)
    pivot = window[0]
    with np.errstate(over='ignore', invalid='ignore'):
        shifted = window - pivot
    if not np.all(np.isfinite(shifted)):
        return float(np.mean(window))
    return float(pivot + np.mean(shifted))


def sum_of_range(seq: SampleLike, start: int, end: int) -> float:
    """
    Sum of `seq[start:end]`.

    Raises:
        InvalidRangeError: If the window is empty, out of bounds, or not integral.
    """
    return float(np.sum(_checked_window(seq, start, end)))


def partition_windows(length: int, count: int = DEFAULT_WINDOW_COUNT) -> List[Window]:
    """
    Splits `[0, length)` into `count` equal contiguous windows of `length // count`
    samples. The `length % count` remainder samples at the tail belong to no window.
    When `length < count` every window is empty.
    """
    if not _is_index(count) or count <= 0:
        raise ValueError(f"Window count must be a positive integer, got {count!r}.")
    if not _is_index(length) or length < 0:
        raise ValueError(f"Sequence length must be a non-negative integer, got {length!r}.")

    q = length // count
    if length % count:
        logger.debug(f"Partitioning {length} samples into {count} windows of {q}; dropping {length % count} trailing sample(s).")
    return [(k * q, (k + 1) * q) for k in range(count)]


def quarter_windows(length: int) -> List[Window]:
    return partition_windows(length, 4)
