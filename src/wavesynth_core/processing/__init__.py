# src/wavesynth_core/processing/__init__.py
from .exceptions import InvalidRangeError
from .combiner import combine
from .statistics import mean_of_range, sum_of_range, partition_windows, quarter_windows

__all__ = [
    # Exceptions
    "InvalidRangeError",
    # Operations
    "combine",
    "mean_of_range",
    "sum_of_range",
    "partition_windows",
    "quarter_windows",
]
