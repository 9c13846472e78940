# src/wavesynth_core/pipeline.py
"""
Provides the public API for running the generate -> combine -> statistics pipeline.

`run_pipeline` builds the two configured waveforms, mixes them, splits the mixed
signal into equal windows and computes the mean of the first window and the sum
of the second. It returns a frozen `PipelineResult`, and wraps any diagnosable
failure in a single, user-facing `PipelineRunError`.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .config import RunConfig, DEFAULT_RUN_CONFIG
from .errors import PipelineRunError, DiagnosableError, format_diagnostic_report
from .processing import combine, mean_of_range, sum_of_range, partition_windows
from .processing.statistics import Window
from .waveforms import Waveform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """
    The user-facing result of a pipeline run.

    Attributes:
        config: The run configuration that produced this result.
        carrier: The first mixer input, with its samples already generated.
        modulator: The second mixer input, with its samples already generated.
        mixed: The element-wise product of the two sample sequences.
        windows: The equal windows the mixed signal was split into.
        first_window_mean: Mean of the mixed signal over `windows[0]`.
        second_window_sum: Sum of the mixed signal over `windows[1]`.
    """
    config: RunConfig
    carrier: Waveform
    modulator: Waveform
    mixed: np.ndarray
    windows: List[Window]
    first_window_mean: float
    second_window_sum: float

    @property
    def window_length(self) -> int:
        start, end = self.windows[0]
        return end - start


def run_pipeline(config: Optional[RunConfig] = None) -> PipelineResult:
    """
    Runs the full pipeline for a run configuration.

    Args:
        config: The run configuration. Defaults to `DEFAULT_RUN_CONFIG`.

    Returns:
        A `PipelineResult` holding the waveforms, the mixed signal and the two
        window statistics.

    Raises:
        PipelineRunError: A user-friendly, diagnosable error if any stage fails. The
                          original exception is chained for debugging.
    """
    config = config if config is not None else DEFAULT_RUN_CONFIG

    try:
        logger.info(f"--- Starting waveform pipeline ({config.sample_count} samples per waveform) ---")
        carrier, modulator = config.build_waveforms()
        carrier_samples = carrier.produce_samples()
        modulator_samples = modulator.produce_samples()
        logger.info(f"Generated {carrier!r} and {modulator!r}")

        mixed = combine(carrier_samples, modulator_samples)
        mixed.setflags(write=False)

        windows = partition_windows(len(mixed), config.window_count)
        mean_start, mean_end = windows[0]
        sum_start, sum_end = windows[1]
        first_window_mean = mean_of_range(mixed, mean_start, mean_end)
        second_window_sum = sum_of_range(mixed, sum_start, sum_end)

        result = PipelineResult(
            config=config,
            carrier=carrier,
            modulator=modulator,
            mixed=mixed,
            windows=windows,
            first_window_mean=first_window_mean,
            second_window_sum=second_window_sum,
        )
        logger.info(
            f"Pipeline successful. Mean over {windows[0]}: {first_window_mean:.6g}, "
            f"sum over {windows[1]}: {second_window_sum:.6g}"
        )
        return result

    except DiagnosableError as e:
        logger.error(f"A diagnosable error occurred during the pipeline run: {e}")
        raise PipelineRunError(e.get_diagnostic_report()) from e

    except Exception as e:
        logger.critical(f"An unexpected internal error occurred during the pipeline run: {e}", exc_info=True)
        report = format_diagnostic_report(
            error_type=f"An Unexpected Pipeline Error Occurred ({type(e).__name__})",
            details=f"The pipeline encountered an unexpected internal error: {e}",
            suggestion="This may be a bug. Review the traceback and consider filing a bug report.",
            context={'run': f"{config.sample_count} samples per waveform, {config.window_count} windows"}
        )
        raise PipelineRunError(report) from e
