# src/wavesynth_core/report.py
"""
Formats a `PipelineResult` as the plain-text console report.

Numbers are printed with six significant digits, one sample per line.
"""
import logging
from typing import List

import numpy as np

from .pipeline import PipelineResult
from .waveforms import Waveform

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    return f"{value:g}"


def visible_samples(waveform: Waveform, duration_s: float, epsilon_s: float) -> np.ndarray:
    """
    Returns the leading samples of `waveform` whose time `t_i` satisfies
    `t_i <= duration_s + epsilon_s`, in index order.
    """
    times = waveform.clock.times(waveform.sample_count)
    mask = times <= duration_s + epsilon_s
    # Times increase monotonically, so the mask is a prefix.
    return waveform.samples[:int(np.count_nonzero(mask))]


def format_waveform_info(waveform: Waveform) -> List[str]:
    spec = waveform.describe()
    return [
        f"[{waveform.kind.value} Wave Info]",
        f"Freq: {_fmt(spec.frequency_hz)}Hz",
        f"Amplitude: {_fmt(spec.amplitude)}",
        f"Phase Offset: {_fmt(spec.phase_offset_deg)}°",
        f"Sampling Freq: {_fmt(spec.sampling_frequency_hz)}Hz",
    ]


def format_waveform_samples(waveform: Waveform, duration_s: float, epsilon_s: float) -> List[str]:
    spec = waveform.describe()
    lines = [
        f"--- {waveform.kind.value} Wave Output ---",
        f"Freq: {_fmt(spec.frequency_hz)}Hz, Sampling: {_fmt(spec.sampling_frequency_hz)}Hz, Duration: {_fmt(duration_s)}s",
    ]
    lines.extend(_fmt(v) for v in visible_samples(waveform, duration_s, epsilon_s))
    return lines


def format_report(result: PipelineResult) -> str:
    """Builds the full report: info and sample dumps for both waveforms, the mixed
    signal, and the two window statistics."""
    config = result.config
    lines: List[str] = []
    for waveform in (result.carrier, result.modulator):
        lines.append("")
        lines.extend(format_waveform_info(waveform))
        lines.append("")
        lines.extend(format_waveform_samples(waveform, config.duration_s, config.epsilon_s))

    lines.append("")
    lines.append("--- Mixed Signal Output ---")
    lines.extend(_fmt(v) for v in result.mixed)

    window_s = result.window_length * result.carrier.clock.period_s
    lines.append("")
    lines.append(f"Mean of mixed signal (first {_fmt(window_s)}s): {_fmt(result.first_window_mean)}")
    window_name = "quarter" if config.window_count == 4 else "window"
    lines.append(f"Integral of second {window_name}: {_fmt(result.second_window_sum)}")
    return "\n".join(lines) + "\n"
