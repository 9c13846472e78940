# tests/test_report_and_cli.py
import logging
import sys

import pytest
import numpy as np

from wavesynth_core import format_report, run_pipeline, sample_time, Waveform
from wavesynth_core.__main__ import main
from wavesynth_core.log_config import setup_logging
from wavesynth_core.report import visible_samples, format_waveform_info


def _section(lines, header):
    """Returns the lines following `header` up to the next blank line."""
    start = lines.index(header) + 1
    end = lines.index("", start) if "" in lines[start:] else len(lines)
    return lines[start:end]


# =========================================================================
# === Group 1: Report layout
# =========================================================================

class TestReport:

    def test_info_block(self, reference_sine):
        assert format_waveform_info(reference_sine) == [
            "[Sine Wave Info]",
            "Freq: 10Hz",
            "Amplitude: 3",
            "Phase Offset: 90°",
            "Sampling Freq: 200Hz",
        ]

    def test_visible_samples_stop_after_duration_plus_epsilon(self, reference_sine):
        shown = visible_samples(reference_sine, 1.0, 0.01)
        expected_count = sum(1 for i in range(501) if sample_time(200.0, i) <= 1.0 + 0.01)
        assert len(shown) == expected_count
        assert 202 <= len(shown) <= 203
        np.testing.assert_array_equal(shown, reference_sine.samples[:expected_count])

    def test_visible_samples_small_example(self):
        # 10 Hz sampling: t = 0.0 .. 1.0 lies within 1.01 s, t = 1.1 does not.
        wave = Waveform.sine(1, 1, 0, 10, sample_count=20)
        assert len(visible_samples(wave, 1.0, 0.01)) == 11

    def test_visible_samples_never_exceed_sample_count(self):
        wave = Waveform.sine(1, 1, 0, 10, sample_count=5)
        assert len(visible_samples(wave, 1.0, 0.01)) == 5

    def test_full_report_sections(self, reference_result):
        lines = format_report(reference_result).splitlines()

        sine_section = _section(lines, "--- Sine Wave Output ---")
        assert sine_section[0] == "Freq: 10Hz, Sampling: 200Hz, Duration: 1s"
        assert sine_section[1] == "3"
        assert len(sine_section) - 1 == len(visible_samples(reference_result.carrier, 1.0, 0.01))

        square_section = _section(lines, "--- Square Wave Output ---")
        assert square_section[0] == "Freq: 40Hz, Sampling: 200Hz, Duration: 1s"
        assert square_section[1] == "0"
        assert set(square_section[2:]) <= {"1", "-1", "0"}

        mixed_section = _section(lines, "--- Mixed Signal Output ---")
        assert len(mixed_section) == 501
        assert float(mixed_section[7]) == pytest.approx(reference_result.mixed[7], rel=1e-5)

        assert "[Sine Wave Info]" in lines
        assert "[Square Wave Info]" in lines

    def test_summary_lines(self, reference_result):
        lines = format_report(reference_result).splitlines()
        mean_line, sum_line = lines[-2], lines[-1]
        assert mean_line == f"Mean of mixed signal (first 0.625s): {reference_result.first_window_mean:g}"
        assert sum_line == f"Integral of second quarter: {reference_result.second_window_sum:g}"

    def test_report_ends_with_newline(self, reference_result):
        assert format_report(reference_result).endswith("\n")


# =========================================================================
# === Group 2: Command-line entry point
# =========================================================================

@pytest.fixture(autouse=True)
def restore_logging():
    yield
    # main() binds the root handler to the captured stderr; rebind it afterwards.
    setup_logging(level=logging.INFO, stream=sys.__stderr__)


class TestCli:

    def test_default_run_prints_reference_report(self, capsys):
        assert main([]) == 0
        captured = capsys.readouterr()
        assert captured.out == format_report(run_pipeline())

    def test_continuous_phase_mode_runs(self, capsys):
        assert main(["--phase-mode", "continuous"]) == 0
        assert "--- Mixed Signal Output ---" in capsys.readouterr().out

    def test_window_failure_fails_fast_without_partial_output(self, capsys):
        assert main(["--sample-count", "3"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid Window Range" in captured.err

    @pytest.mark.parametrize("argv", [["--sample-count", "0"], ["--window-count", "1"]])
    def test_invalid_settings_fail_fast(self, argv, capsys):
        assert main(argv) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Run Configuration Error" in captured.err

    def test_unknown_phase_mode_is_rejected_by_argparse(self, capsys):
        with pytest.raises(SystemExit):
            main(["--phase-mode", "sideways"])
