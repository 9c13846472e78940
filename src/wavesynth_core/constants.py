# src/wavesynth_core/constants.py
import logging

logger = logging.getLogger(__name__)

# --- Run Defaults ---

#: Number of samples produced for every waveform in a run.
DEFAULT_SAMPLE_COUNT: int = 501

#: Nominal signal duration used when dumping per-waveform samples.
#: Value: 1.0 seconds.
DEFAULT_DURATION_S: float = 1.0

#: Slack added to the duration when deciding which samples to dump, so the sample
#: sitting just past the nominal end (t = 1.0 s at 200 Hz) is still printed.
#: Value: 0.01 seconds.
DEFAULT_EPSILON_S: float = 0.01

#: The mixed signal is split into this many equal contiguous windows.
#: Trailing samples that do not fill a whole window are dropped.
DEFAULT_WINDOW_COUNT: int = 4

# --- Phase Handling ---

#: The value of pi used by every generator (the reference run's 3.1415926, not
#: numpy.pi). Sine values on a zero crossing then sit about 1e-7 per cycle off
#: zero, so the square wave's sign there does not depend on rounding.
PI: float = 3.1415926

#: The only phase offset distinguished in quadrature mode; it maps to theta = pi/2.
#: Every other offset maps to theta = 0.
QUADRATURE_PHASE_DEG: float = 90.0

logger.debug("Defined run defaults: DEFAULT_SAMPLE_COUNT, DEFAULT_DURATION_S, DEFAULT_EPSILON_S, DEFAULT_WINDOW_COUNT")
