# src/wavesynth_core/errors.py
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol
from typing import runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class WaveSynthError(Exception):
    """Base class for all custom, user-facing errors in WaveSynth Core."""
    pass

class ConfigurationError(WaveSynthError):
    """
    Raised when a run configuration cannot be turned into valid waveform and window
    settings. The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass

class PipelineRunError(WaveSynthError):
    """
    Raised when the generate -> combine -> statistics pipeline fails, for example
    because a window range is empty for the configured sample count.
    The message is a pre-formatted, user-friendly diagnostic report.
    """
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own rich diagnostic report.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...

class DiagnosableError(Exception, Diagnosable):
    """
    A common, concrete base class for all internal exceptions that are diagnosable.

    It inherits from `Exception` so it can be used in `except` clauses. Subclasses
    override `get_diagnostic_report` to provide their report.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


# --- Stateless Formatting Utility ---

#: Context keys a report can carry, in display order, with their labels. Keys
#: missing from the context (or set to None) are left out of the report.
REPORT_CONTEXT_FIELDS = (
    ('waveform', "waveform"),
    ('parameter', "parameter"),
    ('user_input', "given value"),
    ('window', "window"),
    ('sequence_length', "samples"),
    ('run', "run"),
)


def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Formats the multi-line report shown for every user-facing failure.

    The report names the error, lists the waveform/window context that is known
    at the point of failure, then the problem and how to fix it. Given values are
    quoted so that empty strings and whitespace stay visible.

    Args:
        error_type: The high-level category of the error (e.g. "Invalid Window Range").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user. Omitted when empty.
        context: Values keyed by the names in `REPORT_CONTEXT_FIELDS`.
    """
    lines = ["", f"--- WaveSynth Core error: {error_type} ---"]
    for key, label in REPORT_CONTEXT_FIELDS:
        value = context.get(key)
        if value is None:
            continue
        if key == 'user_input':
            value = f"'{value}'"
        lines.append(f"  {label + ' ':.<20} {value}")

    lines.append("What went wrong:")
    lines.extend(f"  {line}" for line in details.splitlines())
    if suggestion:
        lines.append("How to fix it:")
        lines.extend(f"  {line}" for line in suggestion.splitlines())
    return "\n".join(lines)
