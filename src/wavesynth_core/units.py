# src/wavesynth_core/units.py
import logging
from typing import Union

import pint

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

# Canonical units for every stored magnitude in the package.
FREQUENCY_UNIT = "Hz"
PHASE_UNIT = "degree"
TIME_UNIT = "s"

QuantityLike = Union[int, float, str, Quantity]


def _parse_quantity_string(text: str) -> Quantity:
    """
    Parses a unit string with the registry. pint's expression parser can fail with
    arbitrary exceptions on malformed input (unbalanced parentheses, a trailing
    operator, `1/0`, overflowing powers); all of them surface as `ValueError`.
    """
    try:
        return ureg.Quantity(text)
    except pint.PintError:
        raise
    except Exception as e:
        raise ValueError(f"Cannot parse '{text}' as a quantity ({type(e).__name__}: {e}).") from e


def to_magnitude(value: QuantityLike, unit: str) -> float:
    """
    Converts a number, a `pint.Quantity` or a unit string (e.g. '0.2 kHz') into a
    plain float expressed in `unit`. Bare numbers are taken to already be in `unit`.

    Raises:
        pint.DimensionalityError: If the value carries an incompatible dimension.
        pint.UndefinedUnitError: If a string names a unit the registry does not know.
        TypeError: If the value is of an unsupported type.
        ValueError: If a string cannot be parsed as a quantity at all.
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a number or quantity, got a boolean ({value}).")
    if isinstance(value, str):
        value = _parse_quantity_string(value)
    if isinstance(value, ureg.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except OverflowError as e:
            raise ValueError(f"{value} does not fit a float in '{unit}'.") from e
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot interpret {value!r} as a quantity in '{unit}'.") from e


#: Exceptions `to_magnitude` can raise for a value that does not describe a
#: quantity in the requested unit.
UNIT_CONVERSION_ERRORS = (pint.PintError, TypeError, ValueError)
