"""Pure temperature conversion with absolute-zero validation.

Every conversion is routed through Celsius: three formulas bring a value
*to* Celsius and three take it *from* Celsius, so no pairwise table is
needed.  Arithmetic is plain double precision; rounding belongs to the
presentation layer.

Guarantees
----------
* No I/O, no ``print()``, no shared state.
* :class:`~temp_convert.exceptions.BelowAbsoluteZeroError` is the only
  exception raised.
"""

from __future__ import annotations

import logging

from temp_convert.core.models import (
    ConversionRequest,
    ConversionResult,
    TemperatureUnit,
)
from temp_convert.exceptions import BelowAbsoluteZeroError
from temp_convert.utils.constants import FAHRENHEIT_FREEZING_POINT, KELVIN_OFFSET

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Celsius pivot
# ---------------------------------------------------------------------------

def to_celsius(unit: TemperatureUnit, value: float) -> float:
    """Convert *value*, expressed in *unit*, to Celsius."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return (value - FAHRENHEIT_FREEZING_POINT) * 5 / 9
    if unit is TemperatureUnit.KELVIN:
        return value - KELVIN_OFFSET
    return value


def from_celsius(unit: TemperatureUnit, celsius_value: float) -> float:
    """Convert a Celsius value to *unit*."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return (celsius_value * 9 / 5) + FAHRENHEIT_FREEZING_POINT
    if unit is TemperatureUnit.KELVIN:
        return celsius_value + KELVIN_OFFSET
    return celsius_value


# ---------------------------------------------------------------------------
# Validation + conversion
# ---------------------------------------------------------------------------

def validate(request: ConversionRequest) -> None:
    """Reject a request whose value lies below its unit's absolute zero.

    The threshold itself is valid.

    Raises
    ------
    BelowAbsoluteZeroError
        Carrying the value, unit name and threshold.
    """
    if request.is_physical:
        return
    unit = request.source_unit
    logger.debug(
        "Rejected %s %s: below absolute zero (%s)",
        request.value,
        unit.display_name,
        unit.absolute_zero,
    )
    raise BelowAbsoluteZeroError(
        request.value,
        unit.display_name,
        unit.absolute_zero,
    )


def convert(request: ConversionRequest) -> float:
    """Validate *request* and return its value in the target unit.

    Raises
    ------
    BelowAbsoluteZeroError
        If the value is below absolute zero for the source unit.
    """
    validate(request)
    celsius = to_celsius(request.source_unit, request.value)
    logger.debug(
        "Converting %s %s -> %s via %s Celsius",
        request.value,
        request.source_unit.display_name,
        request.target_unit.display_name,
        celsius,
    )
    return from_celsius(request.target_unit, celsius)


def convert_value(
    value: float,
    source_unit: TemperatureUnit,
    target_unit: TemperatureUnit,
) -> ConversionResult:
    """Build a request from raw inputs, convert it and wrap the outcome."""
    request = ConversionRequest(
        value=value,
        source_unit=source_unit,
        target_unit=target_unit,
    )
    return ConversionResult(request=request, value=convert(request))
