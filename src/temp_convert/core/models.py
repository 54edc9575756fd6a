"""Domain models for temp-convert.

:class:`TemperatureUnit` is a closed enumeration whose per-member
attributes come from fixed lookup tables.  Requests and results are
**frozen** dataclasses with no I/O and no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from temp_convert.exceptions import UnknownUnitError
from temp_convert.utils.constants import (
    ABS_ZERO_CELSIUS,
    ABS_ZERO_FAHRENHEIT,
    ABS_ZERO_KELVIN,
)


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

class TemperatureUnit(Enum):
    """Supported temperature units, keyed by their single-letter code."""

    CELSIUS = "c"
    FAHRENHEIT = "f"
    KELVIN = "k"

    @property
    def code(self) -> str:
        """Single-letter tag accepted on the command line."""
        return self.value

    @property
    def absolute_zero(self) -> float:
        """Lowest physically valid value expressible in this unit."""
        return _ABSOLUTE_ZERO[self]

    @property
    def display_name(self) -> str:
        """Human-readable full name (e.g. ``"Celsius"``)."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, tag: str) -> TemperatureUnit:
        """Resolve *tag* (code or full name, any case) to a unit.

        Raises
        ------
        UnknownUnitError
            If *tag* names no supported unit.
        """
        normalized = tag.strip().lower()
        for unit in cls:
            if normalized in (unit.code, unit.display_name.lower()):
                return unit
        raise UnknownUnitError(tag)


_ABSOLUTE_ZERO: dict[TemperatureUnit, float] = {
    TemperatureUnit.CELSIUS: ABS_ZERO_CELSIUS,
    TemperatureUnit.FAHRENHEIT: ABS_ZERO_FAHRENHEIT,
    TemperatureUnit.KELVIN: ABS_ZERO_KELVIN,
}

_DISPLAY_NAMES: dict[TemperatureUnit, str] = {
    TemperatureUnit.CELSIUS: "Celsius",
    TemperatureUnit.FAHRENHEIT: "Fahrenheit",
    TemperatureUnit.KELVIN: "Kelvin",
}


# ---------------------------------------------------------------------------
# Request / result value objects
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """A single temperature to convert from one unit to another."""

    value: float
    """Temperature expressed in :attr:`source_unit`."""

    source_unit: TemperatureUnit
    target_unit: TemperatureUnit

    @property
    def is_physical(self) -> bool:
        """``True`` when :attr:`value` is at or above absolute zero."""
        return self.value >= self.source_unit.absolute_zero


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """A request paired with its converted, unrounded value."""

    request: ConversionRequest
    value: float
    """Temperature expressed in ``request.target_unit``."""
