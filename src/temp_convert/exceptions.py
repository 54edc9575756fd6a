"""Custom exception hierarchy for temp-convert.

All exceptions that cross layer boundaries must inherit from
:class:`TempConvertError` so the CLI error boundary can render them
without a stack trace.

Hierarchy
---------
TempConvertError
├── ValidationError
│   └── BelowAbsoluteZeroError
├── UnitError
│   └── UnknownUnitError
└── EnvironmentError
"""

from __future__ import annotations

from decimal import Decimal


class TempConvertError(Exception):
    """Base exception for all temp-convert errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Validation ------------------------------------------------------------

class ValidationError(TempConvertError):
    """Raised when a conversion request is not physically valid."""


class BelowAbsoluteZeroError(ValidationError):
    """Raised when a value lies below absolute zero for its unit.

    The offending value, the unit's display name and the unit's
    absolute-zero threshold are kept as attributes so callers can
    inspect them without parsing the message.
    """

    def __init__(self, value: float, unit_name: str, threshold: float) -> None:
        super().__init__(
            f"Value {format_plain_number(value)} is below absolute zero "
            f"for {unit_name} ({format_plain_number(threshold)})",
            hint=(
                f"The lowest valid {unit_name} temperature is "
                f"{format_plain_number(threshold)}."
            ),
        )
        self.value: float = value
        self.unit_name: str = unit_name
        self.threshold: float = threshold


# --- Units -----------------------------------------------------------------

class UnitError(TempConvertError):
    """Raised for problems with a temperature unit."""


class UnknownUnitError(UnitError):
    """Raised when a unit tag does not name a supported unit."""

    def __init__(self, tag: str) -> None:
        super().__init__(
            f"Unknown temperature unit {tag!r}",
            hint="Use one of: c, f, k, celsius, fahrenheit, kelvin.",
        )
        self.tag: str = tag


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TempConvertError):
    """Raised when an optional runtime dependency is not available."""


def format_plain_number(value: float) -> str:
    """Render *value* with its shortest exact digits, never in exponent form.

    ``-1e+20`` becomes ``-100000000000000000000``; ``0.0`` stays ``0.0``.
    """
    return f"{Decimal(repr(value)):f}"
