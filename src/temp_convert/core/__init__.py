"""Core layer — pure conversion logic and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from temp_convert.core.converter import (
    convert,
    convert_value,
    from_celsius,
    to_celsius,
    validate,
)
from temp_convert.core.models import (
    ConversionRequest,
    ConversionResult,
    TemperatureUnit,
)

__all__: list[str] = [
    "ConversionRequest",
    "ConversionResult",
    "TemperatureUnit",
    "convert",
    "convert_value",
    "from_celsius",
    "to_celsius",
    "validate",
]
