"""Physical constants shared by the conversion core."""

from __future__ import annotations

ABS_ZERO_CELSIUS: float = -273.15
ABS_ZERO_FAHRENHEIT: float = -459.67
ABS_ZERO_KELVIN: float = 0.0

KELVIN_OFFSET: float = 273.15
"""Difference between the Kelvin and Celsius scales."""

FAHRENHEIT_FREEZING_POINT: float = 32.0
"""Freezing point of water in Fahrenheit (0 °C)."""
