"""Tests for the pure conversion core (core/converter.py).

Every test is a pure function call with no I/O and no mocking.  These tests
exercise:

* Reference values for the to/from Celsius formulas
* Round-trip identity through the Celsius pivot
* The -40 crossover point
* Inclusive absolute-zero boundary and structured validation errors
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from temp_convert.core.converter import (
    convert,
    convert_value,
    from_celsius,
    to_celsius,
    validate,
)
from temp_convert.core.models import ConversionRequest, TemperatureUnit
from temp_convert.exceptions import BelowAbsoluteZeroError

C = TemperatureUnit.CELSIUS
F = TemperatureUnit.FAHRENHEIT
K = TemperatureUnit.KELVIN

Approx = Callable[[float], object]


# ---------------------------------------------------------------------------
# to_celsius / from_celsius
# ---------------------------------------------------------------------------

class TestToCelsius:
    @pytest.mark.parametrize(
        ("unit", "value", "expected"),
        [
            (F, 32.0, 0.0),
            (F, 212.0, 100.0),
            (F, -40.0, -40.0),
            (K, 273.15, 0.0),
            (K, 0.0, -273.15),
            (C, 25.0, 25.0),
        ],
    )
    def test_reference_values(
        self, close_to: Approx, unit: TemperatureUnit, value: float, expected: float
    ) -> None:
        assert to_celsius(unit, value) == close_to(expected)


class TestFromCelsius:
    @pytest.mark.parametrize(
        ("unit", "value", "expected"),
        [
            (F, 0.0, 32.0),
            (F, 100.0, 212.0),
            (F, -40.0, -40.0),
            (K, 0.0, 273.15),
            (K, -273.15, 0.0),
            (C, 36.6, 36.6),
        ],
    )
    def test_reference_values(
        self, close_to: Approx, unit: TemperatureUnit, value: float, expected: float
    ) -> None:
        assert from_celsius(unit, value) == close_to(expected)


class TestRoundTrip:
    @pytest.mark.parametrize("unit", list(TemperatureUnit))
    @pytest.mark.parametrize("offset", [0.0, 0.5, 98.6, 373.15, 1e4])
    def test_identity_through_celsius(
        self, close_to: Approx, unit: TemperatureUnit, offset: float
    ) -> None:
        value = unit.absolute_zero + offset
        assert from_celsius(unit, to_celsius(unit, value)) == close_to(value)


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------

class TestConvert:
    def test_crossover_point(self, close_to: Approx) -> None:
        assert convert(ConversionRequest(-40.0, C, F)) == close_to(-40.0)
        assert convert(ConversionRequest(-40.0, F, C)) == close_to(-40.0)

    def test_fahrenheit_to_kelvin(self, close_to: Approx) -> None:
        assert convert(ConversionRequest(32.0, F, K)) == close_to(273.15)

    def test_kelvin_to_fahrenheit(self, close_to: Approx) -> None:
        assert convert(ConversionRequest(373.15, K, F)) == close_to(212.0)

    def test_same_unit_is_identity(self) -> None:
        assert convert(ConversionRequest(12.345, C, C)) == 12.345

    def test_no_rounding(self) -> None:
        assert convert(ConversionRequest(1.0, F, C)) == (1.0 - 32) * 5 / 9

    @pytest.mark.parametrize("source", list(TemperatureUnit))
    @pytest.mark.parametrize("target", list(TemperatureUnit))
    def test_absolute_zero_boundary_is_valid(
        self, source: TemperatureUnit, target: TemperatureUnit
    ) -> None:
        result = convert(ConversionRequest(source.absolute_zero, source, target))
        assert result == pytest.approx(target.absolute_zero, abs=1e-9)


class TestValidation:
    @pytest.mark.parametrize(
        ("source", "target", "name", "threshold"),
        [
            (C, F, "Celsius", -273.15),
            (F, C, "Fahrenheit", -459.67),
            (K, C, "Kelvin", 0.0),
        ],
    )
    def test_below_absolute_zero_fails(
        self,
        source: TemperatureUnit,
        target: TemperatureUnit,
        name: str,
        threshold: float,
    ) -> None:
        value = source.absolute_zero - 1
        with pytest.raises(BelowAbsoluteZeroError) as exc_info:
            convert(ConversionRequest(value, source, target))

        err = exc_info.value
        assert err.value == value
        assert err.unit_name == name
        assert err.threshold == threshold

        message = str(err)
        assert "below absolute zero" in message
        assert name in message
        assert str(threshold) in message

    def test_validate_accepts_physical_request(self) -> None:
        validate(ConversionRequest(0.0, K, C))

    def test_rejection_is_logged_at_debug(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="temp_convert")
        with pytest.raises(BelowAbsoluteZeroError):
            validate(ConversionRequest(-1.0, K, C))
        assert any("below absolute zero" in r.getMessage() for r in caplog.records)


class TestConvertValue:
    def test_wraps_request_and_value(self, close_to: Approx) -> None:
        result = convert_value(0.0, C, K)
        assert result.request == ConversionRequest(0.0, C, K)
        assert result.value == close_to(273.15)

    def test_propagates_validation_error(self) -> None:
        with pytest.raises(BelowAbsoluteZeroError):
            convert_value(-500.0, F, C)
