"""Presentation helpers — turn core results and errors into terminal text.

Rounding to two decimals happens here and nowhere else.
"""

from __future__ import annotations

from temp_convert.core.models import ConversionResult
from temp_convert.exceptions import TempConvertError

RESULT_STYLE: str = "green"
ERROR_STYLE: str = "bold red"
HINT_STYLE: str = "yellow"


def format_result(result: ConversionResult) -> str:
    """Render e.g. ``"32.00°Fahrenheit is 0.00°Celsius"``."""
    request = result.request
    return (
        f"{request.value:.2f}°{request.source_unit.display_name} is "
        f"{result.value:.2f}°{request.target_unit.display_name}"
    )


def format_error(exc: TempConvertError) -> list[str]:
    """Return the ``Error:`` line, followed by a ``Hint:`` line if any."""
    lines = [f"Error: {exc}"]
    if exc.hint:
        lines.append(f"Hint: {exc.hint}")
    return lines
