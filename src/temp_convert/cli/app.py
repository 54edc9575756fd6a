"""CLI application entry point for temp-convert.

This module is the **sole error boundary** for the entire application.
It catches :class:`~temp_convert.exceptions.TempConvertError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No conversion logic lives here; all work is delegated to the core.
* Results go to stdout, errors and logs to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import NoReturn

from temp_convert.cli import exit_codes
from temp_convert.cli.console import console, err_console
from temp_convert.cli.formatting import (
    ERROR_STYLE,
    HINT_STYLE,
    RESULT_STYLE,
    format_error,
    format_result,
)
from temp_convert.core.converter import convert_value
from temp_convert.core.models import TemperatureUnit
from temp_convert.exceptions import TempConvertError, UnknownUnitError
from temp_convert.version import __version__

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


# ---------------------------------------------------------------------------
# Argument types
# ---------------------------------------------------------------------------

def _temperature_value(text: str) -> float:
    """argparse ``type`` for the positional temperature value."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid temperature value: {text!r}"
        ) from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(
            f"temperature must be a finite number: {text!r}"
        )
    return value


def _temperature_unit(text: str) -> TemperatureUnit:
    """argparse ``type`` mapping a unit tag to :class:`TemperatureUnit`."""
    try:
        return TemperatureUnit.parse(text)
    except UnknownUnitError as exc:
        raise argparse.ArgumentTypeError(f"{exc}. {exc.hint}") from None


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` whose usage errors exit with :data:`exit_codes.USAGE_ERROR`."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(exit_codes.USAGE_ERROR, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    * ``temp-convert 7 -u c -c k`` — convert 7 °C to Kelvin
    * ``temp-convert -40``         — Fahrenheit to Celsius by default
    * ``temp-convert --version``
    """
    parser = _ArgumentParser(
        prog="temp-convert",
        description="Convert temperatures between Celsius, Fahrenheit, and Kelvin.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "value",
        metavar="VALUE",
        type=_temperature_value,
        help="Temperature value to convert.",
    )
    parser.add_argument(
        "-u",
        "--unit",
        dest="source_unit",
        metavar="UNIT",
        type=_temperature_unit,
        default="f",
        help=(
            "Temperature unit of the provided value "
            "(c/celsius, f/fahrenheit, k/kelvin; default: f)."
        ),
    )
    parser.add_argument(
        "-c",
        "--convert",
        dest="target_unit",
        metavar="UNIT",
        type=_temperature_unit,
        default="c",
        help=(
            "Target temperature unit to convert the value to "
            "(c/celsius, f/fahrenheit, k/kelvin; default: c)."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Diagnostic log verbosity on stderr (default: WARNING).",
    )
    return parser


def _is_negative_number(token: str) -> bool:
    if len(token) < 2 or not token.startswith("-"):
        return False
    try:
        float(token)
    except ValueError:
        return False
    return True


def _protect_negative_values(argv: list[str]) -> list[str]:
    """Move negative numeric tokens behind ``--`` so they stay positional.

    argparse only recognises ``-40`` or ``-.5`` style negatives; forms
    such as ``-1e2`` would otherwise be taken for unknown options.
    Tokens already after an explicit ``--`` are left untouched.
    """
    if "--" in argv:
        split = argv.index("--")
        head, tail = argv[:split], argv[split + 1:]
    else:
        head, tail = argv, []
    numbers = [token for token in head if _is_negative_number(token)]
    if not numbers:
        return list(argv)
    options = [token for token in head if not _is_negative_number(token)]
    return [*options, "--", *numbers, *tail]


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse *argv* (default ``sys.argv[1:]``) into a namespace."""
    if argv is None:
        argv = sys.argv[1:]
    return _build_parser().parse_args(_protect_negative_values(argv))


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the temp-convert CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    BelowAbsoluteZeroError
        Propagated to :func:`cli`, which renders it.
    SystemExit
        From argparse for ``--help``, ``--version`` and usage errors.
    """
    args = parse_arguments(argv)
    _configure_logging(args.log_level)

    result = convert_value(args.value, args.source_unit, args.target_unit)
    console.print(format_result(result), style=RESULT_STYLE)
    return exit_codes.SUCCESS


def _render_error(exc: TempConvertError) -> None:
    message, *hints = format_error(exc)
    err_console.print(message, style=ERROR_STYLE)
    for hint in hints:
        err_console.print(hint, style=HINT_STYLE)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except TempConvertError as exc:
        _render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("Aborted by user.", style=HINT_STYLE)
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style=ERROR_STYLE,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
