"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that ``--help``,
``--version`` and plain conversions keep working when Rich is not
installed; output then falls back to unstyled ``print``.
"""

from __future__ import annotations

import sys
from typing import Any

from temp_convert.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain print.

		Markup and highlighting are disabled: every line is styled as a
		whole through *style*, and user input never becomes markup.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			print(*objects, file=stream)
			return
		rich_console.print(
			*objects,
			style=style,
			markup=False,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy(stderr=False)
"""Result output (stdout)."""

err_console = _ConsoleProxy(stderr=True)
"""Errors, hints and diagnostics (stderr)."""
