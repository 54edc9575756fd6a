"""Shared pytest fixtures and configuration for the temp-convert test suite.

Guidelines
----------
* Core tests must be pure, with no side effects.
* CLI tests drive ``main``/``cli`` with explicit argv and read output
  through ``capsys``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

EPSILON: float = 1e-10
"""Tolerance for floating-point comparisons."""


@pytest.fixture
def close_to():
    """Return a helper building ``pytest.approx`` with the suite tolerance."""

    def _close_to(expected: float) -> object:
        return pytest.approx(expected, abs=EPSILON)

    return _close_to
