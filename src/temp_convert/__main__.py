"""Allow ``python -m temp_convert`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m temp_convert`` behaves identically to the ``temp-convert``
console script.
"""

from __future__ import annotations

from temp_convert.cli.app import cli

if __name__ == "__main__":
    cli()
