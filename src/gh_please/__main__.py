"""Allow ``python -m gh_please`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m gh_please`` behaves identically to the ``gh-please``
console script.
"""

from __future__ import annotations

from gh_please.cli.app import cli

if __name__ == "__main__":
    cli()
