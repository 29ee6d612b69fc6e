"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and the
passthrough itself remain functional even when Rich is not installed.

Two kinds of output exist:

* **Data**: gh output or rendered JSON/TOON.  Written byte-for-byte
  with :func:`write_stdout` / :func:`write_stderr`; never styled.
* **Diagnostics**: our own messages, rendered through :data:`console`
  on stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from gh_please.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print.

        Pass ``markup=False`` for text that may contain square brackets
        (gh messages, JMESPath expressions).
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup, highlight=False)


console = _ConsoleProxy()


def write_stdout(text: str) -> None:
    """Write text to stdout exactly as given."""
    sys.stdout.write(text)
    sys.stdout.flush()


def write_stderr(text: str) -> None:
    """Write text to stderr exactly as given."""
    sys.stderr.write(text)
    sys.stderr.flush()


def configure_logging(debug: bool) -> None:
    """Route log records to stderr.

    Debug mode shows every record through ``rich.logging.RichHandler``;
    otherwise only warnings and above reach the terminal.
    """
    level = logging.DEBUG if debug else logging.WARNING
    handler: logging.Handler
    try:
        from rich.logging import RichHandler

        handler = RichHandler(
            console=get_rich_console(),
            show_path=False,
            markup=False,
        )
        fmt = "%(name)s: %(message)s"
    except (ModuleNotFoundError, EnvironmentError):
        handler = logging.StreamHandler(sys.stderr)
        fmt = "[%(levelname)s] %(name)s: %(message)s"

    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger("gh_please")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
