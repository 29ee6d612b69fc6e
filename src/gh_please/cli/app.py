"""Command routing and the process-level error boundary.

``doctor`` and ``update-fields`` are handled here; any other first
argument is a gh command and is forwarded untouched, so argparse only
ever parses the built-in commands and the top-level flags.

:func:`cli` is the one place that turns
:class:`~gh_please.exceptions.GhPleaseError`, ``KeyboardInterrupt`` and
unexpected exceptions into a message on stderr and an exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from gh_please.cli import exit_codes
from gh_please.cli.console import configure_logging, console
from gh_please.config import Settings
from gh_please.exceptions import GhPleaseError
from gh_please.version import __version__

BUILTIN_COMMANDS: frozenset[str] = frozenset({"doctor", "update-fields"})

_TOP_LEVEL_FLAGS: frozenset[str] = frozenset({"-h", "--help", "-V", "--version"})


# ---------------------------------------------------------------------------
# Argument parsers
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``gh-please <gh command> [--format json|toon|table] [--query EXPR]``
    * ``gh-please doctor``         environment diagnostics
    * ``gh-please update-fields``  regenerate the --json field map
    * ``gh-please --version``
    """
    parser = argparse.ArgumentParser(
        prog="gh-please",
        description=(
            "GitHub CLI extension with LLM-friendly output. Any gh command "
            "can be run through gh-please; its output is converted to TOON "
            "(default) or JSON."
        ),
        epilog=(
            "examples:\n"
            "  gh-please issue list\n"
            "  gh-please pr view 42 --format json\n"
            "  gh-please release list --query '[?isDraft]'\n"
            "  gh-please issue list --format table"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="A gh command, 'doctor', or 'update-fields'.",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Arguments forwarded to gh.",
    )
    return parser


def _build_update_fields_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-please update-fields",
        description="Regenerate the --json field map by probing gh.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the generated module here instead of stdout.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_doctor(settings: Settings) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from gh_please.cli.doctor import run_doctor

    return run_doctor(settings)


def _handle_update_fields(argv: Sequence[str], settings: Settings) -> int:
    """Dispatch the ``update-fields`` command."""
    from gh_please.cli.update_fields import run_update_fields

    args = _build_update_fields_parser().parse_args(list(argv))
    return run_update_fields(args.output, settings)


def _handle_passthrough(argv: Sequence[str], settings: Settings) -> int:
    """Forward *argv* to gh through the translation layer."""
    from gh_please.cli.passthrough import handle_passthrough

    return handle_passthrough(argv, settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Route *argv* (``sys.argv[1:]`` when omitted) and return the exit code.

    gh failures come back as their own exit code; local failures raise
    :class:`~gh_please.exceptions.GhPleaseError` for :func:`cli` to report.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    settings = Settings.from_env()
    configure_logging(settings.debug)

    if not args:
        _build_parser().print_help()
        return exit_codes.SUCCESS

    head = args[0]
    if head in _TOP_LEVEL_FLAGS:
        _build_parser().parse_args(args)
        return exit_codes.SUCCESS

    if head == "doctor":
        return _handle_doctor(settings)

    if head == "update-fields":
        return _handle_update_fields(args[1:], settings)

    return _handle_passthrough(args, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: run :func:`main` and exit with its code."""
    try:
        code = main()
        sys.exit(code)
    except GhPleaseError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print("[yellow]Hint:[/yellow]")
            console.print(exc.hint, markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue."
        )
        console.print(f"  {type(exc).__name__}: {exc}", markup=False)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
