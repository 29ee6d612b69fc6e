"""Forward an unrecognised command to gh and print the outcome.

Builds the :class:`~gh_please.core.passthrough_service.PassthroughService`
from its infrastructure adapters, runs it, and turns the tagged
outcome into stream output plus an exit code.  Exceptions raised by the
service (missing ``--query`` value, gh startup failures) propagate to
the error boundary in :mod:`gh_please.cli.app`.
"""

from __future__ import annotations

from collections.abc import Sequence

from gh_please.cli import exit_codes
from gh_please.cli.console import console, write_stderr, write_stdout
from gh_please.config import Settings
from gh_please.core.models import Err, Outcome
from gh_please.core.passthrough_service import PassthroughService
from gh_please.infra.gh_runner import GhCliRunner
from gh_please.infra.jmespath_query import execute_query
from gh_please.infra.renderer import render


def build_service(settings: Settings) -> PassthroughService:
    """Wire the production adapters into a passthrough service."""
    return PassthroughService(
        GhCliRunner(settings.gh_binary),
        execute_query,
        render,
    )


def emit(outcome: Outcome) -> int:
    """Write *outcome* to the process streams and return its exit code."""
    for notice in outcome.notices:
        console.print(f"[yellow]{notice}[/yellow]" if notice else "")

    if isinstance(outcome, Err):
        write_stderr(outcome.message)
        return outcome.exit_code

    if outcome.output:
        write_stdout(outcome.output)
    return exit_codes.SUCCESS


def handle_passthrough(args: Sequence[str], settings: Settings) -> int:
    """Run *args* through gh and return the process exit code."""
    return emit(build_service(settings).run(args))
