"""``gh-please doctor``: environment diagnostics.

Reports whether gh is reachable and logged in, and whether the
libraries behind ``--query`` and the TOON output can be imported.
Everything is written to stderr so the command never pollutes a pipe.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata
from typing import NamedTuple

from gh_please.cli import exit_codes
from gh_please.cli.console import console
from gh_please.config import Settings
from gh_please.infra.gh_detector import GhStatus, detect_gh, gh_auth_ok
from gh_please.version import __version__

OK = "OK"
WARN = "WARN"
FAIL = "FAIL"

_STATUS_STYLE: dict[str, str] = {OK: "green", WARN: "yellow", FAIL: "red"}

_OS_NAMES: dict[str, str] = {"Darwin": "macOS"}


class Check(NamedTuple):
    """One row of the doctor report."""

    label: str
    value: str
    status: str

    @property
    def styled_status(self) -> str:
        style = _STATUS_STYLE.get(self.status.split()[0], "white")
        return f"[{style}]{self.status}[/{style}]"


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    if sys.version_info[:2] >= (3, 10):
        return Check("Python", platform.python_version(), OK)
    return Check("Python", platform.python_version(), f"{FAIL} (>=3.10 required)")


def _library_check(label: str, module: str, distribution: str) -> Check:
    """Import *module* and report the installed *distribution* version."""
    try:
        __import__(module)
    except ImportError:
        return Check(label, "NOT INSTALLED", FAIL)
    try:
        return Check(label, metadata.version(distribution), OK)
    except metadata.PackageNotFoundError:
        return Check(label, "unknown", OK)


def _gh_check(binary: str, status: GhStatus | None = None) -> Check:
    status = status or detect_gh(binary)
    if not status.found:
        return Check("gh", "not found", FAIL)
    return Check("gh", str(status.path or binary), OK)


def _gh_auth_check(binary: str) -> Check:
    if gh_auth_ok(binary):
        return Check("gh auth", "logged in", OK)
    return Check("gh auth", "not logged in", WARN)


def _os_check() -> Check:
    system = platform.system()
    name = _OS_NAMES.get(system, system)
    return Check("OS", f"{name} {platform.release()} ({platform.machine()})", OK)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_rich(checks: list[Check]) -> bool:
    """Print *checks* as a Rich table; ``False`` when Rich is missing."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return False

    table = Table(title="gh-please doctor", header_style="bold cyan", border_style="dim")
    table.add_column("Component", style="bold")
    table.add_column("Value")
    table.add_column("Status", justify="center")
    for check in checks:
        table.add_row(check.label, check.value, check.styled_status)

    console.print()
    console.print(table)
    console.print()
    return True


def _render_plain(checks: list[Check]) -> None:
    width = max(len(check.value) for check in checks) + 2
    lines = ["", "gh-please doctor"]
    lines.append(f"{'Component':<12}{'Value':<{width}}Status")
    lines.extend(f"{c.label:<12}{c.value:<{width}}{c.status}" for c in checks)
    lines.append("")
    print("\n".join(lines), file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: Settings | None = None) -> int:
    """Run every check, print the report and return the exit code.

    A missing gh or library is a failure; being logged out of gh is
    only a warning because public data can still be read.
    """
    settings = settings or Settings.from_env()
    gh_status = detect_gh(settings.gh_binary)

    checks = [
        Check("gh-please", __version__, OK),
        _python_version_check(),
        _gh_check(settings.gh_binary, gh_status),
    ]
    if gh_status.found:
        checks.append(_gh_auth_check(settings.gh_binary))
    checks += [
        _library_check("jmespath", "jmespath", "jmespath"),
        _library_check("python-toon", "toon", "python-toon"),
        _os_check(),
    ]

    if not _render_rich(checks):
        _render_plain(checks)

    if not gh_status.found:
        console.print("[yellow]The GitHub CLI (gh) is not installed.[/yellow]")
        console.print("Install it with one of:")
        for command in gh_status.install_commands:
            console.print(f"  {command}", markup=False)
        console.print()

    if any(check.status.startswith(FAIL) for check in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
