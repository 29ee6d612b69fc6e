"""``gh-please update-fields``: regenerate the ``--json`` field map.

For every probed view command gh is asked for a field that does not
exist; its error lists every available field.  Fields that gh then
rejects (typically deprecated GraphQL fields) are weeded out by
bisection, and the result is written as the
:mod:`gh_please.core.gh_fields` module.

Requires an authenticated gh with network access.
"""

from __future__ import annotations

import datetime
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gh_please.cli import exit_codes
from gh_please.cli.console import console, write_stdout
from gh_please.config import Settings
from gh_please.core.field_map import (
    JSON_FLAG,
    find_valid_fields,
    has_deprecation_error,
    parse_available_fields,
    render_field_module,
)
from gh_please.core.protocols import CommandRunner
from gh_please.exceptions import FieldExtractionError, append_gh_upgrade_suggestion
from gh_please.infra.gh_runner import GhCliRunner

logger = logging.getLogger(__name__)

_INVALID_FIELD = "invalidfield"


@dataclass(frozen=True, slots=True)
class FieldProbe:
    """A view command plus the arguments that make it resolve a resource."""

    command: str
    subcommand: str
    probe_args: tuple[str, ...]

    @property
    def key(self) -> str:
        return f"{self.command} {self.subcommand}"


PROBES: tuple[FieldProbe, ...] = (
    FieldProbe("issue", "view", ("1", "--repo", "cli/cli")),
    FieldProbe("pr", "view", ("1", "--repo", "cli/cli")),
    FieldProbe("repo", "view", ("cli/cli",)),
    FieldProbe("release", "view", ("--repo", "cli/cli")),
)


def extract_fields(runner: CommandRunner, probe: FieldProbe) -> list[str]:
    """Return the fields gh accepts for *probe*, in gh's listing order.

    Raises
    ------
    FieldExtractionError
        When gh does not print an ``Available fields:`` listing.
    """
    base = [probe.command, probe.subcommand, *probe.probe_args]
    result = runner.run([*base, JSON_FLAG, _INVALID_FIELD])
    available = parse_available_fields(result.stderr)
    if not available:
        raise FieldExtractionError(
            f"Failed to extract fields for {probe.key}",
            hint=append_gh_upgrade_suggestion(
                result.stderr.strip() or "gh printed no field listing.",
            ),
        )
    logger.info("%s: %d fields reported", probe.key, len(available))

    def validate(fields: Sequence[str]) -> bool:
        attempt = runner.run([*base, JSON_FLAG, ",".join(fields)])
        return attempt.ok and not has_deprecation_error(attempt.stderr)

    valid = find_valid_fields(available, validate)
    for dropped in (field for field in available if field not in valid):
        console.print(f"  [yellow]filtered[/yellow] {probe.key}: {dropped}")
    return valid


def gh_version(runner: CommandRunner) -> str:
    result = runner.run(["--version"])
    match = re.search(r"gh version ([\d.]+)", result.stdout)
    return match.group(1) if match else "unknown"


def run_update_fields(output: Path | None, settings: Settings | None = None) -> int:
    """Probe gh and write the regenerated field module.

    The module goes to *output*, or to stdout when *output* is ``None``.
    """
    settings = settings or Settings.from_env()
    runner = GhCliRunner(settings.gh_binary)

    mapping: dict[str, list[str]] = {}
    for probe in PROBES:
        console.print(f"Extracting fields for: [bold]gh {probe.key}[/bold]")
        mapping[probe.key] = extract_fields(runner, probe)

    source = render_field_module(
        mapping,
        gh_version=gh_version(runner),
        generated_on=datetime.date.today().isoformat(),
    )

    if output is None:
        write_stdout(source)
    else:
        output.write_text(source, encoding="utf-8")
        console.print(f"[green]Generated[/green] {output}")
    return exit_codes.SUCCESS
