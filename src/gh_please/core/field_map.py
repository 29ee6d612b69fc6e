"""Field-map lookup and regeneration helpers.

Lookup
------
:func:`resolve_fields` and :func:`build_gh_args` decide which ``--json``
arguments are appended to a passthrough command.

Regeneration
------------
The remaining functions are the pure half of ``gh-please update-fields``:
parsing gh's "Available fields" listing, narrowing it down to fields gh
accepts, and rendering :mod:`gh_please.core.gh_fields`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence

from gh_please.core.gh_fields import GH_JSON_FIELDS
from gh_please.core.models import FormatDecision

logger = logging.getLogger(__name__)

JSON_FLAG = "--json"
AVAILABLE_FIELDS_MARKER = "Available fields:"

_DEPRECATION_SIGNALS: tuple[str, ...] = (
    "deprecated",
    "being deprecated",
    "projects (classic)",
    "sunset",
    "no longer supported",
)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def command_key(clean_args: Sequence[str]) -> str:
    """Return the ``"<noun> <verb>"`` key for *clean_args*."""
    return " ".join(clean_args[:2])


def resolve_fields(
    clean_args: Sequence[str],
    field_map: Mapping[str, str] = GH_JSON_FIELDS,
) -> str | None:
    """Return the comma-joined field list mapped for this command, if any.

    Unmapped commands get ``None``; the caller then requests plain
    ``--json``, which list commands accept and view commands reject.
    """
    return field_map.get(command_key(clean_args)) or None


def build_gh_args(
    decision: FormatDecision,
    field_map: Mapping[str, str] = GH_JSON_FIELDS,
) -> list[str]:
    """Build the argument vector handed to gh for *decision*."""
    args = list(decision.clean_args)
    if not decision.format.requests_structured_output:
        return args

    fields = resolve_fields(decision.clean_args, field_map)
    if fields is None:
        logger.debug("No field mapping for %r; requesting bare --json", command_key(args))
        return [*args, JSON_FLAG]
    return [*args, JSON_FLAG, fields]


# ---------------------------------------------------------------------------
# Regeneration (pure)
# ---------------------------------------------------------------------------

def parse_available_fields(stderr: str) -> list[str]:
    """Extract field names from gh's ``Unknown JSON field`` error.

    Returns an empty list when *stderr* has no ``Available fields:``
    section.
    """
    if AVAILABLE_FIELDS_MARKER not in stderr:
        return []
    listing = stderr.split(AVAILABLE_FIELDS_MARKER, 1)[1]
    return [
        line.strip()
        for line in listing.splitlines()
        if line.strip() and ":" not in line and "Unknown" not in line
    ]


def has_deprecation_error(stderr: str) -> bool:
    """Whether *stderr* reports a deprecated or sunset GraphQL field."""
    lowered = stderr.lower()
    return any(signal in lowered for signal in _DEPRECATION_SIGNALS)


def find_valid_fields(
    fields: Sequence[str],
    validate: Callable[[Sequence[str]], bool],
) -> list[str]:
    """Return the fields gh accepts, preserving their order.

    *validate* is called with a candidate subset and must return
    ``True`` when gh succeeds with exactly those fields.  The list is
    halved recursively until each failing field is isolated, so a map
    with few bad fields costs only a handful of gh calls.
    """
    if not fields:
        return []
    if validate(fields):
        return list(fields)
    if len(fields) == 1:
        logger.debug("Rejected field %s", fields[0])
        return []

    mid = len(fields) // 2
    return [
        *find_valid_fields(fields[:mid], validate),
        *find_valid_fields(fields[mid:], validate),
    ]


def render_field_module(
    mapping: Mapping[str, Sequence[str]],
    *,
    gh_version: str,
    generated_on: str,
) -> str:
    """Render the source of :mod:`gh_please.core.gh_fields`."""
    entries = "\n".join(
        f'        "{key}": "{",".join(fields)}",'
        for key, fields in mapping.items()
    )
    return f'''# Auto-generated by `gh-please update-fields`
# DO NOT EDIT MANUALLY - Run: gh-please update-fields --output src/gh_please/core/gh_fields.py
#
# Last updated: {generated_on}
# gh CLI version: {gh_version}

"""GitHub CLI ``--json`` field lists for single-resource view commands.

``gh <noun> view --json`` without field names fails and prints the list
of available fields instead, so these commands need explicit fields.
List commands are deliberately absent.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

GH_JSON_FIELDS: Mapping[str, str] = MappingProxyType(
    {{
{entries}
    }}
)
'''
