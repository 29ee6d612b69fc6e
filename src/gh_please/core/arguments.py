"""Partition a raw invocation into a :class:`FormatDecision`.

The partitioner is the only code that sees the raw argument vector.
It pulls out ``--format`` and ``--query`` (both ``--flag value`` and
``--flag=value`` shapes) in a single left-to-right scan and copies
every other token, in order, into ``clean_args``.
"""

from __future__ import annotations

from collections.abc import Sequence, Set

from gh_please.core.models import FormatDecision, OutputFormat
from gh_please.core.mutation import MUTATION_VERBS, is_mutation_command
from gh_please.exceptions import MissingQueryValueError

FORMAT_FLAG = "--format"
QUERY_FLAG = "--query"

_FORMAT_VALUES: dict[str, OutputFormat] = {
    "json": OutputFormat.JSON,
    "toon": OutputFormat.STRUCTURED,
    "table": OutputFormat.LEGACY,
}

QUERY_USAGE = "\n".join(
    (
        "Usage: gh please <command> --query '<jmespath-expression>'",
        "Example: gh please release list --query '[?isDraft]'",
    )
)


def parse_format_value(value: str | None) -> OutputFormat | None:
    """Map a ``--format`` value to an :class:`OutputFormat`.

    Unknown values (and ``none``, which is internal) return ``None``.
    """
    if value is None:
        return None
    return _FORMAT_VALUES.get(value)


def partition(
    raw_args: Sequence[str],
    verbs: Set[str] = MUTATION_VERBS,
) -> FormatDecision:
    """Split *raw_args* into the resolved format, query and clean args.

    Raises
    ------
    MissingQueryValueError
        When ``--query`` is not followed by an expression.
    """
    clean_args: list[str] = []
    explicit: OutputFormat | None = None
    query: str | None = None

    i = 0
    while i < len(raw_args):
        arg = raw_args[i]
        i += 1
        if not arg:
            continue

        if arg.startswith(FORMAT_FLAG + "="):
            parsed = parse_format_value(arg.partition("=")[2])
            if parsed is not None:
                explicit = parsed
            continue

        if arg == FORMAT_FLAG:
            if i < len(raw_args):
                # An unrecognised value is still consumed so it is never
                # mistaken for a positional argument.
                parsed = parse_format_value(raw_args[i])
                if parsed is not None:
                    explicit = parsed
                i += 1
            continue

        if arg.startswith(QUERY_FLAG + "="):
            query = arg.partition("=")[2]
            continue

        if arg == QUERY_FLAG:
            value = raw_args[i] if i < len(raw_args) else ""
            if not value or value.startswith("-"):
                raise MissingQueryValueError(
                    "--query flag requires a value",
                    hint=QUERY_USAGE,
                )
            query = value
            i += 1
            continue

        clean_args.append(arg)

    if explicit is not None:
        fmt = explicit
    elif is_mutation_command(clean_args, verbs):
        fmt = OutputFormat.NONE
    else:
        fmt = OutputFormat.STRUCTURED

    return FormatDecision(
        format=fmt,
        clean_args=tuple(clean_args),
        query=query,
        explicit_format=explicit is not None,
    )
