"""Domain models for gh-please.

All models are **frozen** dataclasses or enums, immutable value
objects created fresh for each invocation.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Output format
# ---------------------------------------------------------------------------

class OutputFormat(str, enum.Enum):
    """Output format resolved from the ``--format`` flag.

    The enum value is the token users type on the command line, except
    for :attr:`NONE`, which can never be typed.
    """

    JSON = "json"
    STRUCTURED = "toon"
    LEGACY = "table"
    NONE = "none"

    @property
    def requests_structured_output(self) -> bool:
        """Whether ``--json`` must be requested from gh for this format."""
        return self in (OutputFormat.JSON, OutputFormat.STRUCTURED)


# ---------------------------------------------------------------------------
# Partitioned invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormatDecision:
    """Result of partitioning one raw invocation."""

    format: OutputFormat
    """Resolved format.  ``NONE`` only for mutation commands without ``--format``."""

    clean_args: tuple[str, ...]
    """Every token except the format and query flags and their values."""

    query: str | None = None
    """JMESPath expression from ``--query``, if any."""

    explicit_format: bool = False
    """Whether a recognised ``--format`` value was supplied."""

    @property
    def command_line(self) -> str:
        """The gh command line as the user would retype it."""
        return " ".join(("gh", *self.clean_args))


# ---------------------------------------------------------------------------
# Subprocess result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Everything a finished gh process reported."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


# ---------------------------------------------------------------------------
# Tagged outcome
# ---------------------------------------------------------------------------

class ErrorCategory(str, enum.Enum):
    """Why a passthrough invocation failed."""

    RESOURCE_NOT_FOUND = "resource_not_found"
    FIELDS_REQUIRED = "fields_required"
    FORMAT_UNSUPPORTED = "format_unsupported"
    GENERIC = "generic"
    UNDERLYING = "underlying"
    PARSE_FAILURE = "parse_failure"
    QUERY_FAILURE = "query_failure"


@dataclass(frozen=True, slots=True)
class Ok:
    """Successful invocation.

    ``output`` is written to stdout verbatim; ``None`` means there is
    nothing to write.  ``notices`` are informational stderr lines.
    """

    output: str | None = None
    notices: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Err:
    """Failed invocation.

    ``message`` is written to stderr verbatim and the process exits with
    ``exit_code``.
    """

    category: ErrorCategory
    message: str
    exit_code: int
    notices: tuple[str, ...] = ()


Outcome = Ok | Err
