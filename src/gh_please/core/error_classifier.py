"""Classify failed gh invocations and build their remediation text.

gh has no structured error schema, so classification is substring
matching on its human-readable stderr.  All of it lives in
:func:`classify_failure`; the fixtures in ``tests/test_error_classifier.py``
pin the exact gh wording each branch depends on.

Priority order
--------------
1. Resource not found: gh's own message is the best explanation.
2. Fields required: its text also contains ``--json``.
3. ``--json`` unsupported.
4. Anything else.
"""

from __future__ import annotations

import re

from gh_please.core.models import Err, ErrorCategory, ExecutionResult, FormatDecision

RESOURCE_NOT_FOUND_SIGNALS: tuple[str, ...] = (
    "could not resolve",
    "not found",
    "does not exist",
    "no pull requests",
    "no issues",
)

FIELDS_REQUIRED_SIGNAL = "Specify one or more comma-separated fields"
JSON_UNSUPPORTED_SIGNAL = "--json"

_FIELD_LISTING = re.compile(
    re.escape(FIELDS_REQUIRED_SIGNAL) + r"[^\n]*:\n(.+)",
    re.DOTALL,
)

FIELDS_REQUIRED_HEADER = (
    "This command requires explicit --json fields, "
    "but no field mapping exists for it yet."
)
FORMAT_UNSUPPORTED_HEADER = "This command does not support --json output."


def is_resource_not_found(stderr: str) -> bool:
    lowered = stderr.lower()
    return any(signal in lowered for signal in RESOURCE_NOT_FOUND_SIGNALS)


def extract_field_listing(stderr: str) -> str | None:
    """Return only the field names that follow gh's fields-required sentence."""
    match = _FIELD_LISTING.search(stderr)
    if match is None:
        return None
    listing = match.group(1).strip()
    return listing or None


def _attempted(decision: FormatDecision) -> str:
    return f"\nCommand attempted: {decision.command_line} --json"


def classify_failure(result: ExecutionResult, decision: FormatDecision) -> Err:
    """Build the :class:`Err` for a gh process that exited non-zero.

    When no structured output was requested, gh's stderr is forwarded
    without any reinterpretation.
    """
    stderr = result.stderr
    code = result.exit_code

    if not decision.format.requests_structured_output:
        return Err(ErrorCategory.UNDERLYING, stderr, code)

    if is_resource_not_found(stderr):
        return Err(ErrorCategory.RESOURCE_NOT_FOUND, stderr, code)

    if FIELDS_REQUIRED_SIGNAL in stderr:
        listing = extract_field_listing(stderr)
        lines = [
            _attempted(decision),
            FIELDS_REQUIRED_HEADER,
            "\nAvailable fields:",
            listing if listing is not None else stderr.rstrip("\n"),
            "\nTo add field mapping:",
            "  1. Run: gh-please update-fields --output src/gh_please/core/gh_fields.py",
            "  2. Add the command to the probe list in gh_please.cli.update_fields if it is new",
        ]
        return Err(ErrorCategory.FIELDS_REQUIRED, "\n".join(lines) + "\n", code)

    if JSON_UNSUPPORTED_SIGNAL in stderr:
        noun = decision.clean_args[0] if decision.clean_args else ""
        lines = [
            _attempted(decision),
            FORMAT_UNSUPPORTED_HEADER,
            "\nTroubleshooting:",
            f"  - Verify the command supports --json: gh {noun} --help".rstrip(),
            f"  - Try without format flag: {decision.command_line}",
            f"  - Or keep gh's native output: gh please {' '.join(decision.clean_args)} --format table",
        ]
        return Err(ErrorCategory.FORMAT_UNSUPPORTED, "\n".join(lines) + "\n", code)

    message = _attempted(decision) + "\n" + stderr
    return Err(ErrorCategory.GENERIC, message, code)
