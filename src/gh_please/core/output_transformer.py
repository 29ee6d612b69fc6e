"""Turn gh's JSON stdout into the requested output.

Pipeline: parse → optional query → render.  Query evaluation and
rendering are injected, keeping this module free of third-party
imports.
"""

from __future__ import annotations

import json
import logging

from gh_please.core.models import Err, ErrorCategory, FormatDecision, Ok, Outcome
from gh_please.core.protocols import QueryEvaluator, Renderer
from gh_please.exceptions import QueryError

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200
LOCAL_FAILURE_EXIT_CODE = 1


def _parse_failure(stdout: str, decision: FormatDecision, exc: json.JSONDecodeError) -> Err:
    noun = decision.clean_args[0] if decision.clean_args else ""
    args = " ".join(decision.clean_args)
    lines = [
        "Failed to parse JSON output from gh.",
        f"Command: {decision.command_line}",
        f"Parse Error: {exc}",
        "\nTroubleshooting:",
        f"  - Verify the command supports --json flag: gh {noun} --help",
        f"  - Try with --format table to see native output: gh please {args} --format table",
        "  - Report this issue if the command should support JSON",
    ]
    if stdout:
        lines.append(f"\nPartial output received ({len(stdout.encode())} bytes)")
        lines.append(f"First {PREVIEW_CHARS} chars: {stdout[:PREVIEW_CHARS]}")
    return Err(ErrorCategory.PARSE_FAILURE, "\n".join(lines) + "\n", LOCAL_FAILURE_EXIT_CODE)


def _query_failure(exc: QueryError) -> Err:
    lines = [
        "Error: Invalid JMESPath query",
        f"Query: {exc.query}",
        f"Reason: {exc}",
        "\nJMESPath Resources:",
        "  - Tutorial: https://jmespath.org/tutorial.html",
        "  - Examples: https://jmespath.org/examples.html",
    ]
    return Err(ErrorCategory.QUERY_FAILURE, "\n".join(lines) + "\n", LOCAL_FAILURE_EXIT_CODE)


def transform_output(
    stdout: str,
    decision: FormatDecision,
    evaluator: QueryEvaluator,
    renderer: Renderer,
) -> Outcome:
    """Parse, query and render the stdout of a successful ``--json`` call.

    Empty output is a legitimate empty result (e.g. an empty list in a
    repository without issues) and renders nothing.
    """
    if not stdout.strip():
        logger.debug("gh returned empty output for: %s --json", decision.command_line)
        logger.debug("This may be a legitimate empty result (e.g. an empty list)")
        return Ok()

    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as exc:
        return _parse_failure(stdout, decision, exc)

    if decision.query is not None:
        try:
            data = evaluator(data, decision.query)
        except QueryError as exc:
            return _query_failure(exc)

    return Ok(output=renderer(data, decision.format) + "\n")
