"""Core passthrough service: orchestrates one forwarded gh command.

This is the central service class consumed by the CLI layer.  Every
collaborator is injected at construction time (dependency inversion):
the gh runner, the query evaluator, the renderer, and the two lookup
tables.

Guarantees
----------
* Pure orchestration: no ``print()``, no process exit.
* Exactly one :class:`FormatDecision` per call, resolved before gh runs.
* Exactly one gh call per invocation; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence, Set

from gh_please.core.arguments import partition
from gh_please.core.error_classifier import classify_failure
from gh_please.core.field_map import build_gh_args
from gh_please.core.gh_fields import GH_JSON_FIELDS
from gh_please.core.models import Err, ErrorCategory, FormatDecision, Ok, OutputFormat, Outcome
from gh_please.core.mutation import MUTATION_VERBS
from gh_please.core.output_transformer import transform_output
from gh_please.core.protocols import CommandRunner, QueryEvaluator, Renderer

logger = logging.getLogger(__name__)

LEGACY_FORMAT_NOTICE = (
    "Warning: --format table is deprecated and will be removed in a future "
    "release. Use the default TOON output or --format json instead."
)


class PassthroughService:
    """Forward a command to gh and translate what comes back.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    evaluator:
        Query evaluator applied when ``--query`` is given.
    renderer:
        Encoder for the JSON and TOON formats.
    field_map:
        ``"<noun> <verb>"`` → comma-joined ``--json`` fields.
    mutation_verbs:
        Verbs that must not receive ``--json`` by default.
    """

    def __init__(
        self,
        runner: CommandRunner,
        evaluator: QueryEvaluator,
        renderer: Renderer,
        *,
        field_map: Mapping[str, str] = GH_JSON_FIELDS,
        mutation_verbs: Set[str] = MUTATION_VERBS,
    ) -> None:
        self._runner: CommandRunner = runner
        self._evaluator: QueryEvaluator = evaluator
        self._renderer: Renderer = renderer
        self._field_map: Mapping[str, str] = field_map
        self._mutation_verbs: Set[str] = mutation_verbs

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def decide(self, raw_args: Sequence[str]) -> FormatDecision:
        """Partition *raw_args* with this service's verb set.

        Raises
        ------
        MissingQueryValueError
            When ``--query`` has no expression.
        """
        return partition(raw_args, self._mutation_verbs)

    def run(self, raw_args: Sequence[str]) -> Outcome:
        """Execute *raw_args* through gh and return the tagged outcome.

        Raises
        ------
        MissingQueryValueError
            Before gh is spawned, when ``--query`` has no expression.
        GhStartupError
            When the gh process cannot be started.
        """
        decision = self.decide(raw_args)
        logger.debug("Resolved %s (query=%r)", decision.format.value, decision.query)

        if decision.format.requests_structured_output:
            return self._run_structured(decision)
        return self._run_native(decision)

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def _run_native(self, decision: FormatDecision) -> Outcome:
        """Run gh unchanged and hand its output back verbatim."""
        notices: tuple[str, ...] = ()
        if decision.format is OutputFormat.LEGACY:
            notices = (LEGACY_FORMAT_NOTICE, "")

        result = self._runner.run(decision.clean_args)
        if not result.ok:
            return Err(ErrorCategory.UNDERLYING, result.stderr, result.exit_code, notices)
        return Ok(output=result.stdout, notices=notices)

    def _run_structured(self, decision: FormatDecision) -> Outcome:
        args = build_gh_args(decision, self._field_map)
        result = self._runner.run(args)
        if not result.ok:
            return classify_failure(result, decision)
        return transform_output(result.stdout, decision, self._evaluator, self._renderer)
