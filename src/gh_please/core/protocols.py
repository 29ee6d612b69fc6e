"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from gh_please.core.models import ExecutionResult, OutputFormat


class CommandRunner(Protocol):
    """Contract for gh execution backends.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, args: Sequence[str]) -> ExecutionResult:
        """Run gh with *args* (without the binary name) and capture it.

        A non-zero exit status is a normal, fully captured result and
        must never raise.

        Raises
        ------
        GhNotFoundError
            When the gh binary cannot be located.
        GhPermissionError
            When the gh binary may not be executed.
        GhExecutionError
            For any other failure to start the process.
        """
        ...  # pragma: no cover


class QueryEvaluator(Protocol):
    """Contract for query-expression backends."""

    def __call__(self, data: Any, expression: str) -> Any:
        """Evaluate *expression* against *data*.

        Raises
        ------
        QueryError
            When the expression is invalid or cannot be applied.
        """
        ...  # pragma: no cover


class Renderer(Protocol):
    """Contract for structured-data encoders."""

    def __call__(self, data: Any, fmt: OutputFormat) -> str:
        """Encode *data* as printable text in *fmt*."""
        ...  # pragma: no cover
