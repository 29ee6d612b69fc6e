"""Core / service layer: pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No subprocess, filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Third-party libraries are reached only through injected protocols.
"""

from gh_please.core.arguments import partition
from gh_please.core.error_classifier import classify_failure
from gh_please.core.field_map import build_gh_args, resolve_fields
from gh_please.core.models import (
    Err,
    ErrorCategory,
    ExecutionResult,
    FormatDecision,
    Ok,
    OutputFormat,
)
from gh_please.core.mutation import MUTATION_VERBS, is_mutation_command
from gh_please.core.output_transformer import transform_output
from gh_please.core.passthrough_service import PassthroughService
from gh_please.core.protocols import CommandRunner, QueryEvaluator, Renderer

__all__: list[str] = [
    "MUTATION_VERBS",
    "CommandRunner",
    "Err",
    "ErrorCategory",
    "ExecutionResult",
    "FormatDecision",
    "Ok",
    "OutputFormat",
    "PassthroughService",
    "QueryEvaluator",
    "Renderer",
    "build_gh_args",
    "classify_failure",
    "is_mutation_command",
    "partition",
    "resolve_fields",
    "transform_output",
]
