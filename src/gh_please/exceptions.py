"""Custom exception hierarchy for gh-please.

Only *local* failures are raised as exceptions: a malformed invocation,
a ``gh`` binary that cannot be started, or a missing runtime library.
A ``gh`` command that runs and exits non-zero is a normal outcome and is
reported through :class:`~gh_please.core.models.Err` instead.

Hierarchy
---------
GhPleaseError
├── MissingQueryValueError
├── QueryError
├── GhStartupError
│   ├── GhNotFoundError
│   ├── GhPermissionError
│   └── GhExecutionError
├── FieldExtractionError
└── EnvironmentError
"""

from __future__ import annotations


class GhPleaseError(Exception):
    """Base exception for all gh-please errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation validation -------------------------------------------------

class MissingQueryValueError(GhPleaseError):
    """Raised when ``--query`` is given without an expression."""


# --- gh process startup ----------------------------------------------------

class GhStartupError(GhPleaseError):
    """Raised when the gh process could not be started at all."""


class GhNotFoundError(GhStartupError):
    """Raised when the gh binary cannot be located."""


class GhPermissionError(GhStartupError):
    """Raised when the gh binary exists but may not be executed."""


class GhExecutionError(GhStartupError):
    """Raised for any other operating-system failure while spawning gh."""


# --- Query evaluation ------------------------------------------------------

class QueryError(GhPleaseError):
    """Raised when a JMESPath expression is invalid or cannot be applied."""

    def __init__(self, message: str, *, query: str) -> None:
        super().__init__(message)
        self.query: str = query
        """The offending expression, verbatim."""


# --- Field map generation --------------------------------------------------

class FieldExtractionError(GhPleaseError):
    """Raised when gh does not report the fields of a command."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GhPleaseError):
    """Raised when a required runtime dependency is not available."""


def append_gh_upgrade_suggestion(hint: str) -> str:
    """Append gh upgrade guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Also try updating gh:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    https://github.com/cli/cli#installation",
        )
    )
