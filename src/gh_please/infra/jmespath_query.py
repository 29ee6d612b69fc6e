"""jmespath backed implementation of :class:`~gh_please.core.protocols.QueryEvaluator`.

This module is the **only** place in the codebase that imports
``jmespath``.  Every jmespath exception is caught here and re-raised as
:class:`~gh_please.exceptions.QueryError` carrying the expression.
"""

from __future__ import annotations

from typing import Any

from gh_please.exceptions import EnvironmentError, QueryError


def execute_query(data: Any, query: str) -> Any:
    """Evaluate the JMESPath *query* against *data*.

    Examples
    --------
    >>> execute_query({"foo": {"bar": [0, 1, 2]}}, "foo.bar[2]")
    2
    >>> execute_query({"items": [{"a": 1}, {"a": 2}]}, "items[?a > `1`]")
    [{'a': 2}]

    Raises
    ------
    QueryError
        If *data* is ``None``, *query* is blank, or jmespath rejects
        the expression.
    EnvironmentError
        If jmespath is not installed.
    """
    if data is None:
        raise QueryError(
            "Invalid JMESPath query: data cannot be null",
            query=query,
        )
    if not query or not query.strip():
        raise QueryError(
            "Invalid JMESPath query: query string cannot be empty",
            query=query,
        )

    try:
        import jmespath
        import jmespath.exceptions
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "jmespath is not installed. Install with: pip install jmespath",
        ) from exc

    try:
        return jmespath.search(query, data)
    except jmespath.exceptions.JMESPathError as exc:
        raise QueryError(
            f"Invalid JMESPath query: {exc}",
            query=query,
        ) from exc
