"""Shared pytest fixtures and configuration for the gh-please test suite.

Guidelines
----------
* No internet access in any test.
* gh must be mocked at the infra boundary, never spawned for real.
* Core tests must be pure, with no side effects.
* Tests must not depend on OS state or the caller's environment.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import pytest

from gh_please.core.models import ExecutionResult, OutputFormat


class FakeRunner:
    """In-memory :class:`CommandRunner` that records every call."""

    def __init__(self, *results: ExecutionResult) -> None:
        self._results: list[ExecutionResult] = list(results) or [ExecutionResult("", "", 0)]
        self.calls: list[list[str]] = []

    def run(self, args: Sequence[str]) -> ExecutionResult:
        self.calls.append(list(args))
        if len(self._results) > 1:
            return self._results.pop(0)
        return self._results[0]


def fake_render(data: Any, fmt: OutputFormat) -> str:
    """Deterministic renderer: ``<format>:<repr>``."""
    return f"{fmt.value}:{data!r}"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DEBUG", "GH_PLEASE_DEBUG", "GH_PLEASE_GH_PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger("gh_please")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
