"""Runtime settings resolved from the process environment.

gh-please has no configuration file.  The handful of knobs it exposes
are environment variables, read once per invocation by the CLI layer
and passed down explicitly.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_GH_BINARY: str = "gh"

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable per-invocation settings."""

    debug: bool = False
    """Emit DEBUG log records (``DEBUG`` or ``GH_PLEASE_DEBUG``)."""

    gh_binary: str = DEFAULT_GH_BINARY
    """Executable used for every passthrough call (``GH_PLEASE_GH_PATH``)."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        debug = any(
            env.get(name, "").strip().lower() in _TRUTHY
            for name in ("DEBUG", "GH_PLEASE_DEBUG")
        )
        gh_binary = env.get("GH_PLEASE_GH_PATH", "").strip() or DEFAULT_GH_BINARY
        return cls(debug=debug, gh_binary=gh_binary)
