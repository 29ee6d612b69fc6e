"""Infrastructure layer: external system integration.

This layer wraps all interaction with the gh executable, jmespath and
the TOON encoder.  Every raw third-party or operating-system exception
must be caught here and re-raised as a
:class:`~gh_please.exceptions.GhPleaseError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from gh_please.infra.gh_detector import GhStatus, detect_gh, gh_auth_ok
from gh_please.infra.gh_runner import GhCliRunner
from gh_please.infra.jmespath_query import execute_query
from gh_please.infra.renderer import render

__all__: list[str] = [
    "GhCliRunner",
    "GhStatus",
    "detect_gh",
    "execute_query",
    "gh_auth_ok",
    "render",
]
