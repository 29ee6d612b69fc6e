"""subprocess backed implementation of :class:`~gh_please.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns gh for a
passthrough command.  Operating-system errors raised while starting the
process are caught here and re-raised as typed
:class:`~gh_please.exceptions.GhStartupError` subclasses.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from gh_please.config import DEFAULT_GH_BINARY
from gh_please.core.models import ExecutionResult
from gh_please.exceptions import GhExecutionError, GhNotFoundError, GhPermissionError
from gh_please.infra.gh_detector import install_hint

logger = logging.getLogger(__name__)


class GhCliRunner:
    """Concrete :class:`CommandRunner` that runs the gh executable.

    Usage::

        runner = GhCliRunner()
        result = runner.run(["issue", "list", "--json"])

    Both pipes are drained completely before the exit status is read.
    No timeout is applied: gh is interactive-speed and a hang is left
    to the user to interrupt.
    """

    def __init__(self, binary: str = DEFAULT_GH_BINARY) -> None:
        self._binary: str = binary

    @property
    def binary(self) -> str:
        return self._binary

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def run(self, args: Sequence[str]) -> ExecutionResult:
        """Run gh with *args* and capture stdout, stderr and exit code.

        Raises
        ------
        GhNotFoundError
            When the binary does not exist.
        GhPermissionError
            When the binary may not be executed.
        GhExecutionError
            For any other failure to spawn the process.
        """
        cmd = [self._binary, *args]
        logger.debug("Running: %s", " ".join(cmd))

        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise GhNotFoundError(
                f"GitHub CLI ({self._binary}) not found.",
                hint=install_hint(),
            ) from exc
        except PermissionError as exc:
            raise GhPermissionError(
                f"Permission denied executing {self._binary}.",
                hint="Please check file permissions on the gh executable.",
            ) from exc
        except OSError as exc:
            raise GhExecutionError(
                f"Failed to execute gh command: {exc}",
            ) from exc

        logger.debug("gh exited with %d", completed.returncode)
        return ExecutionResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            exit_code=completed.returncode,
        )
