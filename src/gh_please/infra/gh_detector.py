"""Locate the gh executable and describe how to install it.

Detection only looks at ``PATH``; nothing is ever installed and nothing
is printed here.  :func:`install_hint` is attached to
:class:`~gh_please.exceptions.GhNotFoundError` and shown by ``doctor``.
"""

from __future__ import annotations

import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from gh_please.config import DEFAULT_GH_BINARY

GH_DOWNLOAD_URL = "https://cli.github.com/"

AUTH_STATUS_TIMEOUT = 10

_INSTALL_COMMANDS: dict[str, tuple[str, ...]] = {
    "windows": ("winget install --id GitHub.cli", "choco install gh"),
    "linux": ("sudo apt install gh", "sudo dnf install gh", "sudo pacman -S github-cli"),
    "darwin": ("brew install gh",),
}


@dataclass(frozen=True, slots=True)
class GhStatus:
    """Outcome of looking for gh on ``PATH``.

    ``install_commands`` is empty when gh was found.
    """

    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


def detect_gh(binary: str = DEFAULT_GH_BINARY) -> GhStatus:
    """Look *binary* up on ``PATH``; never raises."""
    located = shutil.which(binary)
    if located is None:
        return GhStatus(False, None, "not found", platform_install_commands())

    path = Path(located).resolve()
    return GhStatus(True, path, f"found at {path}", ())


def gh_auth_ok(binary: str = DEFAULT_GH_BINARY) -> bool:
    """Whether ``gh auth status`` succeeds.

    Any failure to run gh counts as not authenticated.
    """
    try:
        result = subprocess.run(
            [binary, "auth", "status"],
            capture_output=True,
            text=True,
            check=False,
            timeout=AUTH_STATUS_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return result.returncode == 0


def platform_install_commands() -> tuple[str, ...]:
    """Install commands for the running OS, or a download pointer."""
    system = platform.system().lower()
    return _INSTALL_COMMANDS.get(system, (f"Please install gh from {GH_DOWNLOAD_URL}",))


def install_hint() -> str:
    """Multi-line installation guidance for the current platform."""
    lines = ["Install the GitHub CLI using one of:"]
    lines.extend(f"  {cmd}" for cmd in platform_install_commands())
    lines.append(f"or download it from {GH_DOWNLOAD_URL}")
    return "\n".join(lines)
