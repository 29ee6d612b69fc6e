"""Mutation-command detection.

gh commands that change remote state print a confirmation message
instead of data, and reject ``--json``.  Detecting them lets the
partitioner skip structured output when the user did not ask for it.
"""

from __future__ import annotations

from collections.abc import Sequence, Set

MUTATION_VERBS: frozenset[str] = frozenset(
    {
        "create",
        "edit",
        "delete",
        "close",
        "reopen",
        "merge",
        "comment",
        "lock",
        "unlock",
        "pin",
        "unpin",
        "transfer",
        "approve",
        "review",
        "dismiss",
        "add-assignee",
        "remove-assignee",
        "add-label",
        "remove-label",
        "add-project",
        "remove-project",
        # variable set, secret set
        "set",
        # codespace stop / rebuild
        "stop",
        "rebuild",
        # workflow enable / disable / run
        "enable",
        "disable",
        "run",
        # run cancel / rerun / watch
        "cancel",
        "rerun",
        "watch",
    }
)
"""Verbs (and verb-like long flags) that never support ``--json``."""

_RUN_GROUP = "run"


def is_mutation_command(
    clean_args: Sequence[str],
    verbs: Set[str] = MUTATION_VERBS,
) -> bool:
    """Return ``True`` when *clean_args* names a state-changing command.

    Examples
    --------
    >>> is_mutation_command(["issue", "edit", "123"])
    True
    >>> is_mutation_command(["issue", "list", "--author", "create"])
    False
    >>> is_mutation_command(["workflow", "run", "test"])
    True
    >>> is_mutation_command(["run", "list"])
    False
    >>> is_mutation_command(["issue", "view", "1", "--add-label", "bug"])
    True
    """
    if not clean_args:
        return False

    # ``run`` in first position is the command group (run list, run view),
    # not the ``workflow run`` verb.
    if clean_args[0] == _RUN_GROUP:
        return len(clean_args) > 1 and clean_args[1] in verbs

    if any(arg in verbs for arg in clean_args[:2]):
        return True

    # Flag values are never matched, only the long-flag names themselves.
    return any(
        arg.startswith("--") and arg[2:] in verbs
        for arg in clean_args
    )
