"""Serialise query results as JSON or TOON text.

This module is the **only** place in the codebase that imports the
TOON encoder (``python-toon``).  TOON (Token-Oriented Object Notation)
is the default because it is far cheaper in LLM tokens than JSON; a
tab delimiter is used since a tab is a single token in common
tokenizers.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from gh_please.core.models import OutputFormat
from gh_please.exceptions import EnvironmentError

TOON_OPTIONS: dict[str, Any] = {
    "delimiter": "\t",
    "indent": 2,
}


# ---------------------------------------------------------------------------
# Field selection (pure)
# ---------------------------------------------------------------------------

def parse_fields(fields: str | Sequence[str] | None) -> list[str] | None:
    """Normalise a field selection.

    ``"number, title"`` and ``["number", "title"]`` both give
    ``["number", "title"]``; ``None`` (or nothing left after trimming)
    means every field.
    """
    if fields is None:
        return None
    items = fields.split(",") if isinstance(fields, str) else list(fields)
    cleaned = [item.strip() for item in items if item.strip()]
    return cleaned or None


def filter_fields(data: Any, fields: Sequence[str] | None) -> Any:
    """Keep only *fields* of an object, or of every object in a list.

    Anything that is not a dict (or a list of dicts) is returned as is.
    """
    if not fields:
        return data

    def pick(item: Any) -> Any:
        if not isinstance(item, dict):
            return item
        return {key: item[key] for key in fields if key in item}

    if isinstance(data, list):
        return [pick(item) for item in data]
    return pick(data)


# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------

def encode_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def encode_toon(data: Any) -> str:
    """Encode *data* as tab-delimited TOON.

    Raises
    ------
    EnvironmentError
        If python-toon is not installed.
    """
    try:
        from toon import encode
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "python-toon is not installed. Install with: pip install python-toon",
            hint="Or request JSON instead: --format json",
        ) from exc
    return encode(data, TOON_OPTIONS)


def render(
    data: Any,
    fmt: OutputFormat,
    fields: str | Sequence[str] | None = None,
) -> str:
    """Return *data* as printable text in *fmt*.

    Satisfies the :class:`~gh_please.core.protocols.Renderer` protocol.
    Only :attr:`OutputFormat.JSON` and :attr:`OutputFormat.STRUCTURED`
    carry data; any other format is a programming error.
    """
    selected = filter_fields(data, parse_fields(fields))
    if fmt is OutputFormat.STRUCTURED:
        return encode_toon(selected)
    if fmt is OutputFormat.JSON:
        return encode_json(selected)
    raise ValueError(f"{fmt.value!r} output carries no structured data")
