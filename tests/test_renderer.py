"""Tests for JSON/TOON serialisation (infra/renderer.py).

TOON output itself belongs to python-toon; these tests only check that
it is called with the tab-delimited options.
"""

from __future__ import annotations

import json
import sys
from unittest.mock import MagicMock, patch

import pytest

from gh_please.core.models import OutputFormat
from gh_please.exceptions import EnvironmentError
from gh_please.infra.renderer import (
    TOON_OPTIONS,
    encode_json,
    filter_fields,
    parse_fields,
    render,
)

ISSUES = [
    {"number": 1, "title": "Crash on start", "state": "OPEN"},
    {"number": 2, "title": "Typo in README", "state": "CLOSED"},
]


# ---------------------------------------------------------------------------
# Field selection
# ---------------------------------------------------------------------------

class TestParseFields:
    def test_none(self) -> None:
        assert parse_fields(None) is None

    def test_comma_string(self) -> None:
        assert parse_fields("number, title ,") == ["number", "title"]

    def test_sequence(self) -> None:
        assert parse_fields([" number", "", "state"]) == ["number", "state"]

    def test_empty_means_all(self) -> None:
        assert parse_fields(" , ") is None


class TestFilterFields:
    def test_list_of_objects(self) -> None:
        assert filter_fields(ISSUES, ["number"]) == [{"number": 1}, {"number": 2}]

    def test_single_object(self) -> None:
        assert filter_fields(ISSUES[0], ["title", "missing"]) == {"title": "Crash on start"}

    def test_scalars_untouched(self) -> None:
        assert filter_fields([1, "two"], ["number"]) == [1, "two"]

    def test_no_fields(self) -> None:
        assert filter_fields(ISSUES, None) is ISSUES


# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------

class TestJson:
    def test_pretty_printed(self) -> None:
        text = encode_json({"a": [1, 2]})
        assert text == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_non_ascii_kept(self) -> None:
        assert encode_json({"title": "Überprüfung 🚀"}) == '{\n  "title": "Überprüfung 🚀"\n}'

    def test_render_json_round_trips(self) -> None:
        assert json.loads(render(ISSUES, OutputFormat.JSON)) == ISSUES

    def test_render_json_with_fields(self) -> None:
        text = render(ISSUES, OutputFormat.JSON, fields="number")
        assert json.loads(text) == [{"number": 1}, {"number": 2}]


class TestToon:
    @patch("toon.encode")
    def test_tab_delimited_options(self, mock_encode: MagicMock) -> None:
        mock_encode.return_value = "[2\t]{number\ttitle\tstate}:"
        text = render(ISSUES, OutputFormat.STRUCTURED)

        assert text == "[2\t]{number\ttitle\tstate}:"
        mock_encode.assert_called_once_with(ISSUES, TOON_OPTIONS)
        assert TOON_OPTIONS["delimiter"] == "\t"

    def test_python_toon_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "toon", None)
        with pytest.raises(EnvironmentError, match="python-toon is not installed") as exc_info:
            render(ISSUES, OutputFormat.STRUCTURED)
        assert exc_info.value.hint is not None
        assert "--format json" in exc_info.value.hint


@pytest.mark.parametrize("fmt", [OutputFormat.NONE, OutputFormat.LEGACY])
def test_native_formats_rejected(fmt: OutputFormat) -> None:
    with pytest.raises(ValueError):
        render(ISSUES, fmt)
