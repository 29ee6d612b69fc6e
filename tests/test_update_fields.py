"""Tests for ``gh-please update-fields`` (cli/update_fields.py).

gh is replaced by :class:`conftest.FakeRunner` or a mocked
:class:`GhCliRunner`.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from conftest import FakeRunner
from gh_please.cli import exit_codes
from gh_please.cli.update_fields import (
    PROBES,
    FieldProbe,
    extract_fields,
    gh_version,
    run_update_fields,
)
from gh_please.core.models import ExecutionResult
from gh_please.exceptions import FieldExtractionError

PROBE = FieldProbe("issue", "view", ("1", "--repo", "cli/cli"))

LISTING = (
    'Unknown JSON field: "invalidfield"\n'
    "Available fields:\n"
    "  author\n"
    "  body\n"
    "  number\n"
    "  projectCards\n"
    "  title\n"
)

OK = ExecutionResult("{}", "", 0)
DEPRECATED = ExecutionResult(
    "",
    "GraphQL: Projects (classic) is being deprecated in favor of the new Projects experience",
    1,
)


class TestProbes:
    def test_keys(self) -> None:
        assert [probe.key for probe in PROBES] == [
            "issue view",
            "pr view",
            "repo view",
            "release view",
        ]


class TestExtractFields:
    def test_all_fields_valid(self) -> None:
        runner = FakeRunner(ExecutionResult("", LISTING, 1), OK)
        fields = extract_fields(runner, PROBE)

        assert fields == ["author", "body", "number", "projectCards", "title"]
        assert runner.calls[0] == ["issue", "view", "1", "--repo", "cli/cli", "--json", "invalidfield"]
        assert runner.calls[1][-1] == "author,body,number,projectCards,title"

    def test_deprecated_field_filtered(self) -> None:
        class Runner(FakeRunner):
            def run(self, args):  # type: ignore[no-untyped-def]
                self.calls.append(list(args))
                if args[-1] == "invalidfield":
                    return ExecutionResult("", LISTING, 1)
                if "projectCards" in args[-1].split(","):
                    return DEPRECATED
                return OK

        fields = extract_fields(Runner(), PROBE)
        assert fields == ["author", "body", "number", "title"]

    def test_no_listing_raises_with_upgrade_hint(self) -> None:
        runner = FakeRunner(ExecutionResult("", "unknown command \"view\"", 1))
        with pytest.raises(FieldExtractionError, match="issue view") as exc_info:
            extract_fields(runner, PROBE)
        hint = exc_info.value.hint or ""
        assert 'unknown command "view"' in hint
        assert "https://github.com/cli/cli#installation" in hint


class TestGhVersion:
    def test_parsed(self) -> None:
        runner = FakeRunner(ExecutionResult("gh version 2.63.2 (2024-12-05)\nhttps://github.com/cli/cli/releases/tag/v2.63.2\n", "", 0))
        assert gh_version(runner) == "2.63.2"

    def test_unknown(self) -> None:
        assert gh_version(FakeRunner(ExecutionResult("", "", 1))) == "unknown"


class TestRunUpdateFields:
    def _fake_run(self, args):  # type: ignore[no-untyped-def]
        if args == ["--version"]:
            return ExecutionResult("gh version 2.63.2 (2024-12-05)\n", "", 0)
        if args[-1] == "invalidfield":
            return ExecutionResult("", LISTING, 1)
        return OK

    def test_writes_module(self, tmp_path: Path) -> None:
        target = tmp_path / "gh_fields.py"
        with patch("gh_please.cli.update_fields.GhCliRunner") as runner_cls:
            runner_cls.return_value.run.side_effect = self._fake_run
            code = run_update_fields(target)

        assert code == exit_codes.SUCCESS
        source = target.read_text(encoding="utf-8")
        assert "# gh CLI version: 2.63.2" in source
        assert '"release view": "author,body,number,projectCards,title",' in source

    def test_stdout_when_no_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("gh_please.cli.update_fields.GhCliRunner") as runner_cls:
            runner_cls.return_value.run.side_effect = self._fake_run
            run_update_fields(None)

        assert "GH_JSON_FIELDS" in capsys.readouterr().out
