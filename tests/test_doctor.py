"""Tests for the ``gh-please doctor`` command (cli/doctor.py).

gh detection and ``gh auth status`` are mocked: no system dependency,
no internet.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gh_please.cli import exit_codes
from gh_please.infra.gh_detector import GhStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _gh_found() -> GhStatus:
    return GhStatus(
        found=True,
        path=Path("/usr/bin/gh"),
        version_hint="found at /usr/bin/gh",
        install_commands=(),
    )


def _gh_missing(*commands: str) -> GhStatus:
    return GhStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=commands or ("sudo apt install gh",),
    )


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestLibraryCheck:
    def test_installed(self) -> None:
        from gh_please.cli.doctor import _library_check

        label, value, status = _library_check("jmespath", "jmespath", "jmespath")
        assert label == "jmespath"
        assert value != "NOT INSTALLED"
        assert "OK" in status

    @patch.dict("sys.modules", {"toon": None})
    def test_not_installed(self) -> None:
        from gh_please.cli.doctor import _library_check

        _label, value, status = _library_check("python-toon", "toon", "python-toon")
        assert value == "NOT INSTALLED"
        assert "FAIL" in status


class TestGhCheck:
    @patch("gh_please.cli.doctor.detect_gh")
    def test_found(self, mock_detect: MagicMock) -> None:
        from gh_please.cli.doctor import _gh_check

        mock_detect.return_value = _gh_found()
        label, value, status = _gh_check("gh")
        assert label == "gh"
        assert "gh" in value
        assert "OK" in status

    @patch("gh_please.cli.doctor.detect_gh")
    def test_missing_is_failure(self, mock_detect: MagicMock) -> None:
        from gh_please.cli.doctor import _gh_check

        mock_detect.return_value = _gh_missing()
        _label, _value, status = _gh_check("gh")
        assert "FAIL" in status


class TestGhAuthCheck:
    @patch("gh_please.cli.doctor.gh_auth_ok", return_value=False)
    def test_logged_out_is_warning(self, _mock_auth: MagicMock) -> None:
        from gh_please.cli.doctor import _gh_auth_check

        _label, value, status = _gh_auth_check("gh")
        assert value == "not logged in"
        assert "WARN" in status


class TestOsCheck:
    @patch("gh_please.cli.doctor.platform.machine", return_value="arm64")
    @patch("gh_please.cli.doctor.platform.release", return_value="23.4.0")
    @patch("gh_please.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from gh_please.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert value == "macOS 23.4.0 (arm64)"


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("gh_please.cli.doctor.gh_auth_ok", return_value=True)
    @patch("gh_please.cli.doctor.detect_gh")
    def test_all_pass_returns_success(self, mock_detect: MagicMock, _mock_auth: MagicMock) -> None:
        from gh_please.cli.doctor import run_doctor

        mock_detect.return_value = _gh_found()
        assert run_doctor() == exit_codes.SUCCESS

    @patch("gh_please.cli.doctor.gh_auth_ok", return_value=False)
    @patch("gh_please.cli.doctor.detect_gh")
    def test_logged_out_still_succeeds(self, mock_detect: MagicMock, _mock_auth: MagicMock) -> None:
        from gh_please.cli.doctor import run_doctor

        mock_detect.return_value = _gh_found()
        assert run_doctor() == exit_codes.SUCCESS

    @patch("gh_please.cli.doctor.gh_auth_ok")
    @patch("gh_please.cli.doctor.detect_gh")
    def test_gh_missing_fails_and_skips_auth(
        self, mock_detect: MagicMock, mock_auth: MagicMock
    ) -> None:
        from gh_please.cli.doctor import run_doctor

        mock_detect.return_value = _gh_missing()
        assert run_doctor() == exit_codes.GENERAL_ERROR
        mock_auth.assert_not_called()

    @patch("gh_please.cli.doctor.detect_gh")
    @patch.dict("sys.modules", {"rich": None, "rich.console": None, "rich.table": None})
    def test_plain_output_shows_install_guidance(
        self,
        mock_detect: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from gh_please.cli.doctor import run_doctor

        mock_detect.return_value = _gh_missing("brew install gh")
        _ = run_doctor()

        captured = capsys.readouterr()
        assert "gh-please doctor" in captured.err
        assert "brew install gh" in captured.err
        assert "FAIL" in captured.err
        assert captured.out == ""

    @patch("gh_please.cli.doctor.gh_auth_ok", return_value=True)
    @patch("gh_please.cli.doctor.detect_gh")
    def test_uses_configured_binary(self, mock_detect: MagicMock, mock_auth: MagicMock) -> None:
        from gh_please.cli.doctor import run_doctor
        from gh_please.config import Settings

        mock_detect.return_value = _gh_found()
        run_doctor(Settings(gh_binary="/opt/gh"))
        mock_detect.assert_called_with("/opt/gh")
        mock_auth.assert_called_once_with("/opt/gh")
