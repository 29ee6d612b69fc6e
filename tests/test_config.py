"""Tests for environment-derived settings (config.py)."""

from __future__ import annotations

import pytest

from gh_please.config import DEFAULT_GH_BINARY, Settings


class TestSettingsFromEnv:
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings.debug is False
        assert settings.gh_binary == DEFAULT_GH_BINARY

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " on "])
    def test_debug_truthy(self, value: str) -> None:
        assert Settings.from_env({"DEBUG": value}).debug is True

    @pytest.mark.parametrize("value", ["", "0", "false", "off", "verbose"])
    def test_debug_falsy(self, value: str) -> None:
        assert Settings.from_env({"DEBUG": value}).debug is False

    def test_namespaced_debug(self) -> None:
        assert Settings.from_env({"GH_PLEASE_DEBUG": "1"}).debug is True

    def test_gh_path(self) -> None:
        settings = Settings.from_env({"GH_PLEASE_GH_PATH": "/opt/gh/bin/gh"})
        assert settings.gh_binary == "/opt/gh/bin/gh"

    def test_blank_gh_path_falls_back(self) -> None:
        assert Settings.from_env({"GH_PLEASE_GH_PATH": "  "}).gh_binary == DEFAULT_GH_BINARY

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GH_PLEASE_DEBUG", "yes")
        assert Settings.from_env().debug is True

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Settings().debug = True  # type: ignore[misc]
