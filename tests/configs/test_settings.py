"""Tests for process settings."""

import pytest

from infra.configs.settings import InfraSettings, get_settings


class TestInfraSettings:
    """Tests for INFRA_* environment variable loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Without variables, environment is unset and log level is INFO."""
        monkeypatch.chdir(tmp_path)
        for var in ("INFRA_ENVIRONMENT", "INFRA_LOG_LEVEL", "INFRA_PROJECT"):
            monkeypatch.delenv(var, raising=False)

        settings = InfraSettings()

        assert settings.environment is None
        assert settings.log_level == "INFO"
        assert settings.project == "my-app"

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """INFRA_ prefixed variables populate fields."""
        monkeypatch.setenv("INFRA_ENVIRONMENT", "staging")
        monkeypatch.setenv("INFRA_LOG_LEVEL", "DEBUG")

        settings = InfraSettings()

        assert settings.environment == "staging"
        assert settings.log_level == "DEBUG"

    def test_reads_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """A .env file in the working directory is honoured."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("INFRA_PROJECT", raising=False)
        (tmp_path / ".env").write_text("INFRA_PROJECT=other-app\n")

        assert InfraSettings().project == "other-app"

    def test_get_settings_cached(self) -> None:
        """get_settings returns a singleton."""
        assert get_settings() is get_settings()
