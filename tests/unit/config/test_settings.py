"""
Unit tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from linkchecker.config.settings import ProbeSettings, Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "LOG_LEVEL",
        "PROBE__TIMEOUT_S",
        "PROBE__GET_FALLBACK",
        "PROBE_TIMEOUT_S",
        "SERVER__NAME",
        "SERVER_NAME",
        "LINKCHECKER_SERVER_NAME",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Defaults reproduce the unconfigured server."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.server.name == "link-checker"
        assert settings.server.version == "1.0.0"
        assert settings.probe.timeout_s == 10.0
        assert settings.probe.follow_redirects is True
        assert settings.probe.get_fallback is False

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProbeSettings(timeout_s=0)


class TestEnvironment:
    """Environment variables override defaults."""

    def test_nested_probe_settings(self, monkeypatch):
        monkeypatch.setenv("PROBE__TIMEOUT_S", "2.5")
        monkeypatch.setenv("PROBE__GET_FALLBACK", "true")

        settings = Settings(_env_file=None)

        assert settings.probe.timeout_s == 2.5
        assert settings.probe.get_fallback is True

    def test_prefixed_probe_settings(self, monkeypatch):
        monkeypatch.setenv("PROBE_TIMEOUT_S", "4")

        assert ProbeSettings().timeout_s == 4.0

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert Settings(_env_file=None).log_level == "DEBUG"


class TestLoadSettings:
    def test_load_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=WARNING\nSERVER__NAME=staging-checker\n")

        settings = load_settings(env_file=env_file)

        assert settings.log_level == "WARNING"
        assert settings.server.name == "staging-checker"


class TestServerName:
    """The advertised server name ignores unrelated host variables."""

    def test_host_server_name_is_ignored(self, monkeypatch):
        monkeypatch.setenv("SERVER_NAME", "www.example.org")

        assert Settings(_env_file=None).server.name == "link-checker"

    def test_nested_server_name(self, monkeypatch):
        monkeypatch.setenv("SERVER__NAME", "staging-checker")

        assert Settings(_env_file=None).server.name == "staging-checker"

    def test_prefixed_server_name(self, monkeypatch):
        monkeypatch.setenv("LINKCHECKER_SERVER_NAME", "prefixed-checker")

        assert Settings(_env_file=None).server.name == "prefixed-checker"
