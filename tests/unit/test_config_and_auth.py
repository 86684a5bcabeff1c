"""Unit tests for configuration and connection setup."""

import json
from unittest.mock import MagicMock

import pytest
import yaml

from gdp.sdk import auth, config


class TestConfig:

    def test_defaults_without_file(self, isolated_config):
        loaded = config.load_config()
        assert loaded == config.DEFAULT_CONFIG
        loaded["auth"]["mode"] = "adc"
        assert config.DEFAULT_CONFIG["auth"]["mode"] is None

    def test_set_and_get_value(self, isolated_config):
        config.set_config_value("auth.mode", "token")
        config.set_config_value("auth.token_file", "/tmp/token.json")

        assert config.get_config_value("auth.mode") == "token"
        with open(isolated_config / "config.yaml") as f:
            saved = yaml.safe_load(f)
        assert saved["auth"] == {"mode": "token", "token_file": "/tmp/token.json"}

    def test_missing_key_returns_default(self, isolated_config):
        assert config.get_config_value("nope.nothing", "fallback") == "fallback"
        assert config.get_config_value("auth.mode", "fallback") == "fallback"

    def test_partial_file_is_merged(self, isolated_config):
        with open(isolated_config / "config.yaml", "w") as f:
            yaml.dump({"auth": {"mode": "adc"}}, f)

        loaded = config.load_config()
        assert loaded["auth"] == {"mode": "adc", "token_file": None}
        assert loaded["projects"] == {"file": None}

    def test_non_mapping_file_uses_defaults(self, isolated_config):
        (isolated_config / "config.yaml").write_text("- adc\n")
        assert config.load_config() == config.DEFAULT_CONFIG

    def test_set_value_replaces_scalar_section(self, isolated_config):
        (isolated_config / "config.yaml").write_text("projects: old\n")

        config.set_config_value("projects.file", "/tmp/projects.yaml")

        assert config.get_config_value("projects.file") == "/tmp/projects.yaml"


class TestGetCredentials:

    def test_no_configuration(self, isolated_config):
        with pytest.raises(ValueError, match="No credentials configured"):
            auth.get_credentials()

    def test_adc_flag(self, isolated_config, monkeypatch):
        mock_creds = MagicMock()
        monkeypatch.setattr("google.auth.default", lambda scopes=None: (mock_creds, "my-project"))

        creds, source = auth.get_credentials(use_adc=True)

        assert creds is mock_creds
        assert "from flag" in source
        assert "my-project" in source

    def test_adc_from_config(self, isolated_config, monkeypatch):
        config.set_config_value("auth.mode", "adc")
        mock_creds = MagicMock()
        monkeypatch.setattr("google.auth.default", lambda scopes=None: (mock_creds, None))

        creds, source = auth.get_credentials()

        assert creds is mock_creds
        assert source == "Application Default Credentials (from config)"

    def test_token_mode_without_file(self, isolated_config):
        config.set_config_value("auth.mode", "token")
        with pytest.raises(ValueError, match="token_file"):
            auth.get_credentials()

    def test_missing_token_file(self, isolated_config, tmp_path):
        with pytest.raises(FileNotFoundError):
            auth.get_credentials(token_file=str(tmp_path / "absent.json"))

    def test_token_file(self, isolated_config, tmp_path):
        token_path = tmp_path / "token.json"
        with open(token_path, "w") as f:
            json.dump({
                "token": "fake_token",
                "refresh_token": "fake_refresh",
                "client_id": "test_client_id",
                "client_secret": "test_secret",
            }, f)

        creds, source = auth.get_credentials(token_file=str(token_path))

        assert creds.refresh_token == "fake_refresh"
        assert str(token_path) in source


def test_get_drive_service_builds_v3(monkeypatch):
    built = {}

    def fake_build(name, version, credentials=None, cache_discovery=True):
        built.update(name=name, version=version, credentials=credentials)
        return "service"

    monkeypatch.setattr(auth, "build", fake_build)
    creds = MagicMock()

    assert auth.get_drive_service(creds) == "service"
    assert built == {"name": "drive", "version": "v3", "credentials": creds}
