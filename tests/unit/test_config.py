"""Tests for configuration loading."""

import pytest
import yaml

from modelruntime.config import (
    DEFAULT_CREWHUB_BASE_URL,
    ProviderSettings,
    RuntimeConfig,
    load_config,
    settings_from_env,
)
from modelruntime.exceptions import ConfigError


def write_config(tmp_path, data) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data))
    return str(path)


class TestProviderSettings:
    """Test provider settings defaults and validation."""

    def test_defaults(self):
        settings = ProviderSettings()

        assert settings.base_url == DEFAULT_CREWHUB_BASE_URL
        assert settings.stream_by_default is True
        assert settings.num_chunks == 10
        assert settings.chunk_delay == 0.05

    def test_trailing_slash_stripped(self):
        assert ProviderSettings(base_url="http://local/v1/").base_url == "http://local/v1"

    @pytest.mark.parametrize("kwargs", [
        {"num_chunks": 0},
        {"chunk_delay": -1},
        {"timeout": 0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigError):
            ProviderSettings(**kwargs)


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "absent.yaml"))

        assert config.providers == {}
        assert config.general.log_level == "INFO"

    def test_provider_section(self, tmp_path):
        path = write_config(tmp_path, {
            "providers": {
                "crewhub": {
                    "api_key": "ch-123",
                    "base_url": "https://staging.crewhub.ai/v1",
                    "num_chunks": 4,
                    "chunk_delay": 0,
                },
            },
            "general_settings": {"log_level": "DEBUG"},
        })

        config = load_config(path)
        settings = config.providers["crewhub"]

        assert settings.api_key == "ch-123"
        assert settings.base_url == "https://staging.crewhub.ai/v1"
        assert settings.num_chunks == 4
        assert settings.chunk_delay == 0
        assert config.general.log_level == "DEBUG"

    @pytest.mark.parametrize("reference", ["os.environ/MY_CREWHUB_KEY", "${MY_CREWHUB_KEY}"])
    def test_env_references(self, tmp_path, monkeypatch, reference):
        monkeypatch.setenv("MY_CREWHUB_KEY", "ch-from-env")
        path = write_config(tmp_path, {"providers": {"crewhub": {"api_key": reference}}})

        assert load_config(path).providers["crewhub"].api_key == "ch-from-env"

    def test_unknown_setting_rejected(self, tmp_path):
        path = write_config(tmp_path, {"providers": {"crewhub": {"api_kee": "typo"}}})

        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigError):
            load_config(str(path))


class TestEnvironmentFallback:
    """Test environment-based settings."""

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("CREWHUB_API_KEY", "ch-env")
        monkeypatch.setenv("CREWHUB_BASE_URL", "http://crewhub.local/v1")

        settings = settings_from_env("crewhub")

        assert settings.api_key == "ch-env"
        assert settings.base_url == "http://crewhub.local/v1"

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("CREWHUB_API_KEY", "ch-env")
        assert settings_from_env("crewhub", api_key="ch-explicit").api_key == "ch-explicit"

    def test_runtime_config_builds_missing_provider(self, monkeypatch):
        monkeypatch.setenv("CREWHUB_API_KEY", "ch-env")
        config = RuntimeConfig()

        settings = config.get_provider_settings("crewhub")

        assert settings.api_key == "ch-env"
        assert config.providers["crewhub"] is settings
