"""Tests for detector settings."""

import pytest
import yaml

from specscout.core.config import ENV_VARS, DetectorSettings, load_settings
from specscout.core.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's SPECSCOUT_* variables out of these tests."""
    for env_var in ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)


class TestDetectorSettings:
    def test_defaults(self):
        settings = DetectorSettings()

        assert settings.discovery_timeout == 10.0
        assert settings.health_timeout == 5.0
        assert settings.max_body_bytes == 5 * 1024 * 1024
        assert settings.user_agent.startswith("specscout/")

    @pytest.mark.parametrize("field", ["discovery_timeout", "health_timeout", "max_body_bytes"])
    def test_rejects_non_positive(self, field):
        with pytest.raises(ValueError, match="must be positive"):
            DetectorSettings(**{field: 0})


class TestLoadSettings:
    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "specscout.yaml"
        path.write_text(
            yaml.dump(
                {
                    "detector": {
                        "discovery_timeout": 4,
                        "user_agent": "acme-bot/1.0",
                        "unknown_key": True,
                    }
                }
            )
        )
        return path

    def test_no_sources_gives_defaults(self):
        assert load_settings() == DetectorSettings()

    def test_file_values(self, config_file):
        settings = load_settings(config_file)

        assert settings.discovery_timeout == 4.0
        assert settings.user_agent == "acme-bot/1.0"
        assert settings.health_timeout == 5.0

    def test_env_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("SPECSCOUT_DISCOVERY_TIMEOUT", "2.5")
        monkeypatch.setenv("SPECSCOUT_MAX_BODY_BYTES", "1024")

        settings = load_settings(config_file)

        assert settings.discovery_timeout == 2.5
        assert settings.max_body_bytes == 1024
        assert settings.user_agent == "acme-bot/1.0"

    def test_overrides_win(self, config_file, monkeypatch):
        monkeypatch.setenv("SPECSCOUT_DISCOVERY_TIMEOUT", "2.5")

        settings = load_settings(config_file, {"discovery_timeout": 1, "health_timeout": None})

        assert settings.discovery_timeout == 1.0
        assert settings.health_timeout == 5.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("detector: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_detector_section_must_be_mapping(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("detector: 5\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_settings(path)

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("SPECSCOUT_HEALTH_TIMEOUT", "soon")

        with pytest.raises(ConfigError, match="Invalid detector settings"):
            load_settings()

    def test_negative_override(self):
        with pytest.raises(ConfigError):
            load_settings(overrides={"discovery_timeout": -1})
