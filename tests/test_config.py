"""
Tests for config loading and validation
"""
import os
from unittest.mock import patch

import pytest

from dayofweek.config import Config
from dayofweek.exceptions import ConfigError

ENV_KEYS = ("DAYOFWEEK_LOG_LEVEL", "DAYOFWEEK_LOG_FILE", "DAYOFWEEK_BANNER")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove config-related environment variables"""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfigModel:
    """Test field defaults and validation"""

    def test_defaults(self):
        config = Config()
        assert config.log_level == "WARNING"
        assert config.log_file is False
        assert config.banner is True

    def test_log_level_normalized(self):
        assert Config(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            Config(log_level="VERBOSE")

    def test_with_overrides_skips_none(self):
        config = Config(log_level="INFO")
        assert config.with_overrides(log_level=None) is config

    def test_with_overrides_applies_values(self):
        config = Config().with_overrides(log_level="error", banner=False)
        assert config.log_level == "ERROR"
        assert config.banner is False

    def test_with_overrides_invalid_raises_config_error(self):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            Config().with_overrides(log_level="LOUD")


class TestConfigLoad:
    """Test Config.load() functionality"""

    def test_load_without_path_uses_defaults(self, clean_env):
        config = Config.load()
        assert config == Config()

    def test_load_missing_file_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            Config.load("/nonexistent/config.yaml")

    def test_load_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ConfigError, match="Failed to parse"):
            Config.load(str(path))

    def test_load_non_mapping_raises(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigError, match="Invalid configuration"):
            Config.load(str(path))

    def test_load_empty_file_uses_defaults(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert Config.load(str(path)) == Config()

    def test_load_valid_config(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: info\nlog_file: false\nbanner: false\n")

        config = Config.load(str(path))
        assert config.log_level == "INFO"
        assert config.banner is False

    def test_invalid_values_raise(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: LOUD\n")

        with pytest.raises(ConfigError, match="Invalid configuration"):
            Config.load(str(path))

    def test_env_var_overrides_config_file(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: INFO\nbanner: true\n")

        with patch.dict(os.environ, {"DAYOFWEEK_LOG_LEVEL": "ERROR", "DAYOFWEEK_BANNER": "false"}):
            config = Config.load(str(path))

        assert config.log_level == "ERROR"
        assert config.banner is False

    def test_env_var_applies_without_file(self, clean_env):
        with patch.dict(os.environ, {"DAYOFWEEK_LOG_FILE": "true"}):
            config = Config.load()

        assert config.log_file is True
