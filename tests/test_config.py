"""
Tests for the configuration manager.
"""

import pytest

from holiday_provider.config.manager import ConfigManager
from holiday_provider.data.schemas import Config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove HOLIDAY_PROVIDER_* variables from the environment."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def config_file(tmp_path):
    """Write a config file and return its path."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "provider:\n"
        "  region: US\n"
        "  locale: fr_CA\n"
        "output:\n"
        "  format: json\n"
        "api:\n"
        "  port: 9000\n",
        encoding="utf-8",
    )
    return path


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_bundled_defaults(self):
        config = ConfigManager().load_config()

        assert config.default_region == "CA"
        assert config.default_locale == "en_US"
        assert config.output_format == "console"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert config == Config()

    def test_load_yaml(self, config_file):
        config = ConfigManager(str(config_file)).load_config()

        assert config.default_region == "US"
        assert config.default_locale == "fr_CA"
        assert config.output_format == "json"
        assert config.api_port == 9000
        # Not in the file
        assert config.output_directory == "results"

    def test_env_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("HOLIDAY_PROVIDER_REGION", "CA")
        monkeypatch.setenv("HOLIDAY_PROVIDER_API_PORT", "8123")

        config = ConfigManager(str(config_file)).load_config()

        assert config.default_region == "CA"
        assert config.api_port == 8123

    def test_unconvertible_env_value_ignored(self, config_file, monkeypatch):
        monkeypatch.setenv("HOLIDAY_PROVIDER_API_PORT", "not-a-port")

        config = ConfigManager(str(config_file)).load_config()

        assert config.api_port == 9000

    def test_invalid_value(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOLIDAY_PROVIDER_OUTPUT_FORMAT", "xml")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(str(tmp_path / "missing.yaml")).load_config()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("provider: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            ConfigManager(str(path)).load_config()

    def test_save_config(self, tmp_path):
        path = tmp_path / "nested" / "settings.yaml"
        manager = ConfigManager(str(path))

        manager.save_config(Config(default_region="US", log_level="debug"))

        config = manager.load_config()
        assert config.default_region == "US"
        assert config.log_level == "DEBUG"
