"""Unit tests for ConfigManager."""

import json

from smart_home.utils.config_manager import ConfigManager


class TestConfigManager:
    """Tests for loading, merging and updating configuration."""

    def test_missing_file_is_created_with_defaults(self, tmp_path):
        """Test a missing config file is written from DEFAULT_CONFIG."""
        config_file = tmp_path / "config" / "config.json"
        config = ConfigManager(config_file)

        assert config_file.exists()
        assert json.loads(config_file.read_text(encoding="utf-8")) == ConfigManager.DEFAULT_CONFIG
        assert config.get_config("LOGGING.LEVEL") == "INFO"

    def test_custom_values_are_merged_over_defaults(self, tmp_path):
        """Test nested custom values override only what they name."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"LOGGING": {"LEVEL": "DEBUG"}}), encoding="utf-8")

        config = ConfigManager(config_file)

        assert config.get_config("LOGGING.LEVEL") == "DEBUG"
        assert config.get_config("LOGGING.BACKUP_COUNT") == 30

    def test_invalid_json_falls_back_to_defaults(self, tmp_path):
        """Test an unreadable file leaves the defaults in place."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json", encoding="utf-8")

        config = ConfigManager(config_file)

        assert config.get_config("LOGGING.LOG_DIR") == "logs"

    def test_get_config_default_for_missing_path(self, tmp_path):
        """Test a missing path returns the supplied default."""
        config = ConfigManager(tmp_path / "config.json")
        assert config.get_config("LOGGING.MISSING", "fallback") == "fallback"
        assert config.get_config("LOGGING.LEVEL.DEEPER") is None

    def test_update_config_persists(self, tmp_path):
        """Test update_config writes nested values to disk."""
        config_file = tmp_path / "config.json"
        config = ConfigManager(config_file)

        assert config.update_config("LOGGING.LEVEL", "WARNING") is True
        assert config.update_config("EXTRA.NESTED.VALUE", 1) is True

        reloaded = ConfigManager(config_file)
        assert reloaded.get_config("LOGGING.LEVEL") == "WARNING"
        assert reloaded.get_config("EXTRA.NESTED.VALUE") == 1

    def test_defaults_are_not_mutated(self, tmp_path):
        """Test updating one manager never changes DEFAULT_CONFIG."""
        config = ConfigManager(tmp_path / "config.json")
        config.update_config("LOGGING.LEVEL", "ERROR")
        assert ConfigManager.DEFAULT_CONFIG["LOGGING"]["LEVEL"] == "INFO"

    def test_get_instance_is_shared(self, tmp_path, reset_config_manager):
        """Test get_instance returns the same manager on later calls."""
        first = ConfigManager.get_instance(tmp_path / "config.json")
        second = ConfigManager.get_instance()
        assert first is second
