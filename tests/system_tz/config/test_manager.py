"""Tests for configuration loading."""

import logging
from unittest.mock import MagicMock

import pytest

from system_tz.config import ConfigManager, SystemTzConfig
from system_tz.config.models import CLDR_WINDOWS_ZONES_URL
from system_tz.system.path_resolver import PathResolver


@pytest.fixture
def config_path(tmp_path):
    """Path of a configuration file in a temporary directory."""
    return tmp_path / "config.yaml"


@pytest.fixture
def manager(config_path):
    """Create a ConfigManager reading from config_path."""
    path_resolver = MagicMock(spec=PathResolver)
    path_resolver.get_config_path.return_value = config_path
    return ConfigManager(path_resolver)


class TestConfigManager:
    """Test ConfigManager.load."""

    def test_defaults_without_file(self, manager):
        """Should return the default configuration when no file exists."""
        config = manager.load()

        assert config == SystemTzConfig()
        assert config.dataset.source_url == CLDR_WINDOWS_ZONES_URL
        assert config.logging.level == "INFO"

    def test_reads_file(self, manager, config_path):
        """Should read settings from the YAML file."""
        config_path.write_text(
            "logging:\n"
            "  level: debug\n"
            "  json_logs: true\n"
            "dataset:\n"
            "  source_url: https://mirror.example.com/windowsZones.xml\n"
            "  timeout: 5\n"
            "  expected_type_version: 2021a\n"
        )

        config = manager.load()

        assert config.logging.level == "DEBUG"
        assert config.logging.json_logs is True
        assert config.dataset.source_url == "https://mirror.example.com/windowsZones.xml"
        assert config.dataset.timeout == 5.0
        assert config.dataset.expected_type_version == "2021a"

    def test_empty_file(self, manager, config_path):
        """Should treat an empty file as defaults."""
        config_path.write_text("")

        assert manager.load() == SystemTzConfig()

    def test_ignores_unexpected_fields(self, manager, config_path, caplog):
        """Should drop unknown top-level fields with a warning."""
        config_path.write_text("site_name: Home\nlogging:\n  level: WARNING\n")

        with caplog.at_level(logging.WARNING, logger="system_tz.config.manager"):
            config = manager.load()

        assert config.logging.level == "WARNING"
        assert "site_name" in caplog.text

    def test_invalid_yaml(self, manager, config_path):
        """Should raise ValueError for malformed YAML."""
        config_path.write_text("logging: [unclosed\n")

        with pytest.raises(ValueError, match="not valid YAML"):
            manager.load()

    def test_not_a_mapping(self, manager, config_path):
        """Should raise ValueError when the document is not a mapping."""
        config_path.write_text("- one\n- two\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            manager.load()

    @pytest.mark.parametrize(
        "content",
        [
            "logging:\n  level: LOUD\n",
            "dataset:\n  timeout: 0\n",
            "dataset:\n  source_url: ftp://example.com/windowsZones.xml\n",
        ],
    )
    def test_validation_failure(self, manager, config_path, content):
        """Should raise ValueError for values that fail validation."""
        config_path.write_text(content)

        with pytest.raises(ValueError, match="Configuration validation failed"):
            manager.load()

    def test_uses_environment_override(self, config_path, monkeypatch):
        """Should read the file named by SYSTEM_TZ_CONFIG."""
        config_path.write_text("logging:\n  level: ERROR\n")
        monkeypatch.setenv("SYSTEM_TZ_CONFIG", str(config_path))

        manager = ConfigManager()

        assert manager.config_path == config_path
        assert manager.load().logging.level == "ERROR"
