"""Configuration loading."""

import logging
from typing import Any

import yaml
from pydantic import ValidationError

from system_tz.config.models import SystemTzConfig
from system_tz.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads the optional YAML configuration file."""

    CURRENT_VERSION = "1.0.0"

    def __init__(self, path_resolver: PathResolver | None = None):
        """Initialize ConfigManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.config_path = self.path_resolver.get_config_path()

    def load(self) -> SystemTzConfig:
        """Load configuration, falling back to defaults when no file exists.

        Returns:
            SystemTzConfig: Loaded and validated configuration

        Raises:
            ValueError: If the file is not valid YAML or fails validation
        """
        if not self.config_path.exists():
            logger.debug("No configuration at %s, using defaults", self.config_path)
            return SystemTzConfig()

        raw_config = self._read_yaml()
        return self._create_config_object(raw_config)

    def _read_yaml(self) -> dict[str, Any]:
        """Read YAML config file.

        Returns:
            dict: Raw configuration dictionary
        """
        config_text = self.config_path.read_text()
        try:
            raw_config = yaml.safe_load(config_text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Configuration file {self.config_path} is not valid YAML: {e}") from e
        if not isinstance(raw_config, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")
        return raw_config

    def _create_config_object(self, raw_config: dict[str, Any]) -> SystemTzConfig:
        """Create SystemTzConfig object from dictionary.

        Args:
            raw_config: Configuration dictionary

        Returns:
            SystemTzConfig: Typed configuration object
        """
        expected_fields = set(SystemTzConfig.model_fields.keys())
        filtered_config = {k: v for k, v in raw_config.items() if k in expected_fields}

        unexpected_fields = set(raw_config.keys()) - expected_fields
        if unexpected_fields:
            logger.warning("Ignoring unexpected config fields: %s", sorted(unexpected_fields))

        try:
            return SystemTzConfig(**filtered_config)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}") from e
