"""system-tz configuration package.

This package provides configuration management with:
- Pydantic models for logging and dataset settings
- YAML parsing with defaults when no file is present
"""

from .manager import ConfigManager
from .models import SystemTzConfig

__all__ = [
    "ConfigManager",
    "SystemTzConfig",
]
