"""System domain package.

This package contains host-level helpers:
- PathResolver: Path resolution and environment overrides
- StructlogConfigurator: Structured logging configuration
"""

from system_tz.system import structlog_configurator
from system_tz.system.path_resolver import PathResolver

__all__ = [
    "PathResolver",
    "structlog_configurator",
]
