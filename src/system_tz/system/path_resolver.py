import os
from pathlib import Path


class PathResolver:
    """Central authority for file path resolution in system-tz.

    Uses environment variables for configuration with sensible defaults.
    """

    def __init__(self) -> None:
        """Initialize PathResolver with environment-based configuration."""
        self.package_dir = Path(__file__).resolve().parent.parent
        self.config_dir = Path(
            os.getenv("SYSTEM_TZ_CONFIG_DIR", Path.home() / ".config" / "system-tz")
        )

    def get_config_path(self) -> Path:
        """Get the path to the configuration file.

        Checks SYSTEM_TZ_CONFIG environment variable first, then falls back to default.
        """
        config_path = os.getenv("SYSTEM_TZ_CONFIG")
        if config_path:
            return Path(config_path)

        return self.config_dir / "config.yaml"

    def get_zones_module_path(self) -> Path:
        """Get the path of the generated Windows zones module inside the package."""
        return self.package_dir / "windows" / "zones_data.py"

    def get_templates_dir(self) -> Path:
        """Get the directory holding code generation templates."""
        return self.package_dir / "cldr" / "templates"
