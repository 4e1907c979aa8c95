"""Configuration models for system-tz.

This module contains the Pydantic models read from the optional YAML configuration.
"""

from pydantic import BaseModel, Field, field_validator

# Pinned to a CLDR release tag so a rebuild only changes data when the tag is bumped
CLDR_WINDOWS_ZONES_URL = (
    "https://raw.githubusercontent.com/unicode-org/cldr/"
    "release-46/common/supplemental/windowsZones.xml"
)


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool | None = None  # None = auto-detect based on environment
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "system-tz"})

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level '{v}'")
        return level


class DatasetConfig(BaseModel):
    """Where and how the CLDR windowsZones dataset is fetched."""

    source_url: str = CLDR_WINDOWS_ZONES_URL
    timeout: float = 30.0  # Seconds before the download is abandoned
    expected_type_version: str | None = None  # Fail the build on any other tz data version

    @field_validator("source_url")
    @classmethod
    def validate_source_url(cls, v: str) -> str:
        """Only http(s) sources are fetched."""
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"Invalid dataset URL '{v}'. Must be an http(s) URL.")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeout must be positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v


class SystemTzConfig(BaseModel):
    """Configuration settings for system-tz."""

    config_version: str = "1.0.0"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
