"""Data models for the Windows zone translation table."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_TERRITORY = "001"


class MappingEntry(BaseModel):
    """One CLDR ``mapZone`` row: a Windows zone in a territory and its IANA ids."""

    model_config = ConfigDict(frozen=True)

    vendor_key: str  # e.g., "Romance Standard Time"
    territory: str  # e.g., "FR", or "001" for the worldwide default
    canonical_ids: tuple[str, ...]  # e.g., ("Europe/Paris",)

    @field_validator("vendor_key")
    @classmethod
    def validate_vendor_key(cls, v: str) -> str:
        """Reject blank vendor keys."""
        if not v.strip():
            raise ValueError("vendor_key must not be blank")
        return v

    @field_validator("territory")
    @classmethod
    def normalize_territory(cls, v: str) -> str:
        """Upper-case the territory; lookups against the table are case-sensitive."""
        v = v.strip().upper()
        if not v:
            raise ValueError("territory must not be blank")
        return v

    @field_validator("canonical_ids")
    @classmethod
    def validate_canonical_ids(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Require at least one identifier."""
        if not v:
            raise ValueError("canonical_ids must contain at least one identifier")
        return v

    @property
    def preferred_id(self) -> str:
        """Return the preferred IANA identifier."""
        return self.canonical_ids[0]

    @property
    def is_default(self) -> bool:
        """Whether this is the worldwide default mapping for its vendor key."""
        return self.territory == DEFAULT_TERRITORY


class DatasetVersion(BaseModel):
    """Provenance of a generated zone table."""

    model_config = ConfigDict(frozen=True)

    other_version: str  # Windows zone data version, e.g., "7e11800"
    type_version: str  # tz database version, e.g., "2021a"
    sha256: str
    build_date: datetime
    source_url: str
