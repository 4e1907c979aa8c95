"""Tests for the zone table data models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from system_tz.models import DEFAULT_TERRITORY, DatasetVersion, MappingEntry


class TestMappingEntry:
    """Test MappingEntry validation."""

    def test_territory_is_upper_cased(self):
        """Should normalize territory codes to upper case."""
        entry = MappingEntry(
            vendor_key="Romance Standard Time", territory=" fr ", canonical_ids=("Europe/Paris",)
        )

        assert entry.territory == "FR"

    def test_preferred_id_is_first(self):
        """Should report the first identifier as preferred."""
        entry = MappingEntry(
            vendor_key="Romance Standard Time",
            territory="ES",
            canonical_ids=("Europe/Madrid", "Africa/Ceuta"),
        )

        assert entry.preferred_id == "Europe/Madrid"
        assert not entry.is_default

    def test_default_territory(self):
        """Should flag the 001 entry as the worldwide default."""
        entry = MappingEntry(
            vendor_key="Romance Standard Time",
            territory=DEFAULT_TERRITORY,
            canonical_ids=("Europe/Paris",),
        )

        assert entry.is_default

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"vendor_key": "  ", "territory": "FR", "canonical_ids": ("Europe/Paris",)},
            {"vendor_key": "Romance Standard Time", "territory": "", "canonical_ids": ("X/Y",)},
            {"vendor_key": "Romance Standard Time", "territory": "FR", "canonical_ids": ()},
        ],
    )
    def test_rejects_incomplete_entries(self, kwargs):
        """Should reject blank keys, blank territories and empty identifier lists."""
        with pytest.raises(ValidationError):
            MappingEntry(**kwargs)

    def test_is_frozen(self):
        """Should not allow entries to be modified."""
        entry = MappingEntry(
            vendor_key="Romance Standard Time", territory="FR", canonical_ids=("Europe/Paris",)
        )

        with pytest.raises(ValidationError):
            entry.territory = "BE"


class TestDatasetVersion:
    """Test DatasetVersion."""

    def test_parses_iso_build_date(self):
        """Should accept an ISO 8601 build date string."""
        version = DatasetVersion(
            other_version="7e11800",
            type_version="2021a",
            sha256="0" * 64,
            build_date="2026-10-18T09:12:44+00:00",
            source_url="https://example.com/windowsZones.xml",
        )

        assert version.build_date == datetime(2026, 10, 18, 9, 12, 44, tzinfo=UTC)
