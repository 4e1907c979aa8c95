"""Tests for Windows zone resolution."""

import logging

import pytest

from system_tz.errors import InvalidCanonicalName, UnknownCanonicalName, UnknownVendorKey
from system_tz.models import MappingEntry
from system_tz.resolver import ZoneResolver
from system_tz.table import MappingTable


@pytest.fixture
def resolver():
    """Create a resolver over the bundled table."""
    return ZoneResolver()


class TestLookup:
    """Test lookups against the bundled table."""

    def test_exact_territory(self, resolver):
        """Should use the entry for the given territory."""
        assert resolver.resolve("Romance Standard Time", "FR") == "Europe/Paris"
        assert resolver.resolve("W. Europe Standard Time", "AT") == "Europe/Vienna"

    def test_territory_is_case_insensitive(self, resolver):
        """Should match lower-case territory codes."""
        assert resolver.resolve("W. Europe Standard Time", "at") == "Europe/Vienna"

    def test_territory_is_trimmed(self, resolver):
        """Should ignore whitespace around the territory code."""
        assert resolver.resolve("Romance Standard Time", " fr ") == "Europe/Paris"
        assert resolver.resolve("W. Europe Standard Time", "at\n") == "Europe/Vienna"

    def test_blank_territory_falls_back(self, resolver, caplog):
        """Should treat a whitespace-only territory as missing."""
        with caplog.at_level(logging.DEBUG, logger="system_tz.resolver"):
            assert resolver.resolve("US Mountain Standard Time", "  ") == "America/Phoenix"

        assert "using world default" not in caplog.text

    def test_world_territory_with_whitespace(self, resolver, caplog):
        """Should not report a fallback for a padded 001 territory."""
        with caplog.at_level(logging.DEBUG, logger="system_tz.resolver"):
            assert resolver.resolve("Romance Standard Time", " 001 ") == "Europe/Paris"

        assert "using world default" not in caplog.text

    def test_unlisted_territory_falls_back(self, resolver):
        """Should use the 001 entry for a territory with no mapping."""
        assert resolver.resolve("Romance Standard Time", "ZZ") == "Europe/Paris"
        assert resolver.resolve("Romance Standard Time", "ZZ") == resolver.resolve(
            "Romance Standard Time", "001"
        )

    @pytest.mark.parametrize("territory", [None, ""])
    def test_missing_territory_falls_back(self, resolver, territory):
        """Should use the 001 entry when no territory is known."""
        assert resolver.resolve("US Mountain Standard Time", territory) == "America/Phoenix"

    def test_multi_id_entry_prefers_first(self, resolver):
        """Should return the first identifier and keep the others as aliases."""
        entry = resolver.lookup("US Mountain Standard Time", "CA")

        assert resolver.resolve("US Mountain Standard Time", "CA") == "America/Creston"
        assert entry.canonical_ids[1:] == ("America/Dawson_Creek", "America/Fort_Nelson")

    def test_unknown_vendor_key(self, resolver):
        """Should raise UnknownVendorKey for a key the table does not know."""
        with pytest.raises(UnknownVendorKey) as exc_info:
            resolver.resolve("Not A Real Zone", "US")

        assert exc_info.value.vendor_key == "Not A Real Zone"
        assert exc_info.value.territory == "US"

    def test_every_vendor_key_resolves_worldwide(self, resolver):
        """Should resolve every vendor key through its 001 entry."""
        for vendor_key in resolver.table.vendor_keys:
            assert resolver.resolve(vendor_key, "QQ") == resolver.resolve(vendor_key, "001")
            assert resolver.resolve_canonical(vendor_key)


class TestResolveCanonical:
    """Test validation of resolved identifiers."""

    def test_returns_valid_name(self, resolver):
        """Should return names known to the timezone database."""
        assert resolver.resolve_canonical("Romance Standard Time", "FR") == "Europe/Paris"

    def test_rejects_name_unknown_to_tzdata(self):
        """Should raise InvalidCanonicalName when the table names a missing zone."""
        table = MappingTable(
            [
                MappingEntry(
                    vendor_key="Olympus Standard Time",
                    territory="001",
                    canonical_ids=("Mars/Olympus_Mons",),
                )
            ]
        )

        with pytest.raises(InvalidCanonicalName, match="Mars/Olympus_Mons"):
            ZoneResolver(table).resolve_canonical("Olympus Standard Time")


class TestVendorKeyFor:
    """Test reverse lookups."""

    @pytest.mark.parametrize(
        "canonical_id,vendor_key",
        [
            ("Europe/Paris", "Romance Standard Time"),
            ("Europe/Vienna", "W. Europe Standard Time"),
            ("Africa/Ceuta", "Romance Standard Time"),
        ],
    )
    def test_finds_vendor_key(self, resolver, canonical_id, vendor_key):
        """Should find the Windows zone listing an identifier."""
        assert resolver.vendor_key_for(canonical_id) == vendor_key

    def test_unknown_identifier(self, resolver):
        """Should raise UnknownCanonicalName when nothing lists the identifier."""
        with pytest.raises(UnknownCanonicalName):
            resolver.vendor_key_for("Mars/Olympus_Mons")

    def test_custom_table(self, small_table):
        """Should search the table it was given."""
        resolver = ZoneResolver(small_table)

        assert resolver.vendor_key_for("America/Fort_Nelson") == "US Mountain Standard Time"
