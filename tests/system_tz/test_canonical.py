"""Tests for zone name validation."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from system_tz import canonical
from system_tz.errors import InvalidCanonicalName


class TestValidateCanonicalName:
    """Test validate_canonical_name."""

    def test_accepts_known_zone(self):
        """Should return known zone names unchanged."""
        assert canonical.validate_canonical_name("Europe/Paris") == "Europe/Paris"

    @pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "europe/paris", ""])
    def test_rejects_unknown_zone(self, name):
        """Should reject names the database does not spell that way."""
        with pytest.raises(InvalidCanonicalName):
            canonical.validate_canonical_name(name)


class TestNormalizeZoneName:
    """Test normalize_zone_name."""

    def test_matches_case_insensitively(self):
        """Should return the database spelling of a differently cased name."""
        assert canonical.normalize_zone_name(" europe/paris\n") == "Europe/Paris"

    def test_rejects_unknown_zone(self):
        """Should raise InvalidCanonicalName with the stripped name."""
        with pytest.raises(InvalidCanonicalName) as exc_info:
            canonical.normalize_zone_name("  Mars/Olympus_Mons ")

        assert exc_info.value.name == "Mars/Olympus_Mons"


class TestAvailableZoneNames:
    """Test the cached zone enumeration."""

    def test_is_cached(self, mocker):
        """Should enumerate the database once until the cache is reset."""
        canonical.reset_cache()
        spy = mocker.spy(canonical.zoneinfo, "available_timezones")

        first = canonical.available_zone_names()
        second = canonical.available_zone_names()

        assert first is second
        assert "Europe/Paris" in first
        assert spy.call_count == 1

        canonical.reset_cache()
        canonical.available_zone_names()
        assert spy.call_count == 2

    def test_reset_during_lookups(self):
        """Should keep answering lookups while another thread resets the cache."""

        def normalize_many():
            return [canonical.normalize_zone_name("europe/paris") for _ in range(200)]

        def reset_many():
            for _ in range(200):
                canonical.reset_cache()

        with ThreadPoolExecutor(max_workers=4) as executor:
            lookups = [executor.submit(normalize_many) for _ in range(3)]
            resets = executor.submit(reset_many)
            results = [future.result() for future in lookups]
            resets.result()

        assert all(name == "Europe/Paris" for batch in results for name in batch)
