"""Validation of zone names against the IANA timezone database."""

import logging
import threading
import zoneinfo

from system_tz.errors import InvalidCanonicalName

logger = logging.getLogger(__name__)

_lock = threading.Lock()
# Zone names and their lower-case index, always replaced together
_cache: tuple[frozenset[str], dict[str, str]] | None = None


def _load() -> tuple[frozenset[str], dict[str, str]]:
    global _cache
    snapshot = _cache
    if snapshot is None:
        with _lock:
            snapshot = _cache
            if snapshot is None:
                names = frozenset(zoneinfo.available_timezones())
                snapshot = (names, {name.lower(): name for name in names})
                _cache = snapshot
                logger.debug("Loaded %d zone names from the timezone database", len(names))
    return snapshot


def available_zone_names() -> frozenset[str]:
    """Return every zone name known to the installed timezone database.

    The enumeration walks the tzdata package, so it is computed once per process.
    """
    names, _ = _load()
    return names


def validate_canonical_name(name: str) -> str:
    """Return ``name`` unchanged if it is a known zone, else raise InvalidCanonicalName."""
    if name not in available_zone_names():
        raise InvalidCanonicalName(name)
    return name


def normalize_zone_name(raw: str) -> str:
    """Match a free-form zone name case-insensitively against the database.

    Args:
        raw: Zone name as read from the system, e.g., " europe/paris\\n"

    Returns:
        The name spelled as the timezone database spells it

    Raises:
        InvalidCanonicalName: If no zone matches
    """
    name = raw.strip()
    _, by_lower = _load()
    match = by_lower.get(name.lower())
    if match is None:
        raise InvalidCanonicalName(name)
    return match


def reset_cache() -> None:
    """Forget the cached enumeration (after installing a new tzdata release)."""
    global _cache
    with _lock:
        _cache = None
