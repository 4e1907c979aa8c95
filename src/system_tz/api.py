"""Public resolution API.

The resolution strategy is picked once, at import time, from ``sys.platform``:
Windows hosts translate their zone key through the CLDR table. Every other host
already stores an IANA name, which tzlocal reads from TZ, /etc/timezone,
/etc/localtime and the distribution clock files.
"""

import logging
import sys
import zoneinfo

import tzlocal

from system_tz.canonical import normalize_zone_name
from system_tz.errors import OsQueryError
from system_tz.models import DatasetVersion
from system_tz.resolver import ZoneResolver
from system_tz.table import get_mapping_table
from system_tz.windows.probe import WindowsProbe

logger = logging.getLogger(__name__)


def resolve_windows_zone(vendor_key: str, territory: str | None = None) -> str:
    """Translate a Windows zone key to a validated IANA identifier.

    Args:
        vendor_key: Windows zone key, e.g., "Romance Standard Time"
        territory: ISO 3166 territory, e.g., "FR"; unknown or missing falls back to "001"

    Raises:
        UnknownVendorKey: If the bundled table does not know the key
        InvalidCanonicalName: If the bundled table and tzdata disagree
    """
    return ZoneResolver().resolve_canonical(vendor_key, territory)


def _resolve_windows(probe: WindowsProbe | None = None) -> str:
    probe = probe or WindowsProbe()
    vendor_key = probe.query_vendor_zone_name()
    territory = probe.query_territory_code()
    name = resolve_windows_zone(vendor_key, territory)
    logger.debug("Resolved Windows zone '%s' (%s) to %s", vendor_key, territory, name)
    return name


def _resolve_unix() -> str:
    try:
        raw_name = tzlocal.get_localzone_name()
    except (zoneinfo.ZoneInfoNotFoundError, OSError) as e:
        raise OsQueryError(f"Could not read the timezone configuration: {e}") from e

    if not raw_name:
        raise OsQueryError("No timezone configuration found on this host")
    name = normalize_zone_name(raw_name)
    logger.debug("Resolved %s from the host configuration", name)
    return name


_resolve = _resolve_windows if sys.platform == "win32" else _resolve_unix


def resolve_system_timezone() -> str:
    """Return the IANA identifier of the host's configured timezone.

    Windows hosts are queried on every call. On other hosts tzlocal reads the
    configuration once and keeps it for the life of the process.

    Raises:
        OsQueryError: If the host cannot report its timezone
        UnknownVendorKey: If a Windows zone key is missing from the bundled table
        InvalidCanonicalName: If the resolved name is unknown to the timezone database
    """
    return _resolve()


def get_system_zoneinfo() -> zoneinfo.ZoneInfo:
    """Return the host's timezone as a ZoneInfo object."""
    return zoneinfo.ZoneInfo(resolve_system_timezone())


def dataset_version() -> DatasetVersion | None:
    """Return the provenance of the bundled Windows zone table."""
    return get_mapping_table().version
