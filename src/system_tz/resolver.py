"""Translation of Windows zone names to IANA identifiers."""

from __future__ import annotations

import logging

from system_tz.canonical import validate_canonical_name
from system_tz.errors import UnknownCanonicalName, UnknownVendorKey
from system_tz.models import DEFAULT_TERRITORY, MappingEntry
from system_tz.table import MappingTable, get_mapping_table

logger = logging.getLogger(__name__)


class ZoneResolver:
    """Looks up Windows zones in a MappingTable with fallback to the world default."""

    def __init__(self, table: MappingTable | None = None):
        """Initialize resolver.

        Args:
            table: Table to consult; defaults to the embedded CLDR table
        """
        self.table = table if table is not None else get_mapping_table()

    def lookup(self, vendor_key: str, territory: str | None = None) -> MappingEntry:
        """Return the mapping entry that applies to a Windows zone in a territory.

        An exact territory match wins. A missing, empty or unlisted territory falls
        back to the vendor key's "001" entry.

        Raises:
            UnknownVendorKey: If the table has no entry for the vendor key at all
        """
        territory = (territory or "").strip().upper()
        if territory:
            entry = self.table.get(vendor_key, territory)
            if entry is not None:
                return entry

        entry = self.table.default_for(vendor_key)
        if entry is None:
            raise UnknownVendorKey(vendor_key, territory or None)

        if territory and territory != DEFAULT_TERRITORY:
            logger.debug(
                "No '%s' mapping for territory %s, using world default", vendor_key, territory
            )
        return entry

    def resolve(self, vendor_key: str, territory: str | None = None) -> str:
        """Return the preferred IANA identifier for a Windows zone."""
        return self.lookup(vendor_key, territory).preferred_id

    def resolve_canonical(self, vendor_key: str, territory: str | None = None) -> str:
        """Resolve and validate against the installed timezone database.

        Raises:
            UnknownVendorKey: If the vendor key is not in the table
            InvalidCanonicalName: If the table and tzdata disagree
        """
        return validate_canonical_name(self.resolve(vendor_key, territory))

    def vendor_key_for(self, canonical_id: str) -> str:
        """Return the Windows zone that lists ``canonical_id`` among its identifiers.

        Raises:
            UnknownCanonicalName: If no entry lists the identifier
        """
        for entry in self.table:
            if canonical_id in entry.canonical_ids:
                return entry.vendor_key
        raise UnknownCanonicalName(canonical_id)
