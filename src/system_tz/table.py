"""Immutable Windows zone table and its process-wide instance."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime
from types import MappingProxyType

from system_tz.errors import InvariantViolation
from system_tz.models import DEFAULT_TERRITORY, DatasetVersion, MappingEntry

logger = logging.getLogger(__name__)


class MappingTable:
    """Windows zone mappings indexed by ``(vendor_key, territory)``.

    Construction checks the table invariants:
    - each ``(vendor_key, territory)`` pair appears once
    - every vendor key listed for a territory also has a "001" default entry
    - the table is not empty
    """

    def __init__(self, entries: Iterable[MappingEntry], version: DatasetVersion | None = None):
        index: dict[tuple[str, str], MappingEntry] = {}
        for entry in entries:
            key = (entry.vendor_key, entry.territory)
            if key in index:
                raise InvariantViolation(
                    f"Duplicate mapping for '{entry.vendor_key}' in territory {entry.territory}"
                )
            index[key] = entry

        if not index:
            raise InvariantViolation("Zone table is empty")

        vendor_keys = {vendor_key for vendor_key, _ in index}
        missing = sorted(k for k in vendor_keys if (k, DEFAULT_TERRITORY) not in index)
        if missing:
            raise InvariantViolation(
                f"Vendor keys without a '{DEFAULT_TERRITORY}' default mapping: {', '.join(missing)}"
            )

        self._index: Mapping[tuple[str, str], MappingEntry] = MappingProxyType(index)
        self._vendor_keys = frozenset(vendor_keys)
        self.version = version

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self._index.values())

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def get(self, vendor_key: str, territory: str) -> MappingEntry | None:
        """Return the entry for an exact ``(vendor_key, territory)`` pair, if any."""
        return self._index.get((vendor_key, territory))

    def default_for(self, vendor_key: str) -> MappingEntry | None:
        """Return the worldwide default entry for a vendor key, if any."""
        return self._index.get((vendor_key, DEFAULT_TERRITORY))

    @property
    def vendor_keys(self) -> frozenset[str]:
        """All vendor keys present in the table."""
        return self._vendor_keys

    def territories(self, vendor_key: str) -> list[str]:
        """List the territories mapped for a vendor key, default first."""
        found = [t for k, t in self._index if k == vendor_key]
        return sorted(found, key=lambda t: (t != DEFAULT_TERRITORY, t))


def table_from_rows(
    rows: Iterable[tuple[str, str, tuple[str, ...]]],
    version_data: Mapping[str, str] | None = None,
) -> MappingTable:
    """Build a MappingTable from the literal rows of a generated zones module."""
    entries = (
        MappingEntry(vendor_key=vendor_key, territory=territory, canonical_ids=tuple(ids))
        for vendor_key, territory, ids in rows
    )
    version = None
    if version_data is not None:
        version = DatasetVersion(
            other_version=version_data["other_version"],
            type_version=version_data["type_version"],
            sha256=version_data["sha256"],
            build_date=datetime.fromisoformat(version_data["build_date"]),
            source_url=version_data["source_url"],
        )
    return MappingTable(entries, version=version)


_lock = threading.Lock()
_table: MappingTable | None = None


def get_mapping_table() -> MappingTable:
    """Return the embedded zone table, building it on first use."""
    global _table
    if _table is None:
        with _lock:
            if _table is None:
                from system_tz.windows import zones_data

                _table = table_from_rows(zones_data.WINDOWS_ZONES, zones_data.WINDOWS_ZONES_VERSION)
                logger.debug(
                    "Loaded %d Windows zone mappings (CLDR %s)",
                    len(_table),
                    zones_data.WINDOWS_ZONES_VERSION["other_version"],
                )
    return _table
