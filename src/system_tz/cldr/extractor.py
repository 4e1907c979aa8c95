"""Parsing of the CLDR windowsZones document into a MappingTable.

The document looks like::

    <supplementalData>
      <windowsZones>
        <mapTimezones otherVersion="7e11800" typeVersion="2021a">
          <mapZone other="Romance Standard Time" territory="001" type="Europe/Paris"/>
          <mapZone other="Romance Standard Time" territory="BE" type="Europe/Brussels"/>
          ...
"""

import hashlib
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import ValidationError

from system_tz.canonical import available_zone_names
from system_tz.errors import InvariantViolation, ParseError
from system_tz.models import DEFAULT_TERRITORY, DatasetVersion, MappingEntry
from system_tz.table import MappingTable

logger = logging.getLogger(__name__)

# Names Windows reports that CLDR does not list; added only when the dataset lacks them
SUPPLEMENTAL_ENTRIES = (
    MappingEntry(
        vendor_key="Coordinated Universal Time",
        territory=DEFAULT_TERRITORY,
        canonical_ids=("Etc/UTC",),
    ),
)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of parsing one windowsZones document."""

    table: MappingTable
    version: DatasetVersion
    skipped: int


class MappingExtractor:
    """Turns windowsZones XML into a validated MappingTable."""

    def __init__(self, validate_ids: bool = True, expected_type_version: str | None = None):
        """Initialize extractor.

        Args:
            validate_ids: Check every preferred id against the installed tz database
            expected_type_version: Reject documents built for another tz data version
        """
        self.validate_ids = validate_ids
        self.expected_type_version = expected_type_version

    def extract(self, document: bytes, source_url: str = "") -> ExtractionResult:
        """Parse the document.

        Args:
            document: Raw windowsZones.xml bytes
            source_url: Where the document came from, recorded in the version

        Returns:
            The table, its provenance and the number of skipped mapZone elements

        Raises:
            ParseError: If the document is not a windowsZones document
            InvariantViolation: If the resulting table is empty or inconsistent
        """
        try:
            root = ET.fromstring(document)
        except ET.ParseError as e:
            raise ParseError(f"Malformed XML: {e}") from e

        if root.tag != "supplementalData":
            raise ParseError(f"Unexpected root element <{root.tag}>, expected <supplementalData>")

        map_timezones = root.find("windowsZones/mapTimezones")
        if map_timezones is None:
            raise ParseError("Document has no windowsZones/mapTimezones element")

        other_version = map_timezones.get("otherVersion", "unknown")
        type_version = map_timezones.get("typeVersion", "unknown")
        if self.expected_type_version and type_version != self.expected_type_version:
            raise ParseError(
                f"Dataset typeVersion {type_version} does not match "
                f"expected {self.expected_type_version}"
            )

        entries: list[MappingEntry] = []
        skipped = 0
        for element in map_timezones.iter("mapZone"):
            entry = self._parse_map_zone(element)
            if entry is None:
                skipped += 1
                continue
            entries.append(entry)

        if not entries:
            raise InvariantViolation("Dataset contains no valid mapZone elements")

        present = {(e.vendor_key, e.territory) for e in entries}
        for extra in SUPPLEMENTAL_ENTRIES:
            if (extra.vendor_key, extra.territory) not in present:
                entries.append(extra)

        if self.validate_ids:
            self._check_canonical_ids(entries)

        version = DatasetVersion(
            other_version=other_version,
            type_version=type_version,
            sha256=hashlib.sha256(document).hexdigest(),
            build_date=datetime.now(UTC),
            source_url=source_url,
        )
        table = MappingTable(entries, version=version)

        logger.info(
            "Extracted %d mappings for %d Windows zones (%d skipped, CLDR %s, tz %s)",
            len(table),
            len(table.vendor_keys),
            skipped,
            other_version,
            type_version,
        )
        return ExtractionResult(table=table, version=version, skipped=skipped)

    def _parse_map_zone(self, element: ET.Element) -> MappingEntry | None:
        """Build an entry from one mapZone element, or None if it is incomplete."""
        vendor_key = (element.get("other") or "").strip()
        territory = (element.get("territory") or "").strip()
        canonical_ids = tuple((element.get("type") or "").split())

        if not vendor_key or not territory or not canonical_ids:
            logger.warning("Skipping incomplete mapZone element: %s", dict(element.attrib))
            return None

        try:
            return MappingEntry(
                vendor_key=vendor_key, territory=territory, canonical_ids=canonical_ids
            )
        except ValidationError as e:
            logger.warning("Skipping invalid mapZone element %s: %s", dict(element.attrib), e)
            return None

    def _check_canonical_ids(self, entries: list[MappingEntry]) -> None:
        """Fail if a preferred id is unknown to the installed tz database."""
        known = available_zone_names()
        unknown = sorted({e.preferred_id for e in entries if e.preferred_id not in known})
        if unknown:
            raise InvariantViolation(
                f"Preferred identifiers unknown to the timezone database: {', '.join(unknown)}"
            )
