from collections.abc import Callable
from pathlib import Path

import pytest

from system_tz.models import MappingEntry
from system_tz.table import MappingTable

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests away from the developer's configuration and log settings."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("SYSTEM_TZ_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("SYSTEM_TZ_CONFIG", raising=False)
    monkeypatch.delenv("SYSTEM_TZ_JSON_LOGS", raising=False)
    return config_dir


@pytest.fixture
def cldr_snapshot_path() -> Path:
    """Path of the CLDR windowsZones.xml snapshot shipped with the repository."""
    return REPO_ROOT / "data" / "cldr" / "windowsZones.xml"


@pytest.fixture
def windows_zones_document() -> Callable[..., bytes]:
    """Build a small windowsZones.xml document from mapZone rows.

    Each row is ``(other, territory, type)``; pass None to leave an attribute out.
    """

    def build(
        *rows: tuple[str | None, str | None, str | None],
        other_version: str = "7e11800",
        type_version: str = "2021a",
    ) -> bytes:
        lines = []
        for other, territory, type_ in rows:
            attrs = []
            if other is not None:
                attrs.append(f'other="{other}"')
            if territory is not None:
                attrs.append(f'territory="{territory}"')
            if type_ is not None:
                attrs.append(f'type="{type_}"')
            lines.append(f"      <mapZone {' '.join(attrs)}/>")
        body = "\n".join(lines)
        return (
            '<?xml version="1.0" encoding="UTF-8" ?>\n'
            "<supplementalData>\n"
            "  <windowsZones>\n"
            f'    <mapTimezones otherVersion="{other_version}" typeVersion="{type_version}">\n'
            f"{body}\n"
            "    </mapTimezones>\n"
            "  </windowsZones>\n"
            "</supplementalData>\n"
        ).encode()

    return build


@pytest.fixture
def small_table() -> MappingTable:
    """Create a hand-built table with a few European and American zones."""
    rows = [
        ("Romance Standard Time", "001", ("Europe/Paris",)),
        ("Romance Standard Time", "ES", ("Europe/Madrid", "Africa/Ceuta")),
        ("Romance Standard Time", "FR", ("Europe/Paris",)),
        ("W. Europe Standard Time", "001", ("Europe/Berlin",)),
        ("W. Europe Standard Time", "AT", ("Europe/Vienna",)),
        ("US Mountain Standard Time", "001", ("America/Phoenix",)),
        (
            "US Mountain Standard Time",
            "CA",
            ("America/Creston", "America/Dawson_Creek", "America/Fort_Nelson"),
        ),
    ]
    return MappingTable(
        MappingEntry(vendor_key=k, territory=t, canonical_ids=ids) for k, t, ids in rows
    )
