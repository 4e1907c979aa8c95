"""Current timezone of the operating system as an IANA identifier.

On Windows the zone key reported by the system is translated with the Unicode
CLDR windowsZones dataset, bundled at build time.
"""

__version__ = "0.4.0"

from system_tz.api import (  # noqa: E402
    dataset_version,
    get_system_zoneinfo,
    resolve_system_timezone,
    resolve_windows_zone,
)
from system_tz.errors import (  # noqa: E402
    BuildError,
    FetchError,
    InvalidCanonicalName,
    InvariantViolation,
    OsQueryError,
    ParseError,
    ResolutionError,
    SystemTzError,
    UnknownCanonicalName,
    UnknownVendorKey,
)
from system_tz.resolver import ZoneResolver  # noqa: E402

__all__ = [
    "BuildError",
    "FetchError",
    "InvalidCanonicalName",
    "InvariantViolation",
    "OsQueryError",
    "ParseError",
    "ResolutionError",
    "SystemTzError",
    "UnknownCanonicalName",
    "UnknownVendorKey",
    "ZoneResolver",
    "__version__",
    "dataset_version",
    "get_system_zoneinfo",
    "resolve_system_timezone",
    "resolve_windows_zone",
]
