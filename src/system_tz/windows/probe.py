"""Windows host queries for the current timezone key and user territory.

This module is the only place that calls into the Win32 API. Everything it
returns is a plain Python string; failures surface as OsQueryError.
"""

import ctypes
import logging
from typing import Any

from system_tz.errors import OsQueryError

logger = logging.getLogger(__name__)

TIME_ZONE_ID_INVALID = 0xFFFFFFFF
GEOCLASS_NATION = 16
GEOID_NOT_AVAILABLE = -1
GEO_ISO2 = 4


class SYSTEMTIME(ctypes.Structure):
    _fields_ = [
        ("wYear", ctypes.c_ushort),
        ("wMonth", ctypes.c_ushort),
        ("wDayOfWeek", ctypes.c_ushort),
        ("wDay", ctypes.c_ushort),
        ("wHour", ctypes.c_ushort),
        ("wMinute", ctypes.c_ushort),
        ("wSecond", ctypes.c_ushort),
        ("wMilliseconds", ctypes.c_ushort),
    ]


class DYNAMIC_TIME_ZONE_INFORMATION(ctypes.Structure):
    _fields_ = [
        ("Bias", ctypes.c_long),
        ("StandardName", ctypes.c_wchar * 32),
        ("StandardDate", SYSTEMTIME),
        ("StandardBias", ctypes.c_long),
        ("DaylightName", ctypes.c_wchar * 32),
        ("DaylightDate", SYSTEMTIME),
        ("DaylightBias", ctypes.c_long),
        ("TimeZoneKeyName", ctypes.c_wchar * 128),
        ("DynamicDaylightTimeDisabled", ctypes.c_ubyte),
    ]


def _last_error() -> int | None:
    get_last_error = getattr(ctypes, "get_last_error", None)
    return get_last_error() if get_last_error else None


def _declare_prototypes(kernel32: Any) -> None:
    """Give the kernel32 functions their Win32 signatures (DWORD results are unsigned)."""
    kernel32.GetDynamicTimeZoneInformation.argtypes = [
        ctypes.POINTER(DYNAMIC_TIME_ZONE_INFORMATION)
    ]
    kernel32.GetDynamicTimeZoneInformation.restype = ctypes.c_uint32
    kernel32.GetUserGeoID.argtypes = [ctypes.c_uint32]
    kernel32.GetUserGeoID.restype = ctypes.c_long
    kernel32.GetGeoInfoW.argtypes = [
        ctypes.c_long,
        ctypes.c_uint32,
        ctypes.c_wchar_p,
        ctypes.c_int,
        ctypes.c_ushort,
    ]
    kernel32.GetGeoInfoW.restype = ctypes.c_int
    # Windows 10 1709 and later
    get_geo_name = getattr(kernel32, "GetUserDefaultGeoName", None)
    if get_geo_name is not None:
        get_geo_name.argtypes = [ctypes.c_wchar_p, ctypes.c_int]
        get_geo_name.restype = ctypes.c_int


class WindowsProbe:
    """Reads the configured timezone key and territory from kernel32."""

    def __init__(self, kernel32: Any = None):
        """Initialize probe.

        Args:
            kernel32: Loaded kernel32 library; loaded on first query when omitted
        """
        self._kernel32 = kernel32

    @property
    def kernel32(self) -> Any:
        if self._kernel32 is None:
            try:
                win_dll = ctypes.WinDLL  # type: ignore[attr-defined]
                kernel32 = win_dll("kernel32", use_last_error=True)
            except (AttributeError, OSError) as e:
                raise OsQueryError(f"kernel32 is not available: {e}") from e
            _declare_prototypes(kernel32)
            self._kernel32 = kernel32
        return self._kernel32

    def query_vendor_zone_name(self) -> str:
        """Return the registry key name of the active timezone, e.g. "Romance Standard Time".

        Raises:
            OsQueryError: If GetDynamicTimeZoneInformation fails or returns no key name
        """
        info = DYNAMIC_TIME_ZONE_INFORMATION()
        result = self.kernel32.GetDynamicTimeZoneInformation(ctypes.pointer(info))
        # An injected library may still return the DWORD as a signed int
        if ctypes.c_uint32(result).value == TIME_ZONE_ID_INVALID:
            raise OsQueryError("GetDynamicTimeZoneInformation failed", _last_error())

        key_name = info.TimeZoneKeyName.strip()
        if not key_name:
            raise OsQueryError("GetDynamicTimeZoneInformation returned an empty key name")
        logger.debug("Windows timezone key: %s", key_name)
        return key_name

    def query_territory_code(self) -> str:
        """Return the user's ISO 3166 territory, e.g. "FR".

        Uses GetUserDefaultGeoName where available (Windows 10 1709+) and the
        GetUserGeoID/GetGeoInfoW pair otherwise.

        Raises:
            OsQueryError: If the territory cannot be determined
        """
        buffer = ctypes.create_unicode_buffer(16)
        try:
            get_geo_name = self.kernel32.GetUserDefaultGeoName
        except AttributeError:
            get_geo_name = None

        if get_geo_name is not None:
            if not get_geo_name(buffer, len(buffer)):
                raise OsQueryError("GetUserDefaultGeoName failed", _last_error())
        else:
            geo_id = self.kernel32.GetUserGeoID(GEOCLASS_NATION)
            if geo_id == GEOID_NOT_AVAILABLE:
                raise OsQueryError("GetUserGeoID returned no territory")
            if not self.kernel32.GetGeoInfoW(geo_id, GEO_ISO2, buffer, len(buffer), 0):
                raise OsQueryError("GetGeoInfoW failed", _last_error())

        territory = buffer.value.strip().upper()
        if not territory:
            raise OsQueryError("The user territory is not set")
        logger.debug("Windows user territory: %s", territory)
        return territory
