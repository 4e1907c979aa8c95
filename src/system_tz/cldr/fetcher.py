"""Download of the CLDR windowsZones reference document."""

import logging
from pathlib import Path

import httpx

from system_tz.config.models import CLDR_WINDOWS_ZONES_URL
from system_tz.errors import FetchError

logger = logging.getLogger(__name__)


class DatasetFetcher:
    """Fetches the windowsZones XML from a fixed location."""

    def __init__(
        self,
        source_url: str = CLDR_WINDOWS_ZONES_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize dataset fetcher.

        Args:
            source_url: URL of the windowsZones.xml document
            timeout: Seconds before the request is abandoned
            transport: Optional httpx transport (used by tests)
        """
        self.source_url = source_url
        self.timeout = timeout
        self._transport = transport

    def fetch(self) -> bytes:
        """Download the document.

        Returns:
            Raw document bytes

        Raises:
            FetchError: On network errors, timeouts, non-2xx responses or an empty body
        """
        logger.info("Fetching CLDR windowsZones from %s", self.source_url)
        try:
            with httpx.Client(
                follow_redirects=True, timeout=self.timeout, transport=self._transport
            ) as client:
                response = client.get(self.source_url)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(self.source_url, f"timed out after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(
                self.source_url, f"HTTP {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.RequestError as e:
            raise FetchError(self.source_url, str(e) or type(e).__name__) from e

        if not response.content:
            raise FetchError(self.source_url, "empty response body")

        logger.info("Fetched %d bytes", len(response.content))
        return response.content

    @staticmethod
    def fetch_file(path: Path) -> bytes:
        """Read a local copy of the document (offline builds).

        Raises:
            FetchError: If the file cannot be read or is empty
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FetchError(str(path), e.strerror or str(e)) from e
        if not data:
            raise FetchError(str(path), "file is empty")
        logger.info("Read %d bytes from %s", len(data), path)
        return data
