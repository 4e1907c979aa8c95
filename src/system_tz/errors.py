"""Exception hierarchy for system-tz.

Build-time errors (``BuildError`` subclasses) abort the zone table generation
job. Run-time errors (``ResolutionError`` subclasses) are raised to callers of
the resolution API so they can decide whether to retry, prompt or abort.
"""


class SystemTzError(Exception):
    """Base class for all system-tz errors."""


class BuildError(SystemTzError):
    """Zone table generation failed; no table is written."""


class FetchError(BuildError):
    """The reference dataset could not be downloaded or read."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ParseError(BuildError):
    """The reference dataset is not a well-formed windowsZones document."""


class InvariantViolation(BuildError):
    """The extracted zone table breaks one of its structural guarantees."""


class ResolutionError(SystemTzError):
    """The system timezone could not be resolved."""


class OsQueryError(ResolutionError):
    """The operating system refused to report its timezone or territory."""

    def __init__(self, message: str, code: int | None = None):
        self.code = code
        if code is not None:
            message = f"{message} (error code {code})"
        super().__init__(message)


class UnknownVendorKey(ResolutionError):
    """The platform zone name is absent from the embedded zone table."""

    def __init__(self, vendor_key: str, territory: str | None = None):
        self.vendor_key = vendor_key
        self.territory = territory
        super().__init__(
            f"Windows timezone '{vendor_key}' is not in the bundled CLDR windowsZones table"
        )


class InvalidCanonicalName(ResolutionError):
    """A resolved name is not a zone known to the timezone database."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' is not a valid IANA timezone identifier")


class UnknownCanonicalName(ResolutionError):
    """No Windows zone maps to the given IANA identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No Windows timezone maps to '{name}'")
