"""Migration error hierarchy.

Fatal errors (configuration, catalog) abort the run. Asset errors are caught
at the task boundary and reported as a failed outcome for that asset only.
"""


class MigrationError(Exception):
    """Base class for every error raised by the migrator."""


class ConfigurationError(MigrationError):
    """A required setting is missing or malformed."""


class CatalogError(MigrationError):
    """The source asset list could not be retrieved."""


class CatalogConnectionError(CatalogError):
    """The source API could not be reached."""


class CatalogAuthError(CatalogError):
    """The source API rejected the bearer token."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Source API rejected credentials (HTTP {status_code})")


class CatalogStatusError(CatalogError):
    """The source API answered with an unexpected status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Source API returned HTTP {status_code}")


class CatalogParseError(CatalogError):
    """The asset list body is not a valid JSON array of assets."""


class AssetError(MigrationError):
    """A single asset failed to migrate."""


class DownloadError(AssetError):
    """The asset bytes could not be fetched from the source."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Download of {url} failed: {reason}")


class UploadError(AssetError):
    """The destination did not accept the upload."""

    def __init__(self, reason: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(reason)


class UploadResponseError(UploadError):
    """The destination answered with a body that is not a JSON object."""
