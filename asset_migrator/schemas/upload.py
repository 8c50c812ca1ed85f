"""Upload and batch result schemas."""
from pydantic import BaseModel


class UploadParameters(BaseModel):
    """Signed parameters of one destination upload.

    The same ``timestamp`` value is used for the signature and sent in the
    form; both go through ``timestamp_value``.
    """
    folder: str
    public_id: str
    display_name: str
    timestamp: int

    model_config = {"frozen": True}

    @property
    def timestamp_value(self) -> str:
        """Decimal rendering of the timestamp used on the wire."""
        return str(self.timestamp)

    def signed_fields(self) -> dict[str, str]:
        """Fields covered by the signature."""
        return {
            "folder": self.folder,
            "display_name": self.display_name,
            "public_id": self.public_id,
            "timestamp": self.timestamp_value,
        }


class UploadResponse(BaseModel):
    """Response from the destination upload API."""
    public_id: str | None = None
    version: int | None = None
    secure_url: str | None = None
    url: str | None = None
    error: dict | str | None = None

    model_config = {"extra": "allow"}

    @property
    def error_message(self) -> str | None:
        """Message of an ``error`` member, if the destination returned one."""
        if self.error is None:
            return None
        if isinstance(self.error, dict):
            return str(self.error.get("message") or self.error)
        return self.error


class UploadOutcome(BaseModel):
    """Result of migrating one asset."""
    asset_id: int
    name: str
    success: bool
    response: UploadResponse | None = None
    error: str | None = None
    error_type: str | None = None


class BatchResult(BaseModel):
    """Outcomes of one group of concurrently migrated assets."""
    index: int
    outcomes: list[UploadOutcome]

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.succeeded


class MigrationSummary(BaseModel):
    """Totals of a migration run."""
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    batches: int = 0
