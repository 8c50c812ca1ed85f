"""Pydantic schemas."""
from asset_migrator.schemas.asset import AssetFormat, AssetFormats, AssetRecord
from asset_migrator.schemas.upload import (
    BatchResult,
    MigrationSummary,
    UploadOutcome,
    UploadParameters,
    UploadResponse,
)

__all__ = [
    "AssetFormat",
    "AssetFormats",
    "AssetRecord",
    "UploadParameters",
    "UploadResponse",
    "UploadOutcome",
    "BatchResult",
    "MigrationSummary",
]
