"""Migration services."""
from asset_migrator.services.cloudinary import CloudinaryClient
from asset_migrator.services.migration import migrate
from asset_migrator.services.scheduler import BatchScheduler, chunked, summarize
from asset_migrator.services.source import SourceClient
from asset_migrator.services.uploader import AssetUploader

__all__ = [
    "AssetUploader",
    "BatchScheduler",
    "CloudinaryClient",
    "SourceClient",
    "chunked",
    "migrate",
    "summarize",
]
