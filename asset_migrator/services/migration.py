"""Migration run orchestration."""
import logging

import httpx

from asset_migrator.config import Settings
from asset_migrator.schemas.upload import MigrationSummary
from asset_migrator.services.cloudinary import CloudinaryClient
from asset_migrator.services.scheduler import BatchScheduler, summarize, validate_batch_size
from asset_migrator.services.source import SourceClient
from asset_migrator.services.uploader import AssetUploader

logger = logging.getLogger(__name__)


async def migrate(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> MigrationSummary:
    """
    Migrate every source asset to the destination host.

    One HTTP client is shared by the catalog call and every upload task.

    Args:
        settings: Validated settings
        transport: Optional transport override for the shared client

    Returns:
        MigrationSummary of the run

    Raises:
        ConfigurationError: If the batch size is invalid
        CatalogError: If the asset list could not be retrieved
    """
    batch_size = validate_batch_size(settings.chunk_size)

    async with httpx.AsyncClient(
        timeout=settings.timeout,
        follow_redirects=True,
        transport=transport,
    ) as http:
        source = SourceClient.from_settings(http, settings)
        destination = CloudinaryClient.from_settings(http, settings)

        assets = await source.list_assets()
        logger.info("Catalog lists %d asset(s)", len(assets))

        uploader = AssetUploader(source, destination, settings.folder_name)
        batches = await BatchScheduler(uploader).run(assets, batch_size)

    summary = summarize(batches)
    logger.info(
        "Migration finished: %d uploaded, %d failed, %d batch(es)",
        summary.succeeded,
        summary.failed,
        summary.batches,
    )
    return summary
