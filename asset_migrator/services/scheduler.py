"""Batch scheduling of asset uploads."""
import asyncio
import logging
from typing import Iterator, Protocol, Sequence, TypeVar

from asset_migrator.exceptions import ConfigurationError
from asset_migrator.schemas.asset import AssetRecord
from asset_migrator.schemas.upload import (
    BatchResult,
    MigrationSummary,
    UploadOutcome,
    UploadResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Uploader(Protocol):
    async def upload(self, asset: AssetRecord) -> UploadResponse: ...


def validate_batch_size(batch_size) -> int:
    """Return ``batch_size`` if it is a positive integer, else raise."""
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
        raise ConfigurationError(
            f"Batch size must be a positive integer, got {batch_size!r}"
        )
    return batch_size


def chunked(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """Split ``items`` into consecutive groups of at most ``size``."""
    size = validate_batch_size(size)
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


class BatchScheduler:
    """Runs uploads in fixed-size groups.

    Uploads within a group run concurrently; the next group is not started
    until every upload of the current one has produced an outcome, so at most
    ``batch_size`` uploads are ever in flight.
    """

    def __init__(self, uploader: Uploader):
        self.uploader = uploader

    async def _migrate(self, asset: AssetRecord) -> UploadOutcome:
        try:
            response = await self.uploader.upload(asset)
        except Exception as e:
            return UploadOutcome(
                asset_id=asset.id,
                name=asset.name,
                success=False,
                error=str(e) or type(e).__name__,
                error_type=type(e).__name__,
            )
        return UploadOutcome(
            asset_id=asset.id,
            name=asset.name,
            success=True,
            response=response,
        )

    async def run_batch(self, index: int, assets: Sequence[AssetRecord]) -> BatchResult:
        """Upload one group concurrently and wait for all of it."""
        tasks = [asyncio.create_task(self._migrate(asset)) for asset in assets]
        outcomes = await asyncio.gather(*tasks)
        return BatchResult(index=index, outcomes=list(outcomes))

    async def run(self, assets: Sequence[AssetRecord], batch_size: int) -> list[BatchResult]:
        """
        Migrate ``assets`` in groups of ``batch_size``.

        Args:
            assets: Assets in catalog order
            batch_size: Maximum number of concurrent uploads

        Returns:
            One BatchResult per group, in order

        Raises:
            ConfigurationError: If batch_size is not a positive integer
        """
        batch_size = validate_batch_size(batch_size)
        batches = list(chunked(assets, batch_size))
        results: list[BatchResult] = []

        for index, batch in enumerate(batches):
            logger.info(
                "Batch %d/%d: uploading %d asset(s)",
                index + 1,
                len(batches),
                len(batch),
            )
            result = await self.run_batch(index, batch)
            report_batch(result)
            results.append(result)

        return results


def report_batch(result: BatchResult) -> None:
    """Log one line per outcome of a finished group."""
    for outcome in result.outcomes:
        if outcome.success:
            logger.info("Uploaded %s (id=%s)", outcome.name, outcome.asset_id)
        else:
            logger.error(
                "Failed %s (id=%s): %s: %s",
                outcome.name,
                outcome.asset_id,
                outcome.error_type,
                outcome.error,
            )


def summarize(batches: Sequence[BatchResult]) -> MigrationSummary:
    """Totals over every group of a run."""
    succeeded = sum(batch.succeeded for batch in batches)
    failed = sum(batch.failed for batch in batches)
    return MigrationSummary(
        total=succeeded + failed,
        succeeded=succeeded,
        failed=failed,
        batches=len(batches),
    )
