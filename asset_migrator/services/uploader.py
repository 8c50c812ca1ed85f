"""Per-asset migration service."""
import logging
import time
from typing import Callable

from asset_migrator.schemas.asset import AssetRecord
from asset_migrator.schemas.upload import UploadParameters, UploadResponse
from asset_migrator.services.cloudinary import CloudinaryClient
from asset_migrator.services.source import SourceClient
from asset_migrator.utils.encoding import encode_data_uri

logger = logging.getLogger(__name__)


class AssetUploader:
    """Moves one asset from the source API to the destination host.

    Holds read-only references to both clients and the destination folder;
    concurrent uploads share an instance without mutating it.
    """

    def __init__(
        self,
        source: SourceClient,
        destination: CloudinaryClient,
        folder: str,
        clock: Callable[[], float] = time.time,
    ):
        self.source = source
        self.destination = destination
        self.folder = folder
        self.clock = clock

    def build_parameters(self, asset: AssetRecord) -> UploadParameters:
        """Capture the signing timestamp and derive identifiers from the name."""
        return UploadParameters(
            folder=self.folder,
            public_id=asset.name,
            display_name=asset.name,
            timestamp=int(self.clock()),
        )

    async def upload(self, asset: AssetRecord) -> UploadResponse:
        """
        Download an asset and re-upload it with a signed request.

        Args:
            asset: Asset listed by the source catalog

        Returns:
            Destination response for the created upload

        Raises:
            DownloadError: If the source file could not be fetched
            UploadError: If the destination rejected the upload
        """
        content = await self.source.download(asset)
        payload = encode_data_uri(content)

        params = self.build_parameters(asset)
        form = self.destination.build_form(params, payload)

        logger.debug(
            "Uploading %s (%d bytes) to folder %s",
            asset.name,
            len(content),
            params.folder,
        )
        return await self.destination.upload(form)
