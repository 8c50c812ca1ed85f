"""Source content API client."""
import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from asset_migrator.config import Settings
from asset_migrator.exceptions import (
    CatalogAuthError,
    CatalogConnectionError,
    CatalogParseError,
    CatalogStatusError,
    DownloadError,
)
from asset_migrator.schemas.asset import AssetRecord

logger = logging.getLogger(__name__)

FILES_PATH = "api/upload/files"

_asset_list = TypeAdapter(list[AssetRecord])


class SourceClient:
    """Client for the source upload API.

    Lists the asset catalog and downloads asset bytes, both with the same
    bearer token.
    """

    def __init__(self, http: httpx.AsyncClient, base_url: str, auth_token: str):
        self.http = http
        self.base_url = base_url
        self.auth_token = auth_token

    @classmethod
    def from_settings(cls, http: httpx.AsyncClient, settings: Settings) -> "SourceClient":
        return cls(http, settings.base_url, settings.auth_token)

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with Bearer token authentication."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.auth_token}",
        }

    def asset_url(self, asset: AssetRecord) -> str:
        """Absolute location of an asset's original file."""
        if asset.url.startswith(("http://", "https://")):
            return asset.url
        return f"{self.base_url}{asset.url}"

    async def list_assets(self) -> list[AssetRecord]:
        """
        Fetch the full asset catalog.

        API Endpoint: GET /api/upload/files

        Returns:
            Assets in the order the API listed them

        Raises:
            CatalogConnectionError: If the API could not be reached
            CatalogAuthError: If the token was rejected (401/403)
            CatalogStatusError: On any other non-2xx status after redirects
            CatalogParseError: If the body is not a JSON array of assets
        """
        url = f"{self.base_url}/{FILES_PATH}"
        logger.debug("GET %s", url)
        try:
            response = await self.http.get(
                url,
                headers=self._get_headers(),
                follow_redirects=True,
            )
        except httpx.RequestError as e:
            raise CatalogConnectionError(f"Could not reach {url}: {e}") from e

        if response.status_code in (401, 403):
            raise CatalogAuthError(response.status_code)
        if not response.is_success:
            raise CatalogStatusError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogParseError(f"Asset list is not valid JSON: {e}") from e
        if not isinstance(payload, list):
            raise CatalogParseError(
                f"Asset list must be a JSON array, got {type(payload).__name__}"
            )
        try:
            return _asset_list.validate_python(payload)
        except ValidationError as e:
            raise CatalogParseError(f"Malformed asset record: {e}") from e

    async def download(self, asset: AssetRecord) -> bytes:
        """
        Download the original file of an asset.

        Raises:
            DownloadError: On transport failure or a non-2xx status after redirects
        """
        url = self.asset_url(asset)
        logger.debug("GET %s", url)
        try:
            response = await self.http.get(
                url,
                headers={"Authorization": f"Bearer {self.auth_token}"},
                follow_redirects=True,
            )
        except httpx.RequestError as e:
            raise DownloadError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise DownloadError(
                url,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.content
