"""Destination upload API client."""
import logging

import httpx
from pydantic import ValidationError

from asset_migrator.config import Settings
from asset_migrator.exceptions import UploadError, UploadResponseError
from asset_migrator.schemas.upload import UploadParameters, UploadResponse
from asset_migrator.services.cloudinary.signature import generate_signature

logger = logging.getLogger(__name__)


class CloudinaryClient:
    """Client for the destination media host's signed upload endpoint."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        upload_url: str,
        api_key: str,
        api_secret: str,
    ):
        self.http = http
        self.upload_url = upload_url
        self.api_key = api_key
        self.api_secret = api_secret

    @classmethod
    def from_settings(cls, http: httpx.AsyncClient, settings: Settings) -> "CloudinaryClient":
        return cls(
            http,
            settings.cloudinary_url,
            settings.cloudinary_key,
            settings.cloudinary_secret,
        )

    def sign(self, params: UploadParameters) -> str:
        """Signature of the given upload parameters."""
        return generate_signature(
            params.folder,
            params.display_name,
            params.public_id,
            params.timestamp,
            self.api_secret,
        )

    def build_form(self, params: UploadParameters, file: str) -> dict[str, str]:
        """
        Assemble the signed multipart fields of one upload.

        Args:
            params: Signed upload parameters
            file: Encoded file payload (data URI)

        Returns:
            Form fields in submission order
        """
        return {
            "folder": params.folder,
            "file": file,
            "public_id": params.public_id,
            "api_key": self.api_key,
            "timestamp": params.timestamp_value,
            "display_name": params.display_name,
            "signature": self.sign(params),
            "api_secret": self.api_secret,
        }

    async def upload(self, form: dict[str, str]) -> UploadResponse:
        """
        Submit a signed upload as multipart/form-data.

        Returns:
            Parsed UploadResponse

        Raises:
            UploadError: On transport failure, a non-2xx status or an
                ``error`` member in the response
            UploadResponseError: If the body is not a well-formed JSON object
        """
        # A part without a filename is sent as a plain form field.
        files = {name: (None, value) for name, value in form.items()}
        logger.debug("POST %s (public_id=%s)", self.upload_url, form.get("public_id"))
        try:
            response = await self.http.post(self.upload_url, files=files)
        except httpx.RequestError as e:
            raise UploadError(f"Could not reach {self.upload_url}: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.is_success:
            detail = _error_detail(payload)
            reason = f"Upload rejected with HTTP {response.status_code}"
            raise UploadError(
                f"{reason}: {detail}" if detail else reason,
                status_code=response.status_code,
            )
        if not isinstance(payload, dict):
            raise UploadResponseError(
                "Upload response is not a JSON object",
                status_code=response.status_code,
            )

        try:
            result = UploadResponse(**payload)
        except ValidationError as e:
            raise UploadResponseError(
                f"Malformed upload response: {e}",
                status_code=response.status_code,
            ) from e
        if result.error_message:
            raise UploadError(result.error_message, status_code=response.status_code)
        return result


def _error_detail(payload) -> str | None:
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        return str(error.get("message") or error)
    if error is not None:
        return str(error)
    return None
