"""Source asset schemas."""
from typing import Any

from pydantic import BaseModel, Field


class AssetFormat(BaseModel):
    """A derived variant of an asset (thumbnail, small, ...)."""
    ext: str
    url: str
    hash: str
    mime: str
    name: str
    path: str | None = None
    size: float
    width: int | None = None
    height: int | None = None

    model_config = {"frozen": True, "extra": "ignore"}


class AssetFormats(BaseModel):
    """Variants generated by the source API for an image."""
    thumbnail: AssetFormat | None = None
    small: AssetFormat | None = None
    medium: AssetFormat | None = None
    large: AssetFormat | None = None

    model_config = {"frozen": True, "extra": "ignore"}


class AssetRecord(BaseModel):
    """One file listed by the source upload API.

    ``url`` is the access path relative to the source base location, unless
    the source stores files with an external provider, in which case it is
    already absolute.
    """
    id: int
    name: str
    alternative_text: str | None = Field(None, alias="alternativeText")
    caption: str | None = None
    width: int | None = None
    height: int | None = None
    formats: AssetFormats | None = None
    hash: str
    ext: str
    mime: str
    size: float
    url: str
    preview_url: str | None = Field(None, alias="previewUrl")
    provider: str | None = None
    provider_metadata: dict[str, Any] | str | None = None
    created_at: str | None = Field(None, alias="createdAt")
    updated_at: str | None = Field(None, alias="updatedAt")
    blurhash: str | None = None
    placeholder: str | None = None

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}
