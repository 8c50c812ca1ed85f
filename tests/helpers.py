"""Shared builders for asset_migrator tests."""
import re

import httpx

from asset_migrator.schemas.asset import AssetRecord

BASE_URL = "https://cms.example.com"
UPLOAD_URL = "https://api.cloudinary.com/v1_1/demo/image/upload"

ENV_VARS = (
    "BASE_URL",
    "AUTH_TOKEN",
    "CLOUDINARY_KEY",
    "CLOUDINARY_SECRET",
    "CLOUDINARY_URL",
    "FOLDER_NAME",
    "CHUNK_SIZE",
    "HTTP_TIMEOUT",
    "HTTP_READ_TIMEOUT",
    "LOG_LEVEL",
)


def format_payload(name: str, prefix: str, width: int, height: int) -> dict:
    return {
        "ext": ".jpg",
        "url": f"/uploads/{prefix}_{name}",
        "hash": f"{prefix}_{name}",
        "mime": "image/jpeg",
        "name": f"{prefix}_{name}.jpg",
        "path": None,
        "size": 4.2,
        "width": width,
        "height": height,
    }


def asset_payload(asset_id: int = 1, name: str = "photo", **overrides) -> dict:
    """Asset record as returned by the source upload API."""
    payload = {
        "id": asset_id,
        "name": name,
        "alternativeText": None,
        "caption": None,
        "width": 1024,
        "height": 768,
        "formats": {
            "thumbnail": format_payload(name, "thumbnail", 208, 156),
            "small": format_payload(name, "small", 500, 375),
        },
        "hash": f"{name}_a1b2c3",
        "ext": ".jpg",
        "mime": "image/jpeg",
        "size": 120.5,
        "url": f"/uploads/{name}_a1b2c3.jpg",
        "previewUrl": None,
        "provider": "local",
        "provider_metadata": None,
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": "2024-01-01T00:00:00.000Z",
        "blurhash": "LEHV6nWB2yk8pyo0adR*.7kCMdnj",
        "placeholder": "data:image/png;base64,AAAA",
    }
    payload.update(overrides)
    return payload


def make_asset(asset_id: int = 1, name: str = "photo", **overrides) -> AssetRecord:
    return AssetRecord.model_validate(asset_payload(asset_id, name, **overrides))


def form_fields(request: httpx.Request) -> dict[str, str]:
    """Decode the fields of a multipart/form-data request."""
    content_type = request.headers["Content-Type"]
    assert content_type.startswith("multipart/form-data")
    boundary = content_type.split("boundary=")[1].encode()

    fields = {}
    for part in request.content.split(b"--" + boundary):
        if b"Content-Disposition" not in part:
            continue
        head, _, body = part.partition(b"\r\n\r\n")
        name = re.search(rb'name="([^"]+)"', head).group(1).decode()
        fields[name] = body[: -len(b"\r\n")].decode()
    return fields
