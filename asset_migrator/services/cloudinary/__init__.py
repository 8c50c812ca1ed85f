"""Destination media host integration."""
from asset_migrator.services.cloudinary.client import CloudinaryClient
from asset_migrator.services.cloudinary.signature import (
    canonical_string,
    generate_signature,
    sign_params,
)

__all__ = [
    "CloudinaryClient",
    "canonical_string",
    "generate_signature",
    "sign_params",
]
