"""Request signing for the destination upload API.

The destination verifies uploads by recomputing this digest, so the
canonical form below is a wire protocol:

    sorted "key=value" pairs joined by "&", secret appended, SHA-1, lowercase hex
"""
import hashlib
from typing import Mapping


def canonical_string(params: Mapping[str, object]) -> str:
    """Join parameters as ``key=value`` pairs sorted by key."""
    return "&".join(f"{key}={params[key]}" for key in sorted(params))


def sign_params(params: Mapping[str, object], api_secret: str) -> str:
    """Return the hex SHA-1 digest of the canonical parameters plus secret."""
    to_sign = canonical_string(params) + api_secret
    return hashlib.sha1(to_sign.encode("utf-8")).hexdigest()


def generate_signature(
    folder: str,
    display_name: str,
    public_id: str,
    timestamp: int,
    api_secret: str,
) -> str:
    """
    Sign the parameters of one upload.

    Args:
        folder: Destination folder name
        display_name: Display name of the asset
        public_id: Public identifier of the asset
        timestamp: Unix timestamp in seconds, sent verbatim in the request
        api_secret: Destination API secret

    Returns:
        40-character lowercase hexadecimal digest
    """
    params = {
        "folder": folder,
        "display_name": display_name,
        "public_id": public_id,
        "timestamp": str(int(timestamp)),
    }
    return sign_params(params, api_secret)
