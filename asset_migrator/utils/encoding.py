"""Payload encoding utilities."""
import base64

DATA_URI_PREFIX = "data:image/jpg;base64,"


def encode_data_uri(content: bytes, prefix: str = DATA_URI_PREFIX) -> str:
    """Encode raw bytes as a base64 data URI accepted by the upload API."""
    return prefix + base64.b64encode(content).decode("ascii")
