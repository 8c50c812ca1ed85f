"""Source content API integration."""
from asset_migrator.services.source.client import SourceClient

__all__ = ["SourceClient"]
