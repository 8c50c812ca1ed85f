"""Migrate media assets from a source upload API to a media host."""

__version__ = "1.0.0"
