"""API module for combined data service."""

from .client import CollectionClient

__all__ = ["CollectionClient"]
