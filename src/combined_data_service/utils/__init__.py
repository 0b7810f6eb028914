"""Utility helpers for combined data service."""

from .logging import setup_logging

__all__ = ["setup_logging"]
