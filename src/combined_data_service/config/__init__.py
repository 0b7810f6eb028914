"""Configuration module for combined data service."""

from .settings import LogLevel, Settings, get_settings

__all__ = ["LogLevel", "Settings", "get_settings"]
