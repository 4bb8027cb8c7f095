"""Configuration module for the placeholder client."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
