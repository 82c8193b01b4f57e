# snibbets/config/__init__.py
"""Configuration module for Snibbets."""

from snibbets.config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
