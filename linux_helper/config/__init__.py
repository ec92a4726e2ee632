"""
Configuration Module.
Exposes the Settings object and the loaders.
"""

from .settings import Settings, get_settings, load_settings

__all__ = ["Settings", "get_settings", "load_settings"]
