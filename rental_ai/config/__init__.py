"""
/**
 * @file rental_ai/config/__init__.py
 * @description Config module exports.
 */
"""

from .settings import Settings, load_settings, read_settings, reload_settings, CONFIG_PATH, CONFIG_LOCAL_PATH

__all__ = ["Settings", "load_settings", "read_settings", "reload_settings", "CONFIG_PATH", "CONFIG_LOCAL_PATH"]
