# Spotlight Utilities Package
"""
Shared utility functions and helpers for the Spotlight search box.
"""

from .helpers import load_settings, settings_path, validate_settings

__all__ = ["load_settings", "settings_path", "validate_settings"]
