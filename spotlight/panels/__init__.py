# Spotlight Panels Package
"""
Panel implementations for the search box.
"""

from .search import SearchPanel

__all__ = ["SearchPanel"]
