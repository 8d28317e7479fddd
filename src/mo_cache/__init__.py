"""
MO Cache - persistent memoization for compiled translation catalog lookups.

This package provides:
- A translator that serves gettext lookups from a warm cache
- File and shared (Redis) persistence backends with mtime invalidation
- A registry that intercepts catalog loads per text domain
"""

__version__ = "1.0.0"

# Make key components available at package level
from mo_cache.core import CatalogHandle
from mo_cache.coordinators import TranslationCacheController, TranslatorRegistry

__all__ = [
    "CatalogHandle",
    "TranslationCacheController",
    "TranslatorRegistry",
]
