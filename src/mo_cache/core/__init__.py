"""Domain layer - Pure entities describing loaded catalogs."""

from .catalog_handle import CatalogHandle

__all__ = ["CatalogHandle"]
