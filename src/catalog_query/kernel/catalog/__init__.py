"""Kernel catalog – product record value objects."""
from catalog_query.kernel.catalog.item import CatalogItem, Rating

__all__ = ["CatalogItem", "Rating"]
