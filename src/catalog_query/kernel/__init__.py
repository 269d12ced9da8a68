"""Kernel – catalog value objects, text helpers and the error hierarchy."""

from catalog_query.kernel.catalog import CatalogItem, Rating
from catalog_query.kernel.errors import ApplicationError, BaseError

__all__ = ["ApplicationError", "BaseError", "CatalogItem", "Rating"]
