"""Observability – structured logging helpers."""
from catalog_query.observability.logging.factory import JsonLoggerFactory
from catalog_query.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
