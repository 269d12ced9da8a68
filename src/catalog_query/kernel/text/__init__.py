"""Kernel text – sanitisation and formatting helpers."""
from catalog_query.kernel.text.formatters import ELLIPSIS, truncate_string
from catalog_query.kernel.text.sanitizer import escape_html, sanitize_string

__all__ = ["ELLIPSIS", "escape_html", "sanitize_string", "truncate_string"]
