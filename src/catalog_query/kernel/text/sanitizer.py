"""Kernel text – HTML escaping and user-input sanitisation."""
from __future__ import annotations

from typing import Any

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def escape_html(text: Any) -> str:
    """Escape the five HTML special characters; non-strings become ``""``."""
    if not isinstance(text, str):
        return ""
    return text.translate(_HTML_ESCAPES)


def sanitize_string(text: Any) -> str:
    """Escape *text* and strip surrounding whitespace.

    Used on free-text search input before it is matched against catalog
    fields, so a query of only whitespace sanitises to ``""``.
    """
    return escape_html(text).strip()


__all__ = ["escape_html", "sanitize_string"]
