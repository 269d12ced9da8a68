"""Kernel text – display formatters."""
from __future__ import annotations

from typing import Any

ELLIPSIS = "..."


def truncate_string(text: Any, max_length: int = 50) -> Any:
    """Cut *text* to *max_length* characters and append an ellipsis.

    Strings that already fit, and non-string values, are returned unchanged.
    Whitespace left at the cut point is stripped before the ellipsis.
    """
    if not isinstance(text, str) or len(text) <= max_length:
        return text
    return f"{text[:max_length].strip()}{ELLIPSIS}"


__all__ = ["ELLIPSIS", "truncate_string"]
