"""Root error class for the catalog-query error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    The query pipeline and paginator never raise; these errors come only from
    explicit settings loading, where ``detail`` names the offending setting.
    """

    default_code: str = "base_error"

    def __init__(self, message: str, *, code: str | None = None, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for structured log events."""
        return {"code": self.code, "message": self.message, "detail": self.detail}


__all__ = ["BaseError"]
