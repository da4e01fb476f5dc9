"""
Error Taxonomy - Consistent error codes across the engine.

Usage:
    from schemaform.config.errors import ExtractionError

    raise ExtractionError("selector matched nothing", {"selector": ".title"})
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error reporting."""

    # Extraction errors (Rule / Init programs)
    EXTRACTION_FAILED = "EXTRACTION_FAILED"

    # Coercion errors (FormatHandler)
    COERCION_FAILED = "COERCION_FAILED"

    # Element resolution errors
    UNEXPECTED_CONTENT = "UNEXPECTED_CONTENT"

    # Schema errors
    SCHEMA_INVALID = "SCHEMA_INVALID"
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class SchemaformError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a log/API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ExtractionError(SchemaformError):
    """A Rule or Init program could not extract a value."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.EXTRACTION_FAILED, message, details)


class CoercionError(SchemaformError):
    """A value could not be converted to the requested kind."""

    def __init__(self, value: Any, kind: Any, reason: str = "") -> None:
        self.value = value
        self.kind = kind
        target = getattr(kind, "value", kind)
        message = f"cannot convert {value!r} to {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            ErrorCode.COERCION_FAILED,
            message,
            {"value": repr(value), "kind": str(target)},
        )


class ContentShapeError(SchemaformError):
    """Content is neither a string nor a sequence of strings."""

    def __init__(self, content: Any) -> None:
        type_name = type(content).__name__
        super().__init__(
            ErrorCode.UNEXPECTED_CONTENT,
            f"unexpected content type {type_name}",
            {"type": type_name},
        )


class DepthLimitError(SchemaformError):
    """Schema nesting went deeper than the configured ceiling."""

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(
            ErrorCode.DEPTH_EXCEEDED,
            f"schema depth {depth} exceeds limit {limit}",
            {"depth": depth, "limit": limit},
        )


class SchemaError(SchemaformError):
    """Malformed schema document."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.SCHEMA_INVALID, message, details)
