"""
Analysis Context - Per-pass state handed to every Rule and Init call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .contracts import Logger

__all__ = ["AnalyzeContext"]

_default_logger = logging.getLogger("schemaform.analyze")


@dataclass
class AnalyzeContext:
    """
    Context of one analysis pass.

    Example:
        >>> ctx = AnalyzeContext(url="https://example.com/post/1")
        >>> ctx.set_value("page", 2)
        >>> ctx.get_value("page")
        2
    """

    logger: Logger = field(default_factory=lambda: _default_logger)
    url: str | None = None
    base_url: str | None = None
    values: dict[str, Any] = field(default_factory=dict)

    def get_value(self, key: str, default: Any = None) -> Any:
        """Get a value shared between rules of this pass."""
        return self.values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        """Share a value with later rules of this pass."""
        self.values[key] = value
