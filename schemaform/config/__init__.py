"""
Configuration - Engine settings, error taxonomy, and logging setup.
"""

from .errors import (
    CoercionError,
    ContentShapeError,
    DepthLimitError,
    ErrorCode,
    ExtractionError,
    SchemaError,
    SchemaformError,
)
from .logging import configure_logging
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "SchemaformError",
    "ExtractionError",
    "CoercionError",
    "ContentShapeError",
    "DepthLimitError",
    "SchemaError",
    # Logging
    "configure_logging",
]
