"""
CLI Interface - Command-line tools for Schemaform.

Provides commands for:
- Analyzing documents with a JSON schema
- Validating schema files
"""

from .main import app, main

__all__ = ["app", "main"]
