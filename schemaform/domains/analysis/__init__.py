"""
Analysis Domain - Schema-driven structured data extraction.

This domain handles:
- Schema trees describing the desired output shape
- Recursive evaluation of schemas against documents
- Type coercion of extracted values
- Loading schemas from JSON documents
"""

from .analyzer import Analyzer, analyze
from .context import AnalyzeContext
from .contracts import FormatHandler, Init, Logger, Rule
from .formatter import DefaultFormatHandler, FormatterCell, get_formatter, set_formatter
from .loader import InitFactory, RuleFactory, load_schema, load_schema_file
from .models import AnalysisResult, Kind, Schema

__all__ = [
    # Contracts
    "Rule",
    "Init",
    "FormatHandler",
    "Logger",
    # Models
    "Kind",
    "Schema",
    "AnalysisResult",
    "AnalyzeContext",
    # Implementations
    "Analyzer",
    "analyze",
    "DefaultFormatHandler",
    "FormatterCell",
    "get_formatter",
    "set_formatter",
    # Loading
    "RuleFactory",
    "InitFactory",
    "load_schema",
    "load_schema_file",
]
