"""
Schemaform - Schema-driven structured data extraction.

Example:
    >>> from schemaform import Kind, Schema, analyze
    >>> from schemaform.adapters import RegexRule
    >>> schema = Schema(kind=Kind.INTEGER, rule=RegexRule(r"(\\d+) views"))
    >>> analyze(schema, "1024 views")
    1024
"""

from schemaform.domains.analysis import (
    AnalysisResult,
    Analyzer,
    AnalyzeContext,
    FormatHandler,
    Init,
    Kind,
    Rule,
    Schema,
    analyze,
    get_formatter,
    set_formatter,
)

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "AnalysisResult",
    "Analyzer",
    "AnalyzeContext",
    "FormatHandler",
    "Init",
    "Kind",
    "Rule",
    "Schema",
    "analyze",
    "get_formatter",
    "set_formatter",
]
