"""
Tests for loading schema trees from JSON documents.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from schemaform.config.errors import SchemaError

from .context import AnalyzeContext
from .loader import load_schema, load_schema_file
from .models import Kind


class SourceRule:
    """Rule remembering the raw source it was built from."""

    def __init__(self, source: Any) -> None:
        if source == "invalid":
            raise ValueError("bad rule source")
        self.source = source

    def get_string(self, ctx: AnalyzeContext, content: Any) -> str:
        return str(self.source)

    def get_strings(self, ctx: AnalyzeContext, content: Any) -> list[str]:
        return [str(self.source)]


class SourceInit:
    """Init remembering the raw source it was built from."""

    def __init__(self, source: Any) -> None:
        self.source = source

    def get_element(self, ctx: AnalyzeContext, content: Any) -> str:
        return str(content)

    def get_elements(self, ctx: AnalyzeContext, content: Any) -> list[str]:
        return [str(content)]


# --- load_schema Tests ---


def test_shorthand_string_node() -> None:
    """Test a bare string is a string node with that rule."""
    schema = load_schema("h1", SourceRule)
    assert schema.kind is Kind.STRING
    assert schema.rule.source == "h1"


def test_full_tree() -> None:
    """Test nested nodes, formats, inits and rules are all built."""
    document = {
        "type": "array",
        "init": "li",
        "properties": {
            "title": "b",
            "price": {"type": "string", "format": "number", "rule": {"regex": "\\d+"}},
            "tags": {"type": "array", "rule": "span"},
        },
    }

    schema = load_schema(document, SourceRule, SourceInit)

    assert schema.kind is Kind.ARRAY
    assert schema.init.source == "li"
    assert schema.rule is None
    assert list(schema.properties) == ["title", "price", "tags"]
    price = schema.properties["price"]
    assert price.kind is Kind.STRING
    assert price.format is Kind.NUMBER
    assert price.rule.source == {"regex": "\\d+"}
    assert schema.properties["tags"].kind is Kind.ARRAY


@pytest.mark.parametrize(
    ("document", "fragment"),
    [
        ({"type": "date", "rule": "x"}, "unknown type 'date' at $"),
        ({"rule": "x"}, "has no type"),
        ({"type": "string", "selector": "x"}, "unknown keys: selector"),
        ({"type": "object", "properties": ["a"]}, "properties of $"),
        ({"type": "object", "properties": {"a": 5}}, "$.a must be an object or a string"),
        ({"type": "string", "rule": "invalid"}, "invalid rule at $"),
        ({"type": "integer", "properties": {"a": "x"}}, "invalid schema node $"),
        ({"type": "string", "format": "when", "rule": "x"}, "unknown type 'when'"),
    ],
)
def test_malformed_documents(document: Any, fragment: str) -> None:
    """Test malformed nodes raise SchemaError naming the node."""
    with pytest.raises(SchemaError) as exc_info:
        load_schema(document, SourceRule, SourceInit)
    assert fragment in exc_info.value.message


def test_init_requires_factory() -> None:
    """Test an init source without an init factory is rejected."""
    with pytest.raises(SchemaError, match="no init factory"):
        load_schema({"type": "object", "init": "div", "properties": {"a": "x"}}, SourceRule)


def test_nested_error_path() -> None:
    """Test errors deep in the tree report the full path."""
    document = {
        "type": "object",
        "properties": {"author": {"type": "object", "properties": {"name": {"type": "nope"}}}},
    }
    with pytest.raises(SchemaError) as exc_info:
        load_schema(document, SourceRule)
    assert exc_info.value.details["path"] == "$.author.name"


# --- load_schema_file Tests ---


def test_load_schema_file(tmp_path: Path) -> None:
    """Test loading from a JSON file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"type": "object", "properties": {"title": "h1"}}))

    schema = load_schema_file(path, SourceRule)

    assert schema.kind is Kind.OBJECT
    assert schema.properties["title"].rule.source == "h1"


def test_load_schema_file_invalid_json(tmp_path: Path) -> None:
    """Test invalid JSON raises SchemaError."""
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(SchemaError, match="invalid JSON"):
        load_schema_file(path, SourceRule)
