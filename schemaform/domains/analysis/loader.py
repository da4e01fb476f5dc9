"""
Schema Loader - Build schema trees from JSON-compatible documents.

Document shape::

    {
        "type": "array",
        "init": "<li>(.*?)</li>",
        "properties": {
            "title": "<b>(.*?)</b>",
            "price": {"type": "number", "rule": "\\$([\\d.]+)"}
        }
    }

A bare string node is shorthand for ``{"type": "string", "rule": <string>}``.
The loader knows nothing about selectors: raw ``rule``/``init`` sources are
handed to caller-supplied factories.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from schemaform.config.errors import SchemaError

from .contracts import Init, Rule
from .models import Kind, Schema

logger = logging.getLogger(__name__)

__all__ = ["RuleFactory", "InitFactory", "load_schema", "load_schema_file"]

RuleFactory = Callable[[Any], Rule]
InitFactory = Callable[[Any], Init]

_NODE_KEYS = frozenset({"type", "format", "init", "rule", "properties"})


def load_schema(
    data: Any,
    rule_factory: RuleFactory,
    init_factory: InitFactory | None = None,
) -> Schema:
    """
    Build a schema tree.

    Args:
        data: Schema document (mapping or shorthand string)
        rule_factory: Turns a raw rule source into a Rule
        init_factory: Turns a raw init source into an Init

    Returns:
        Root schema node

    Raises:
        SchemaError: If any node is malformed
    """
    return _load_node(data, "$", rule_factory, init_factory)


def load_schema_file(
    path: Path | str,
    rule_factory: RuleFactory,
    init_factory: InitFactory | None = None,
) -> Schema:
    """Build a schema tree from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SchemaError(f"invalid JSON in {path}: {e}", {"file": str(path)}) from e

    schema = load_schema(data, rule_factory, init_factory)
    logger.debug("Loaded schema from %s", path)
    return schema


def _load_node(
    data: Any,
    path: str,
    rule_factory: RuleFactory,
    init_factory: InitFactory | None,
) -> Schema:
    if isinstance(data, str):
        return Schema(kind=Kind.STRING, rule=_build(rule_factory, data, path, "rule"))

    if not isinstance(data, dict):
        raise SchemaError(
            f"schema node {path} must be an object or a string",
            {"path": path, "type": type(data).__name__},
        )

    unknown = set(data) - _NODE_KEYS
    if unknown:
        raise SchemaError(
            f"schema node {path} has unknown keys: {', '.join(sorted(unknown))}",
            {"path": path},
        )
    if "type" not in data:
        raise SchemaError(f"schema node {path} has no type", {"path": path})

    kind = _parse_kind(data["type"], path)
    fmt = _parse_kind(data["format"], path) if data.get("format") is not None else None

    rule = None
    if data.get("rule") is not None:
        rule = _build(rule_factory, data["rule"], path, "rule")

    init = None
    if data.get("init") is not None:
        if init_factory is None:
            raise SchemaError(f"schema node {path} has an init but no init factory", {"path": path})
        init = _build(init_factory, data["init"], path, "init")

    raw_properties = data.get("properties") or {}
    if not isinstance(raw_properties, dict):
        raise SchemaError(f"properties of {path} must be an object", {"path": path})
    properties = {
        name: _load_node(child, f"{path}.{name}", rule_factory, init_factory)
        for name, child in raw_properties.items()
    }

    try:
        return Schema(kind=kind, format=fmt, properties=properties, rule=rule, init=init)
    except ValueError as e:
        raise SchemaError(f"invalid schema node {path}: {e}", {"path": path}) from e


def _parse_kind(value: Any, path: str) -> Kind:
    try:
        return Kind(value)
    except ValueError as e:
        raise SchemaError(f"unknown type {value!r} at {path}", {"path": path}) from e


def _build(factory: Callable[[Any], Any], source: Any, path: str, name: str) -> Any:
    try:
        return factory(source)
    except (TypeError, ValueError) as e:
        raise SchemaError(f"invalid {name} at {path}: {e}", {"path": path}) from e
