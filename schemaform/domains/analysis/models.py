"""
Analysis Models - Schema tree and result types for the analysis domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .contracts import Init, Rule


class Kind(str, Enum):
    """Kinds of value a schema node produces."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    @property
    def is_scalar(self) -> bool:
        """True for kinds extracted directly as a leaf value."""
        return self not in (Kind.OBJECT, Kind.ARRAY)

    def zero_value(self) -> Any:
        """Value used in place of a failed coercion to this kind."""
        return _ZERO_VALUES[self]


_ZERO_VALUES: dict[Kind, Any] = {
    Kind.STRING: "",
    Kind.INTEGER: 0,
    Kind.NUMBER: 0.0,
    Kind.BOOLEAN: False,
    Kind.OBJECT: None,
    Kind.ARRAY: None,
}


class Schema(BaseModel):
    """
    One node of a schema tree.

    Object and array nodes either decompose into ``properties`` evaluated
    against the element context located by ``init``, or delegate to ``rule``
    to produce a ready-made value. Scalar nodes always use ``rule``.

    Example:
        >>> post = Schema(kind=Kind.OBJECT).with_property(
        ...     "title", Schema(kind=Kind.STRING, rule=title_rule)
        ... )
    """

    kind: Kind
    format: Kind | None = None
    properties: dict[str, Schema] = Field(default_factory=dict)
    rule: Any = None
    init: Any = None

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("rule")
    @classmethod
    def check_rule(cls, value: Any) -> Any:
        """Rule must implement get_string/get_strings."""
        if value is not None and not isinstance(value, Rule):
            raise ValueError(f"rule {type(value).__name__} does not implement Rule")
        return value

    @field_validator("init")
    @classmethod
    def check_init(cls, value: Any) -> Any:
        """Init must implement get_element/get_elements."""
        if value is not None and not isinstance(value, Init):
            raise ValueError(f"init {type(value).__name__} does not implement Init")
        return value

    @model_validator(mode="after")
    def check_properties(self) -> Schema:
        """Only object and array nodes decompose into properties."""
        if self.properties and self.kind.is_scalar:
            raise ValueError(f"{self.kind.value} schema cannot have properties")
        return self

    def clone_with_kind(self, kind: Kind) -> Schema:
        """Copy of this node relabeled to another kind."""
        return self.model_copy(update={"kind": kind})

    def with_properties(self, properties: dict[str, Schema]) -> Schema:
        """Copy of this node with its properties replaced."""
        return self._replace(properties=dict(properties))

    def with_property(self, name: str, schema: Schema) -> Schema:
        """Copy of this node with one property added or replaced."""
        return self._replace(properties={**self.properties, name: schema})

    def with_rule(self, rule: Rule | None) -> Schema:
        return self._replace(rule=rule)

    def with_init(self, init: Init | None) -> Schema:
        return self._replace(init=init)

    def with_format(self, format: Kind | None) -> Schema:
        return self._replace(format=format)

    def _replace(self, **changes: Any) -> Schema:
        fields = {
            "kind": self.kind,
            "format": self.format,
            "properties": self.properties,
            "rule": self.rule,
            "init": self.init,
        }
        fields.update(changes)
        return type(self)(**fields)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis pass."""

    value: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        """True when the pass completed without an uncontrolled fault."""
        return self.error is None
