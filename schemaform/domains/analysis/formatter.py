"""
Formatter - Type coercion of extracted values.

The default handler converts raw strings (or lists/mappings of them) into
the requested kind. Hosts replace it process-wide with ``set_formatter`` or
per analyzer by handing a ``FormatterCell`` to ``Analyzer``.
"""

from __future__ import annotations

import json
import re
from typing import Any

from schemaform.config.errors import CoercionError

from .contracts import FormatHandler
from .models import Kind

__all__ = [
    "DefaultFormatHandler",
    "FormatterCell",
    "get_formatter",
    "set_formatter",
]

_TRUE_STRINGS = frozenset({"1", "t", "true"})
_FALSE_STRINGS = frozenset({"0", "f", "false"})
_ZERO_DECIMAL = re.compile(r"^([+-]?\d+)\.0*$")


class DefaultFormatHandler:
    """
    Built-in, stateless format handler.

    - ``str``: parsed to the target kind; arrays and objects are JSON-decoded
    - values already of the target kind: returned as is (integers widen to numbers)
    - ``list``: converted element-wise
    - ``dict``: converted value-wise
    - anything else: ``CoercionError``

    Inside lists and mappings conversion is best-effort: a string that fails
    becomes the kind's zero value, any other item is kept unchanged.
    """

    def format(self, value: Any, kind: Kind) -> Any:
        if isinstance(value, str):
            return self._format_string(value, kind)
        if isinstance(value, (list, tuple)):
            return [self._format_lenient(item, kind) for item in value]
        if isinstance(value, dict):
            return {key: self._format_lenient(item, kind) for key, item in value.items()}
        if kind is Kind.BOOLEAN and isinstance(value, bool):
            return value
        if kind is Kind.INTEGER and isinstance(value, int) and not isinstance(value, bool):
            return value
        if kind is Kind.NUMBER and isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        raise CoercionError(value, kind, f"unexpected type {type(value).__name__}")

    def _format_lenient(self, value: Any, kind: Kind) -> Any:
        try:
            return self.format(value, kind)
        except CoercionError:
            return kind.zero_value() if isinstance(value, str) else value

    def _format_string(self, value: str, kind: Kind) -> Any:
        if kind is Kind.STRING:
            return value
        if kind is Kind.INTEGER:
            return _parse_int(value, kind)
        if kind is Kind.NUMBER:
            try:
                return float(value.strip())
            except ValueError as e:
                raise CoercionError(value, kind, str(e)) from e
        if kind is Kind.BOOLEAN:
            return _parse_bool(value, kind)
        if kind is Kind.ARRAY:
            return _decode_json(value, kind, list)
        if kind is Kind.OBJECT:
            return _decode_json(value, kind, dict)
        raise CoercionError(value, kind, "unknown kind")


def _parse_int(value: str, kind: Kind) -> int:
    text = value.strip()
    match = _ZERO_DECIMAL.match(text)
    if match:
        text = match.group(1)
    try:
        # Base 0 accepts 0x/0o/0b prefixes
        return int(text, 0)
    except ValueError:
        pass
    try:
        # Plain decimals with leading zeros, e.g. "007"
        return int(text, 10)
    except ValueError as e:
        raise CoercionError(value, kind, str(e)) from e


def _parse_bool(value: str, kind: Kind) -> bool:
    text = value.strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise CoercionError(value, kind, "invalid boolean")


def _decode_json(value: str, kind: Kind, expected: type) -> Any:
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError as e:
        raise CoercionError(value, kind, str(e)) from e
    if not isinstance(decoded, expected):
        raise CoercionError(value, kind, f"decoded {type(decoded).__name__}")
    return decoded


class FormatterCell:
    """
    Swappable holder of the active format handler.

    A swap is a single reference assignment: readers see either the old or
    the new handler, never a mix. Passes already running are not coordinated
    with a swap.
    """

    def __init__(self, handler: FormatHandler | None = None) -> None:
        self._handler: FormatHandler = handler or DefaultFormatHandler()

    def get(self) -> FormatHandler:
        return self._handler

    def set(self, handler: FormatHandler) -> None:
        # str has a format method of its own
        if (
            isinstance(handler, (str, bytes))
            or not isinstance(handler, FormatHandler)
            or not callable(handler.format)
        ):
            raise TypeError(f"{type(handler).__name__} does not implement FormatHandler")
        self._handler = handler


default_cell = FormatterCell()


def set_formatter(handler: FormatHandler) -> None:
    """Replace the process-wide format handler."""
    default_cell.set(handler)


def get_formatter() -> FormatHandler:
    """Get the process-wide format handler."""
    return default_cell.get()
