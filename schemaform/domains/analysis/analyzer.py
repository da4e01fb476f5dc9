"""
Analyzer - Schema-driven structured data extraction.

Walks a schema tree depth-first, delegating raw text extraction to the
Rule and Init programs attached to each node and coercing the results
through the active format handler. Failures stay local to the node that
raised them: the node yields an absent value (``None``) and the rest of
the tree is still evaluated. Only ``analyze``/``analyze_result`` recover
from uncontrolled faults.

Example:
    >>> schema = Schema(kind=Kind.OBJECT).with_property(
    ...     "title", Schema(kind=Kind.STRING, rule=RegexRule(r"<h1>(.*?)</h1>", group=1))
    ... )
    >>> analyze(schema, "<h1>Hello</h1>")
    {'title': 'Hello'}
"""

from __future__ import annotations

import traceback
from typing import Any

from schemaform.config.errors import (
    CoercionError,
    ContentShapeError,
    DepthLimitError,
    ExtractionError,
)
from schemaform.config.settings import Settings, get_settings

from .context import AnalyzeContext
from .formatter import FormatterCell, default_cell
from .models import AnalysisResult, Kind, Schema

__all__ = ["Analyzer", "analyze"]


class Analyzer:
    """
    Schema interpreter.

    Holds the formatter cell and settings used by its passes; both may be
    shared between analyzers. An analyzer keeps no per-pass state, so one
    instance can serve concurrent passes.
    """

    def __init__(
        self,
        formatter: FormatterCell | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize analyzer.

        Args:
            formatter: Format handler cell (defaults to the process-wide cell)
            settings: Engine settings (defaults to the cached settings)
        """
        self.formatter = formatter or default_cell
        self.settings = settings or get_settings()

    @property
    def _extra(self) -> dict[str, Any]:
        return {"category": self.settings.log_category}

    def analyze(
        self,
        schema: Schema,
        content: Any,
        ctx: AnalyzeContext | None = None,
    ) -> Any:
        """
        Extract a value described by schema from content.

        Args:
            schema: Root schema node
            content: Document text, list of strings, or a prior extraction result
            ctx: Pass context (a fresh one when omitted)

        Returns:
            The extracted value, or None if nothing could be extracted
        """
        return self.analyze_result(schema, content, ctx).value

    def analyze_result(
        self,
        schema: Schema,
        content: Any,
        ctx: AnalyzeContext | None = None,
    ) -> AnalysisResult:
        """
        Like ``analyze``, but reports an uncontrolled fault instead of hiding it.

        The fault is logged either way; the result's value is then None.
        """
        ctx = ctx or AnalyzeContext()
        try:
            value = self._dispatch(ctx, schema, content, self.settings.root_path, 0)
        except Exception as e:
            ctx.logger.error(
                "analyze error %s",
                e,
                exc_info=True,
                extra={**self._extra, "stack": traceback.format_exc()},
            )
            return AnalysisResult(value=None, error=e)
        return AnalysisResult(value=value)

    def _dispatch(
        self,
        ctx: AnalyzeContext,
        schema: Schema,
        content: Any,
        path: str,
        depth: int,
    ) -> Any:
        if depth > self.settings.max_depth:
            err = DepthLimitError(depth, self.settings.max_depth)
            ctx.logger.error(
                "analyze %s failed",
                path,
                extra={**self._extra, "path": path, "error": str(err)},
            )
            return None

        kind = schema.kind
        if kind in (Kind.STRING, Kind.INTEGER, Kind.NUMBER, Kind.BOOLEAN):
            return self._analyze_leaf(ctx, schema, content, path)
        if kind is Kind.OBJECT:
            return self._analyze_object(ctx, schema, content, path, depth)
        if kind is Kind.ARRAY:
            return self._analyze_array(ctx, schema, content, path, depth)
        return None

    def _analyze_leaf(
        self,
        ctx: AnalyzeContext,
        schema: Schema,
        content: Any,
        path: str,
    ) -> Any:
        """
        Extract a leaf value with the node's rule, then coerce it.

        The raw value is coerced to the node's kind (unless it is a string
        or array node), then again to ``format`` when one is set. A failed
        coercion ends the node with the target kind's zero value.

        An array node formatted as array decodes its rule values as JSON
        array literals: a single literal becomes the array itself, several
        literals become an array of arrays.
        """
        if schema.rule is None:
            return None

        try:
            if schema.kind is Kind.ARRAY:
                result = schema.rule.get_strings(ctx, content)
            else:
                result = schema.rule.get_string(ctx, content)
        except ExtractionError as e:
            ctx.logger.error(
                "analyze %s failed",
                path,
                extra={**self._extra, "path": path, "error": str(e)},
            )
            return None
        self._trace(ctx, "parse", path, result)

        if schema.kind is Kind.ARRAY and schema.format is Kind.ARRAY and len(result) == 1:
            result, _ = self._coerce(ctx, result[0], Kind.ARRAY, path)
            return result

        if schema.kind not in (Kind.STRING, Kind.ARRAY):
            result, ok = self._coerce(ctx, result, schema.kind, path)
            if not ok:
                return result

        if schema.format is not None:
            result, _ = self._coerce(ctx, result, schema.format, path)

        return result

    def _coerce(
        self,
        ctx: AnalyzeContext,
        value: Any,
        kind: Kind,
        path: str,
    ) -> tuple[Any, bool]:
        try:
            result = self.formatter.get().format(value, kind)
        except CoercionError as e:
            ctx.logger.error(
                "format %s failed %r to %s",
                path,
                value,
                kind.value,
                extra={**self._extra, "path": path, "error": str(e)},
            )
            return kind.zero_value(), False
        self._trace(ctx, "format", path, result)
        return result, True

    def _analyze_object(
        self,
        ctx: AnalyzeContext,
        schema: Schema,
        content: Any,
        path: str,
        depth: int,
    ) -> dict[str, Any] | None:
        """
        Build an object.

        With properties, the first resolved element is the content of every
        property; no element means no object. Without properties, the rule
        must yield a ready-made JSON object.
        """
        if schema.properties:
            elements = self._resolve_elements(ctx, schema, content, path)
            if not elements:
                return None
            element = elements[0]
            return {
                field: self._dispatch(ctx, field_schema, element, f"{path}.{field}", depth + 1)
                for field, field_schema in schema.properties.items()
            }
        if schema.rule is not None:
            return self._analyze_leaf(ctx, schema.clone_with_kind(Kind.OBJECT), content, path)
        return None

    def _analyze_array(
        self,
        ctx: AnalyzeContext,
        schema: Schema,
        content: Any,
        path: str,
        depth: int,
    ) -> list[Any] | None:
        """
        Build an array.

        With properties, every resolved element becomes one object, in
        resolution order; no element means an empty list. Without
        properties, the rule yields the items.
        """
        if schema.properties:
            elements = self._resolve_elements(ctx, schema, content, path)
            item_schema = Schema(kind=Kind.OBJECT, properties=schema.properties)
            return [
                self._dispatch(ctx, item_schema, element, f"{path}.[{i}]", depth + 1)
                for i, element in enumerate(elements)
            ]
        if schema.rule is not None:
            return self._analyze_leaf(ctx, schema.clone_with_kind(Kind.ARRAY), content, path)
        return None

    def _resolve_elements(
        self,
        ctx: AnalyzeContext,
        schema: Schema,
        content: Any,
        path: str,
    ) -> list[str]:
        """Locate the element contexts for a node's properties; never raises."""
        if schema.init is None:
            if isinstance(content, str):
                return [content]
            if isinstance(content, (list, tuple)) and all(isinstance(c, str) for c in content):
                return list(content)
            err = ContentShapeError(content)
            ctx.logger.error(
                "analyze %s init failed",
                path,
                extra={**self._extra, "path": path, "error": str(err)},
            )
            return []

        try:
            if schema.kind is Kind.ARRAY:
                elements = list(schema.init.get_elements(ctx, content))
            else:
                elements = [schema.init.get_element(ctx, content)]
        except ExtractionError as e:
            ctx.logger.error(
                "analyze %s init failed",
                path,
                extra={**self._extra, "path": path, "error": str(e)},
            )
            return []
        self._trace(ctx, "init", path, elements)
        return elements

    def _trace(self, ctx: AnalyzeContext, stage: str, path: str, result: Any) -> None:
        ctx.logger.debug(
            "%s %s -> %r",
            stage,
            path,
            result,
            extra={**self._extra, "stage": stage, "path": path, "result": result},
        )


def analyze(schema: Schema, content: Any, ctx: AnalyzeContext | None = None) -> Any:
    """Analyze with the process-wide formatter and cached settings."""
    return Analyzer().analyze(schema, content, ctx)
