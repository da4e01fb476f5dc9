"""
Regex Programs - Rule and Init implementations backed by regular expressions.

Features:
- Plain pattern strings or ``{"pattern", "group", "flags"}`` sources
- Single or capture-group selection
- List content is searched as newline-joined text
"""

from __future__ import annotations

import logging
import re
from typing import Any

from schemaform.config.errors import ExtractionError
from schemaform.domains.analysis.context import AnalyzeContext

logger = logging.getLogger(__name__)

__all__ = [
    "RegexInit",
    "RegexRule",
    "regex_init_factory",
    "regex_rule_factory",
]

_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


class _RegexProgram:
    """Shared matching logic of regex rules and inits."""

    def __init__(
        self,
        pattern: str,
        group: int | str | None = None,
        flags: str = "",
    ) -> None:
        """
        Compile the program.

        Args:
            pattern: Regular expression
            group: Capture group to return; defaults to group 1 when the
                pattern has groups, else the whole match
            flags: Any of "imsx"

        Raises:
            ValueError: If the pattern, group or flags are invalid
        """
        compiled_flags = 0
        for letter in flags:
            if letter not in _FLAGS:
                raise ValueError(f"unknown regex flag {letter!r}")
            compiled_flags |= _FLAGS[letter]

        try:
            self.regex = re.compile(pattern, compiled_flags)
        except re.error as e:
            raise ValueError(f"invalid pattern {pattern!r}: {e}") from e

        if group is None:
            group = 1 if self.regex.groups else 0
        if isinstance(group, int) and group > self.regex.groups:
            raise ValueError(f"pattern {pattern!r} has no group {group}")
        if isinstance(group, str) and group not in self.regex.groupindex:
            raise ValueError(f"pattern {pattern!r} has no group {group!r}")
        self.group = group

    @classmethod
    def from_source(cls, source: Any) -> _RegexProgram:
        """Build from a pattern string or a ``{"pattern", "group", "flags"}`` mapping."""
        if isinstance(source, str):
            return cls(source)
        if isinstance(source, dict) and isinstance(source.get("pattern"), str):
            return cls(
                source["pattern"],
                group=source.get("group"),
                flags=source.get("flags", ""),
            )
        raise TypeError(f"unsupported regex source {source!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.regex.pattern!r}, group={self.group!r})"

    def _text(self, content: Any) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, (list, tuple)) and all(isinstance(c, str) for c in content):
            return "\n".join(content)
        raise ExtractionError(
            f"cannot search {type(content).__name__} content",
            {"pattern": self.regex.pattern},
        )

    def _first(self, content: Any) -> str:
        match = self.regex.search(self._text(content))
        if match is None:
            raise ExtractionError(
                f"pattern {self.regex.pattern!r} matched nothing",
                {"pattern": self.regex.pattern},
            )
        return match.group(self.group) or ""

    def _all(self, content: Any) -> list[str]:
        return [m.group(self.group) or "" for m in self.regex.finditer(self._text(content))]


class RegexRule(_RegexProgram):
    """
    Rule extracting leaf values with a regular expression.

    Example:
        >>> rule = RegexRule(r"<h1>(.*?)</h1>")
        >>> rule.get_string(AnalyzeContext(), "<h1>Hello</h1>")
        'Hello'
    """

    def get_string(self, ctx: AnalyzeContext, content: Any) -> str:
        return self._first(content)

    def get_strings(self, ctx: AnalyzeContext, content: Any) -> list[str]:
        return self._all(content)


class RegexInit(_RegexProgram):
    """Init locating element contexts with a regular expression."""

    def get_element(self, ctx: AnalyzeContext, content: Any) -> str:
        return self._first(content)

    def get_elements(self, ctx: AnalyzeContext, content: Any) -> list[str]:
        elements = self._all(content)
        logger.debug("Pattern %r located %d elements", self.regex.pattern, len(elements))
        return elements


def regex_rule_factory(source: Any) -> RegexRule:
    """Rule factory for ``load_schema``."""
    return RegexRule.from_source(source)


def regex_init_factory(source: Any) -> RegexInit:
    """Init factory for ``load_schema``."""
    return RegexInit.from_source(source)
