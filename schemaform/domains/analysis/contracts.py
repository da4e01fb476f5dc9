"""
Analysis Contracts - Capabilities the analysis engine consumes.

Rule and Init programs signal an extraction failure by raising
``ExtractionError``; format handlers signal a coercion failure by raising
``CoercionError``. Any other exception escaping them is treated as an
uncontrolled fault.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .context import AnalyzeContext
    from .models import Kind


@runtime_checkable
class Rule(Protocol):
    """
    Contract for leaf value extraction programs.

    Example:
        >>> class TitleRule:
        ...     def get_string(self, ctx, content):
        ...         return content.split("\\n")[0]
        ...     def get_strings(self, ctx, content):
        ...         return content.split("\\n")
        >>> assert isinstance(TitleRule(), Rule)
    """

    def get_string(self, ctx: AnalyzeContext, content: Any) -> str:
        """
        Extract one final value from content.

        Raises:
            ExtractionError: If nothing could be extracted
        """
        ...

    def get_strings(self, ctx: AnalyzeContext, content: Any) -> list[str]:
        """
        Extract every final value from content.

        Raises:
            ExtractionError: If nothing could be extracted
        """
        ...


@runtime_checkable
class Init(Protocol):
    """
    Contract for element-context programs.

    An Init locates the sub-content that the nested properties of an
    object or array schema are evaluated against.
    """

    def get_element(self, ctx: AnalyzeContext, content: Any) -> str:
        """
        Extract one element context from content.

        Raises:
            ExtractionError: If no element could be located
        """
        ...

    def get_elements(self, ctx: AnalyzeContext, content: Any) -> list[str]:
        """
        Extract every element context from content.

        Raises:
            ExtractionError: If no element could be located
        """
        ...


@runtime_checkable
class FormatHandler(Protocol):
    """
    Contract for type coercion of extracted values.

    Implementations must be safe for concurrent use.
    """

    def format(self, value: Any, kind: Kind) -> Any:
        """
        Convert value to the given kind.

        Raises:
            CoercionError: If the value cannot be converted
        """
        ...


@runtime_checkable
class Logger(Protocol):
    """Leveled logging capability; ``logging.Logger`` satisfies it."""

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
