"""
Error types for media expression parsing, resolution, and stylesheet expansion.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class MediaQueryError(Exception):
    """Base exception for all mediaq errors."""

    # False when the extent of the failing block is unknown, so it cannot be skipped
    recoverable = True

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ExpressionSyntaxError(MediaQueryError):
    """
    Raised when a condition is neither a named expression nor contains
    a comparison operator.

    Examples:
    - "tablet" when "tablet" is a breakpoint but not a media expression
    - "width=768px"
    """

    pass


class UnknownBreakpointError(MediaQueryError):
    """
    Raised when a breakpoint name that must exist is missing.

    Examples:
    - Static fallback breakpoint not present in the breakpoint table
    """

    pass


class UnitError(MediaQueryError):
    """
    Raised when a unit cannot be used.

    Examples:
    - Unit suffix outside the supported CSS length units ("768pxx")
    - Resolved value whose unit has no rounding interval
    - Comparing lengths with incompatible units
    """

    pass


class ValueTypeError(MediaQueryError, TypeError):
    """Raised when a number is requested from something that is neither a number nor a string."""

    pass


class StylesheetError(MediaQueryError):
    """
    Raised when a stylesheet directive cannot be expanded.

    Examples:
    - Unbalanced braces after @include media(...)
    - Unterminated string inside directive arguments
    - Malformed media-context map
    """

    pass


class StylesheetStructureError(StylesheetError):
    """
    Raised when the structure of a stylesheet cannot be scanned.

    The end of the enclosing block is unknown, so this error is never
    downgraded to a warning.

    Examples:
    - Unbalanced braces or parentheses
    - Unterminated string or comment
    - Missing `{` after @include media(...)
    """

    recoverable = False


class ConfigError(MediaQueryError):
    """Raised when mediaq.yaml cannot be read or fails validation."""

    pass


@dataclass
class ErrorContext:
    """
    Location information for an error.

    Attributes:
        source: The expression or source line the error refers to
        column: Column number (1-indexed)
        line: Optional line number (1-indexed) within a stylesheet
        file: Optional stylesheet path
    """

    source: str
    column: int
    line: int | None = None
    file: Path | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "styles.scss:10:5" followed by the source
            line and a marker under the offending column.
        """
        location = ""
        if self.file is not None:
            location = f"{self.file}:{self.line or 1}:{self.column}"
        elif self.line is not None:
            location = f"line {self.line}, column {self.column}"

        snippet = self._format_snippet()
        if location:
            return f"{location}\n{snippet}"
        return snippet

    def _format_snippet(self) -> str:
        """Format the source with an error marker under the column."""
        prefix = "  | "
        marker_pos = len(prefix) + max(self.column, 1) - 1
        return f"{prefix}{self.source}\n{' ' * marker_pos}^^^"


def make_syntax_error(message: str, expression: str, column: int = 1) -> ExpressionSyntaxError:
    """
    Helper to create an ExpressionSyntaxError pointing into an expression.

    Args:
        message: Error description
        expression: The offending condition string
        column: Column number (1-indexed)

    Returns:
        ExpressionSyntaxError with context attached
    """
    return ExpressionSyntaxError(message, ErrorContext(source=expression, column=column))


def make_stylesheet_error(
    message: str,
    text: str,
    offset: int,
    file: Path | None = None,
    *,
    structural: bool = False,
) -> StylesheetError:
    """
    Helper to create a StylesheetError from an offset into stylesheet text.

    Args:
        message: Error description
        text: Full stylesheet source
        offset: 0-indexed character offset of the problem
        file: Optional stylesheet path
        structural: Build a StylesheetStructureError

    Returns:
        StylesheetError with line/column context attached
    """
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    line_end = text.find("\n", offset)
    if line_end == -1:
        line_end = len(text)
    context = ErrorContext(
        source=text[line_start:line_end],
        column=offset - line_start + 1,
        line=line,
        file=file,
    )
    if structural:
        return StylesheetStructureError(message, context)
    return StylesheetError(message, context)
