"""
Error types for Fusion parsing and include expansion.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class FusionError(Exception):
    """Base exception for all Fusion parser errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(FusionError):
    """
    Raised when Fusion source cannot be parsed.

    Parsing stops at the first problem; no partial tree is returned.
    Subclasses identify the kind of defect:

    - UnterminatedLiteralError: quoted string or block comment never closes
    - UnterminatedExpressionError: ``${`` without a balanced ``}``
    - UnexpectedTokenError: a required token is missing or out of place
    - UnexpectedEndOfInputError: input ends inside an open block or statement
    """

    @property
    def line(self) -> int | None:
        """Line number (1-indexed) of the defect."""
        return self.context.line if self.context else None

    @property
    def column(self) -> int | None:
        """Column number (1-indexed) of the defect."""
        return self.context.column if self.context else None


class UnterminatedLiteralError(ParseError):
    """A quoted string or block comment reaches end of input unclosed."""


class UnterminatedExpressionError(ParseError):
    """An embedded ``${...}`` expression never reaches its balanced ``}``."""


class UnexpectedTokenError(ParseError):
    """
    A grammar rule found something other than what it requires.

    Attributes:
        expected: Description of what the rule needed
        found: Description of what was actually there
    """

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        expected: str | None = None,
        found: str | None = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(message, context)


class UnexpectedEndOfInputError(ParseError):
    """Input ends while a block or statement is still open."""

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        expected: str | None = None,
    ):
        self.expected = expected
        super().__init__(message, context)


class IncludeError(FusionError):
    """
    Raised when include expansion fails.

    Examples:
    - An include pattern that (transitively) includes itself
    - Include nesting deeper than the configured limit
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file, if the source came from one
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source lines around the error location
        snippet_start: Line number of the first snippet line
    """

    file: Path | None
    line: int
    column: int
    snippet: str | None = None
    snippet_start: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "Root.fusion:10:5" or "<string>:10:5"
        """
        location = f"{self.file or '<string>'}:{self.line}:{self.column}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        start_line = self.snippet_start or max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            # Add error marker (^^^) under the error column
            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def extract_snippet(source: str, line: int, radius: int = 2) -> tuple[str, int]:
    """
    Cut the lines surrounding ``line`` out of ``source``.

    Returns:
        Tuple of (snippet text, line number of the first snippet line)
    """
    lines = source.split("\n")
    first = max(1, line - radius)
    last = min(len(lines), line + radius)
    return "\n".join(lines[first - 1 : last]), first


def make_context(
    file: Path | None,
    line: int,
    column: int,
    source: str | None = None,
) -> ErrorContext:
    """
    Build an ErrorContext, attaching a snippet when the source is available.

    Args:
        file: Source file path (None for in-memory sources)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        source: Full source text, or None to omit the snippet
    """
    if source is None:
        return ErrorContext(file=file, line=line, column=column)
    snippet, snippet_start = extract_snippet(source, line)
    return ErrorContext(
        file=file,
        line=line,
        column=column,
        snippet=snippet,
        snippet_start=snippet_start,
    )


def make_unterminated_literal_error(
    message: str,
    file: Path | None,
    line: int,
    column: int,
    source: str | None = None,
) -> UnterminatedLiteralError:
    """Helper to create an UnterminatedLiteralError with context."""
    return UnterminatedLiteralError(message, make_context(file, line, column, source))


def make_unterminated_expression_error(
    file: Path | None,
    line: int,
    column: int,
    source: str | None = None,
) -> UnterminatedExpressionError:
    """Helper to create an UnterminatedExpressionError with context."""
    return UnterminatedExpressionError(
        "Unterminated expression: missing closing '}' for '${'",
        make_context(file, line, column, source),
    )


def make_unexpected_token_error(
    expected: str,
    found: str,
    file: Path | None,
    line: int,
    column: int,
    source: str | None = None,
) -> UnexpectedTokenError:
    """
    Helper to create an UnexpectedTokenError with context.

    Args:
        expected: What the grammar rule required
        found: What the scanner produced instead
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        source: Full source text for the snippet

    Returns:
        UnexpectedTokenError with context attached
    """
    return UnexpectedTokenError(
        f"Expected {expected}, got {found}",
        make_context(file, line, column, source),
        expected=expected,
        found=found,
    )


def make_unexpected_eof_error(
    expected: str,
    file: Path | None,
    line: int,
    column: int,
    source: str | None = None,
) -> UnexpectedEndOfInputError:
    """Helper to create an UnexpectedEndOfInputError with context."""
    return UnexpectedEndOfInputError(
        f"Unexpected end of input, expected {expected}",
        make_context(file, line, column, source),
        expected=expected,
    )


def make_include_error(message: str, pattern: str | None = None) -> IncludeError:
    """
    Helper to create an IncludeError.

    Args:
        message: Error description
        pattern: Optional include pattern involved in the failure
    """
    if pattern:
        return IncludeError(f"{message} (include: {pattern})")
    return IncludeError(message)
