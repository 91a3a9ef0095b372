"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for diagnostics.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        GRAMMAR: Combinator misuse detected while building a grammar
        PARSE: Driver found no successful parse
    """

    GRAMMAR = "grammar"
    PARSE = "parse"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar construction errors (raised before any parsing)
        2000-2999: Parse errors (reported by the driver)
    """

    # Grammar construction errors (1000-1999)
    INVALID_REPEAT_BOUNDS = 1001
    INVALID_CHARACTER = 1002
    INVALID_LITERAL = 1003
    INVALID_PREDICATE = 1004
    EMPTY_CHOICE = 1005
    FORWARD_ALREADY_DEFINED = 1006
    FORWARD_NOT_DEFINED = 1007

    # Parse errors (2000-2999)
    NO_PARSE = 2001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.GRAMMAR
        return ErrorCategory.PARSE


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for grammar construction errors)
        hint: Suggestion for fixing the error
        combinator: Name of the combinator that rejected its arguments
        received: repr() of the offending argument
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    combinator: str | None = None
    received: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[NO_PARSE]: No alternative parsed the input
              --> line 1, column 1
              = help: Check the grammar against the input text

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
