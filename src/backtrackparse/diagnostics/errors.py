"""Exception hierarchy with structured diagnostics.

Only grammar misuse and driver-level failure are exceptions. A parser that
does not match simply yields no alternatives.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from backtrackparse.driver import ParseFailure

__all__ = ["BacktrackParseError", "GrammarConstructionError", "NoParseError"]


class BacktrackParseError(Exception):
    """Base exception for all backtrackparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BacktrackParseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarConstructionError(BacktrackParseError, ValueError):
    """A combinator received arguments it cannot build a parser from.

    Raised at construction time, before any input is parsed, so malformed
    grammars fail fast:

        repeat(char("a"), 3, 1)   # max below min
        char("ab")                # more than one character
    """


class NoParseError(BacktrackParseError):
    """The driver found no successful alternative for the input.

    Attributes:
        failure: The ParseFailure outcome describing where parsing started
    """

    def __init__(self, failure: ParseFailure) -> None:
        """Initialize NoParseError.

        Args:
            failure: Failed outcome returned by parse_outcome()
        """
        super().__init__(failure.diagnostic)
        self.failure = failure
