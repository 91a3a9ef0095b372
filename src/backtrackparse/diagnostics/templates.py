"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def invalid_repeat_bounds(min_count: object, max_count: object) -> Diagnostic:
        """repeat() called with a negative minimum or max below min.

        Args:
            min_count: Requested minimum number of repetitions
            max_count: Requested maximum number of repetitions (None = unbounded)

        Returns:
            Diagnostic for INVALID_REPEAT_BOUNDS
        """
        msg = f"Invalid repeat bounds: min={min_count!r}, max={max_count!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_REPEAT_BOUNDS,
            message=msg,
            hint="Use integers with 0 <= min <= max, or max=None for no upper bound",
            combinator="repeat",
            received=f"({min_count!r}, {max_count!r})",
        )

    @staticmethod
    def invalid_character(ch: object) -> Diagnostic:
        """char() called with something other than one character.

        Args:
            ch: The offending argument

        Returns:
            Diagnostic for INVALID_CHARACTER
        """
        msg = f"Invalid character parser: expected one character but received {ch!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message=msg,
            hint="Use literal() to match strings longer than one character",
            combinator="char",
            received=repr(ch),
        )

    @staticmethod
    def invalid_literal(text: object) -> Diagnostic:
        """literal() called with a non-string.

        Args:
            text: The offending argument

        Returns:
            Diagnostic for INVALID_LITERAL
        """
        msg = f"Invalid literal parser: expected str but received {type(text).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LITERAL,
            message=msg,
            combinator="literal",
            received=repr(text),
        )

    @staticmethod
    def invalid_predicate(combinator: str, predicate: object) -> Diagnostic:
        """A combinator expecting a callable received something else.

        Args:
            combinator: Name of the combinator
            predicate: The offending argument

        Returns:
            Diagnostic for INVALID_PREDICATE
        """
        msg = f"{combinator}() expects a callable, got {type(predicate).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PREDICATE,
            message=msg,
            combinator=combinator,
            received=repr(predicate),
        )

    @staticmethod
    def empty_choice() -> Diagnostic:
        """choice() called with no parsers.

        Returns:
            Diagnostic for EMPTY_CHOICE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CHOICE,
            message="choice() requires at least one parser",
            hint="Use fail for a parser that never matches",
            combinator="choice",
        )

    @staticmethod
    def forward_already_defined(name: str) -> Diagnostic:
        """ForwardParser.define() called twice.

        Args:
            name: Display name of the forward reference

        Returns:
            Diagnostic for FORWARD_ALREADY_DEFINED
        """
        msg = f"Forward reference '{name}' is already defined"
        return Diagnostic(
            code=DiagnosticCode.FORWARD_ALREADY_DEFINED,
            message=msg,
            hint="Create a new forward() for each recursive rule",
            combinator="forward",
        )

    @staticmethod
    def forward_not_defined(name: str) -> Diagnostic:
        """ForwardParser invoked before define().

        Args:
            name: Display name of the forward reference

        Returns:
            Diagnostic for FORWARD_NOT_DEFINED
        """
        msg = f"Forward reference '{name}' was used before define() was called"
        return Diagnostic(
            code=DiagnosticCode.FORWARD_NOT_DEFINED,
            message=msg,
            hint="Call define() on the forward reference before running the grammar",
            combinator="forward",
        )

    @staticmethod
    def no_parse(pos: int, line: int, column: int, source_length: int) -> Diagnostic:
        """Driver found no alternatives at all.

        Args:
            pos: Character offset where parsing started
            line: Line number of pos (1-indexed)
            column: Column number of pos (1-indexed)
            source_length: Length of the source text

        Returns:
            Diagnostic for NO_PARSE
        """
        return Diagnostic(
            code=DiagnosticCode.NO_PARSE,
            message="No alternative parsed the input",
            span=SourceSpan(start=pos, end=source_length, line=line, column=column),
            hint="Check the grammar against the input text",
        )

    @staticmethod
    def unexpected_eof(pos: int) -> str:
        """Cursor.current read past the end of the source.

        Args:
            pos: Cursor position

        Returns:
            Message for the EOFError raised by the cursor
        """
        return f"Unexpected EOF at position {pos}"

    @staticmethod
    def source_too_large(size: int, limit: int) -> str:
        """Input exceeds the configured maximum size.

        Args:
            size: Length of the rejected input
            limit: Configured maximum

        Returns:
            Message for the ValueError raised by the driver
        """
        return (
            f"Source size ({size:,} characters) exceeds maximum "
            f"({limit:,} characters). "
            "Pass max_source_size= to increase the limit."
        )

    @staticmethod
    def invalid_source_limit(limit: object) -> str:
        """max_source_size is not a non-negative int."""
        return f"max_source_size must be a non-negative int or None, got {limit!r}"

    @staticmethod
    def invalid_start_position(start: int, size: int) -> str:
        """Driver start offset lies outside the source.

        Args:
            start: Requested start offset
            size: Length of the source

        Returns:
            Message for the ValueError raised by the driver
        """
        return f"Start position {start} is outside the source (length {size})"
