"""Tests for diagnostic codes, templates, formatting, and exceptions."""

from __future__ import annotations

import json

import pytest

from backtrackparse.diagnostics import (
    BacktrackParseError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    GrammarConstructionError,
    NoParseError,
    OutputFormat,
    SourceSpan,
)
from backtrackparse.driver import ParseFailure


class TestDiagnosticCode:
    """Test code ranges and categories."""

    def test_grammar_codes(self) -> None:
        """1000-range codes are grammar errors."""
        assert DiagnosticCode.INVALID_REPEAT_BOUNDS.category == ErrorCategory.GRAMMAR
        assert DiagnosticCode.FORWARD_NOT_DEFINED.category == ErrorCategory.GRAMMAR

    def test_parse_codes(self) -> None:
        """2000-range codes are parse errors."""
        assert DiagnosticCode.NO_PARSE.category == ErrorCategory.PARSE
        assert str(ErrorCategory.PARSE) == "parse"

    def test_codes_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid(self) -> None:
        """A well-formed span constructs."""
        span = SourceSpan(start=0, end=3, line=1, column=1)
        assert span.end == 3

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (5, 4, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid(self, start: int, end: int, line: int, column: int) -> None:
        """Invariant violations raise ValueError."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestErrorTemplate:
    """Test message templates."""

    def test_invalid_repeat_bounds(self) -> None:
        """Bounds appear in the message and the received field."""
        diagnostic = ErrorTemplate.invalid_repeat_bounds(3, 1)

        assert diagnostic.code == DiagnosticCode.INVALID_REPEAT_BOUNDS
        assert diagnostic.message == "Invalid repeat bounds: min=3, max=1"
        assert diagnostic.combinator == "repeat"
        assert diagnostic.received == "(3, 1)"

    def test_invalid_character(self) -> None:
        """The offending argument is quoted."""
        diagnostic = ErrorTemplate.invalid_character("ab")

        assert "received 'ab'" in diagnostic.message

    def test_no_parse_span(self) -> None:
        """no_parse spans from the start to the end of the source."""
        diagnostic = ErrorTemplate.no_parse(pos=2, line=1, column=3, source_length=7)

        assert diagnostic.span == SourceSpan(start=2, end=7, line=1, column=3)

    def test_plain_messages(self) -> None:
        """Driver ValueError messages."""
        assert "10,000" in ErrorTemplate.source_too_large(10_000, 5)
        assert ErrorTemplate.invalid_start_position(9, 3) == (
            "Start position 9 is outside the source (length 3)"
        )
        assert ErrorTemplate.unexpected_eof(4) == "Unexpected EOF at position 4"


class TestDiagnosticFormatter:
    """Test output formats."""

    def test_rust_format(self) -> None:
        """Compiler-style output lists every populated field."""
        text = ErrorTemplate.invalid_repeat_bounds(3, 1).format_error()

        assert text.splitlines() == [
            "error[INVALID_REPEAT_BOUNDS]: Invalid repeat bounds: min=3, max=1",
            "  = combinator: repeat",
            "  = received: (3, 1)",
            "  = help: Use integers with 0 <= min <= max, or max=None for no upper bound",
        ]

    def test_rust_format_with_span(self) -> None:
        """Spans render as line and column."""
        diagnostic = ErrorTemplate.no_parse(pos=0, line=1, column=1, source_length=3)

        assert "  --> line 1, column 1" in DiagnosticFormatter().format(diagnostic)

    def test_color(self) -> None:
        """color=True wraps the severity in ANSI codes."""
        formatter = DiagnosticFormatter(color=True)

        assert formatter.format(ErrorTemplate.empty_choice()).startswith("\033[1;31merror\033[0m")

    def test_simple_format(self) -> None:
        """Single-line output."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(ErrorTemplate.empty_choice()) == (
            "EMPTY_CHOICE: choice() requires at least one parser"
        )

    def test_json_format(self) -> None:
        """JSON output round-trips through json.loads."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        diagnostic = ErrorTemplate.no_parse(pos=1, line=1, column=2, source_length=4)

        data = json.loads(formatter.format(diagnostic))

        assert data["code"] == "NO_PARSE"
        assert data["code_value"] == 2001
        assert data["category"] == "parse"
        assert (data["line"], data["column"], data["start"], data["end"]) == (1, 2, 1, 4)

    def test_sanitize_truncates(self) -> None:
        """sanitize=True truncates long content."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.NO_PARSE, message="x" * 50)

        assert formatter.format(diagnostic) == "NO_PARSE: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.empty_choice(), ErrorTemplate.forward_not_defined("e")]

        assert formatter.format_all(diagnostics).count("\n\n") == 1


class TestExceptions:
    """Test the exception hierarchy."""

    def test_string_message(self) -> None:
        """Plain messages carry no diagnostic."""
        error = BacktrackParseError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """Diagnostics are formatted into the message."""
        error = GrammarConstructionError(ErrorTemplate.empty_choice())

        assert error.diagnostic is not None
        assert str(error).startswith("error[EMPTY_CHOICE]")
        assert isinstance(error, ValueError)

    def test_no_parse_error_carries_failure(self) -> None:
        """NoParseError exposes the failed outcome."""
        failure = ParseFailure(
            source="abc",
            pos=0,
            diagnostic=ErrorTemplate.no_parse(pos=0, line=1, column=1, source_length=3),
        )
        error = NoParseError(failure)

        assert error.failure is failure
        assert isinstance(error, BacktrackParseError)
        assert not isinstance(error, ValueError)
