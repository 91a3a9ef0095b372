"""Tests for derived combinators and convenience parsers."""

from __future__ import annotations

from backtrackparse.combinators.derived import (
    integer,
    line,
    name,
    separated_by,
    surrounded_by,
    text_of,
    token,
)
from backtrackparse.combinators.primitives import char, digit, letter, literal
from backtrackparse.combinators.repetition import many1
from backtrackparse.syntax.cursor import Cursor, Parser


def _first(parser: Parser[object], text: str) -> tuple[object, str] | None:
    for alt in parser(Cursor(text, 0)):
        return (alt.value, alt.remaining)
    return None


class TestSeparatedBy:
    """Test separated_by."""

    def test_several_items(self) -> None:
        """Separator values are dropped."""
        assert _first(separated_by(integer, char(",")), "1,22,333") == ([1, 22, 333], "")

    def test_single_item(self) -> None:
        """One item needs no separator."""
        assert _first(separated_by(integer, char(",")), "7") == ([7], "")

    def test_trailing_separator_left_unconsumed(self) -> None:
        """A dangling separator is not part of the match."""
        assert _first(separated_by(integer, char(",")), "1,2,") == ([1, 2], ",")

    def test_requires_one_item(self) -> None:
        """No items, no alternatives."""
        assert _first(separated_by(integer, char(",")), ",1") is None

    def test_multi_character_separator(self) -> None:
        """Separators may be any parser."""
        assert _first(separated_by(name, literal(", ")), "ab, cd") == (["ab", "cd"], "")


class TestSurroundedBy:
    """Test surrounded_by."""

    def test_keeps_inner_value(self) -> None:
        """Only the inner value survives."""
        assert _first(surrounded_by(integer, char("["), char("]")), "[42]x") == (42, "x")

    def test_missing_closer(self) -> None:
        """Unclosed brackets do not match."""
        assert _first(surrounded_by(integer, char("["), char("]")), "[42") is None

    def test_backtracks_into_inner(self) -> None:
        """The inner parser gives back characters the closer needs."""
        inner = text_of(many1(digit))

        assert _first(surrounded_by(inner, char("<"), char("9")), "<129") == ("12", "")


class TestConvenienceParsers:
    """Test line, name, integer, text_of, and token."""

    def test_line_includes_newline(self) -> None:
        """line reads through the newline."""
        assert _first(line, "first\nsecond\n") == ("first\n", "second\n")

    def test_empty_line(self) -> None:
        """A bare newline is a line."""
        assert _first(line, "\nrest") == ("\n", "rest")

    def test_line_without_newline(self) -> None:
        """Text with no newline is not a line."""
        assert _first(line, "no newline") is None

    def test_name(self) -> None:
        """name joins letters into a string."""
        assert _first(name, "abcDEF12") == ("abcDEF", "12")

    def test_name_requires_letter(self) -> None:
        """name needs at least one letter."""
        assert _first(name, "12") is None

    def test_integer(self) -> None:
        """integer converts its digits."""
        assert _first(integer, "0042rest") == (42, "rest")

    def test_integer_alternatives_shorten(self) -> None:
        """integer exposes shorter digit runs for backtracking."""
        values = [alt.value for alt in integer(Cursor("123", 0))]

        assert values == [123, 12, 1]

    def test_integer_beyond_str_conversion_limit(self) -> None:
        """Digit runs longer than the int() string limit still convert."""
        digits = "1" * 5000

        value, rest = _first(integer, digits + "x")  # type: ignore[misc]

        assert rest == "x"
        assert value == (10**5000 - 1) // 9

    def test_text_of(self) -> None:
        """text_of joins a character list."""
        assert _first(text_of(many1(letter)), "ab1") == ("ab", "1")

    def test_token_skips_trailing_whitespace(self) -> None:
        """token consumes whitespace after its parser."""
        assert _first(token(name), "let \t\n x") == ("let", "x")

    def test_token_without_whitespace(self) -> None:
        """Trailing whitespace is optional."""
        assert _first(token(integer), "5+") == (5, "+")
