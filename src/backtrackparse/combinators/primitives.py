"""Primitive parsers that match single tokens.

There is no tokenization phase: a token is one character of the source.
Each primitive yields at most one alternative.
"""

from collections.abc import Callable, Iterator

from backtrackparse.combinators.core import bind, fail, or_, succeed
from backtrackparse.constants import ASCII_DIGITS, ASCII_LOWER, ASCII_UPPER, WHITESPACE_CHARS
from backtrackparse.diagnostics import ErrorTemplate, GrammarConstructionError
from backtrackparse.syntax.cursor import Cursor, Parser, PartialParse

__all__ = [
    "alphanumeric",
    "any_token",
    "char",
    "digit",
    "end_of_input",
    "letter",
    "literal",
    "lower",
    "satisfy",
    "upper",
    "whitespace",
]


def any_token(cursor: Cursor) -> Iterator[PartialParse[str]]:
    """The next character, or nothing at EOF."""
    if not cursor.is_eof:
        yield PartialParse(cursor.current, cursor.advance())


def satisfy(predicate: Callable[[str], bool]) -> Parser[str]:
    """The next character if predicate(character) holds.

    Args:
        predicate: Test applied to the single next character

    Returns:
        Parser with one alternative on a match, none otherwise

    Raises:
        GrammarConstructionError: If predicate is not callable
    """
    if not callable(predicate):
        raise GrammarConstructionError(ErrorTemplate.invalid_predicate("satisfy", predicate))
    return bind(any_token, lambda ch: succeed(ch) if predicate(ch) else fail)


def char(ch: str) -> Parser[str]:
    """Exactly the character ch.

    Raises:
        GrammarConstructionError: If ch is not a string of length 1
    """
    if not isinstance(ch, str) or len(ch) != 1:
        raise GrammarConstructionError(ErrorTemplate.invalid_character(ch))
    return satisfy(lambda c: c == ch)


def literal(text: str) -> Parser[str]:
    """Exactly text, case-sensitive.

    literal("") always succeeds without consuming input.

    Raises:
        GrammarConstructionError: If text is not a string
    """
    if not isinstance(text, str):
        raise GrammarConstructionError(ErrorTemplate.invalid_literal(text))
    size = len(text)

    def _literal(cursor: Cursor) -> Iterator[PartialParse[str]]:
        if cursor.startswith(text):
            yield PartialParse(text, cursor.advance(size))

    return _literal


def end_of_input(cursor: Cursor) -> Iterator[PartialParse[None]]:
    """None when no input remains, nothing otherwise."""
    if cursor.is_eof:
        yield PartialParse(None, cursor)


# Character classes. ASCII only.
digit: Parser[str] = satisfy(lambda c: c in ASCII_DIGITS)
upper: Parser[str] = satisfy(lambda c: c in ASCII_UPPER)
lower: Parser[str] = satisfy(lambda c: c in ASCII_LOWER)
letter: Parser[str] = or_(upper, lower)
alphanumeric: Parser[str] = or_(letter, digit)
whitespace: Parser[str] = satisfy(lambda c: c in WHITESPACE_CHARS)
