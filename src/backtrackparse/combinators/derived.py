"""Derived combinators and convenience parsers.

Everything here is built from primitives, core, and repetition. No new
enumeration semantics are introduced.
"""

from functools import reduce
from typing import Any

from backtrackparse.combinators.core import and_, keep_left, map_
from backtrackparse.combinators.primitives import char, digit, letter, satisfy, whitespace
from backtrackparse.combinators.repetition import many, many1
from backtrackparse.syntax.cursor import Parser

__all__ = [
    "integer",
    "line",
    "name",
    "separated_by",
    "surrounded_by",
    "text_of",
    "token",
]


def separated_by[T](parser: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """One or more parser matches separated by separator.

    Separator values are discarded.

    Example:
        >>> csv = separated_by(integer, char(","))
        >>> run_parse(csv, "1,22,333")
        [1, 22, 333]
    """
    return map_(
        and_(many(keep_left(parser, separator)), parser),
        lambda pair: [*pair[0], pair[1]],
    )


def surrounded_by[T](parser: Parser[T], before: Parser[Any], after: Parser[Any]) -> Parser[T]:
    """parser between before and after, keeping only parser's value."""
    return map_(and_(before, and_(parser, after)), lambda pair: pair[1][0])


def text_of(parser: Parser[list[str]]) -> Parser[str]:
    """Join a parser's list of characters into a string."""
    return map_(parser, "".join)


def token[T](parser: Parser[T]) -> Parser[T]:
    """parser followed by any amount of whitespace."""
    return keep_left(parser, many(whitespace))


# A line of text including its terminating newline. Input whose last line
# has no newline does not match that last line.
line: Parser[str] = map_(
    and_(many(satisfy(lambda c: c != "\n")), char("\n")),
    lambda pair: "".join(pair[0]) + pair[1],
)

name: Parser[str] = text_of(many1(letter))


def _digits_value(digits: list[str]) -> int:
    # int(str) refuses strings longer than sys.get_int_max_str_digits().
    return reduce(lambda total, d: total * 10 + ord(d) - 48, digits, 0)


integer: Parser[int] = map_(many1(digit), _digits_value)
