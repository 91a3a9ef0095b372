"""Driver: run a parser against a string.

The driver pulls exactly the first alternative. Remaining input is
discarded; wrap the grammar in complete() to require full consumption.

Security:
    Inputs longer than max_source_size (default: MAX_SOURCE_SIZE) are
    rejected with ValueError before parsing starts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from backtrackparse.combinators.core import keep_left
from backtrackparse.combinators.primitives import end_of_input
from backtrackparse.constants import MAX_SOURCE_SIZE
from backtrackparse.diagnostics import Diagnostic, ErrorTemplate, NoParseError
from backtrackparse.syntax.cursor import Cursor, Parser, PartialParse

__all__ = [
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "complete",
    "iter_parses",
    "parse_outcome",
    "run_parse",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseSuccess[T]:
    """First alternative found by the driver.

    Attributes:
        value: Semantic value of the alternative
        rest: Cursor after the alternative (unconsumed input)
        start: Offset parsing started at
    """

    value: T
    rest: Cursor
    start: int = 0

    @property
    def consumed(self) -> int:
        """Number of characters consumed from the start position."""
        return self.rest.pos - self.start

    def __bool__(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """No alternatives remained.

    Attributes:
        source: The text that was parsed
        pos: Position where the alternative sequence was found empty
        diagnostic: Structured description with line/column span
    """

    source: str
    pos: int
    diagnostic: Diagnostic

    def format_error(self) -> str:
        """Format the failure for display."""
        return self.diagnostic.format_error()

    def __bool__(self) -> Literal[False]:
        return False


type ParseOutcome[T] = ParseSuccess[T] | ParseFailure


def _start_cursor(text: str, start: int, max_source_size: int | None) -> Cursor:
    if not isinstance(text, str):
        msg = f"Parser input must be str, got {type(text).__name__}"
        raise TypeError(msg)
    if isinstance(start, bool) or not isinstance(start, int):
        msg = f"Start position must be int, got {type(start).__name__}"
        raise TypeError(msg)
    limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValueError(ErrorTemplate.invalid_source_limit(limit))
    if limit > 0 and len(text) > limit:
        raise ValueError(ErrorTemplate.source_too_large(len(text), limit))
    if not 0 <= start <= len(text):
        raise ValueError(ErrorTemplate.invalid_start_position(start, len(text)))
    return Cursor(text, start)


def iter_parses[T](
    parser: Parser[T],
    text: str,
    *,
    start: int = 0,
    max_source_size: int | None = None,
) -> Iterator[PartialParse[T]]:
    """All alternatives of parser on text, lazily, in priority order.

    Raises:
        TypeError: If text is not a str or start is not an int
        ValueError: If text exceeds max_source_size, max_source_size is
            negative, or start is out of range
    """
    return parser(_start_cursor(text, start, max_source_size))


def parse_outcome[T](
    parser: Parser[T],
    text: str,
    *,
    start: int = 0,
    max_source_size: int | None = None,
) -> ParseOutcome[T]:
    """Run parser and report the first alternative or an explicit failure.

    Args:
        parser: Grammar to run
        text: Input string
        start: Offset to start parsing at (default: 0)
        max_source_size: Input length limit (None = MAX_SOURCE_SIZE, 0 = no limit)

    Returns:
        ParseSuccess for the first alternative, ParseFailure if there is none

    Raises:
        TypeError: If text is not a str or start is not an int
        ValueError: If text exceeds max_source_size, max_source_size is
            negative, or start is out of range

    Example:
        >>> outcome = parse_outcome(integer, "42abc")
        >>> outcome.value, outcome.rest.remaining
        (42, 'abc')
        >>> bool(parse_outcome(integer, "abc"))
        False
    """
    cursor = _start_cursor(text, start, max_source_size)
    alternatives = parser(cursor)
    first = next(alternatives, None)
    if first is None:
        line, column = cursor.compute_line_col()
        logger.debug("No parse for input of length %d at position %d", len(text), start)
        return ParseFailure(
            source=text,
            pos=cursor.pos,
            diagnostic=ErrorTemplate.no_parse(cursor.pos, line, column, len(text)),
        )
    logger.debug("Parsed %d of %d characters", first.rest.pos - start, len(text) - start)
    return ParseSuccess(first.value, first.rest, start)


def run_parse[T](
    parser: Parser[T],
    text: str,
    *,
    start: int = 0,
    max_source_size: int | None = None,
) -> T:
    """Value of the first alternative of parser on text.

    Raises:
        NoParseError: If parser yields no alternatives
        TypeError: If text is not a str or start is not an int
        ValueError: If text exceeds max_source_size, max_source_size is
            negative, or start is out of range
    """
    outcome = parse_outcome(parser, text, start=start, max_source_size=max_source_size)
    if isinstance(outcome, ParseFailure):
        raise NoParseError(outcome)
    return outcome.value


def complete[T](parser: Parser[T]) -> Parser[T]:
    """parser followed by end of input, keeping parser's value."""
    return keep_left(parser, end_of_input)
