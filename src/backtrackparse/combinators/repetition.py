"""Bounded and unbounded repetition.

Enumeration order is greedy-first with backtrack-on-demand. Conceptually:

    repeat(p) = or_(and_(p, repeat(p)), succeed([]))

so the longest run is the first alternative and every shorter run follows,
longest to shortest, for callers that need to backtrack into it.

The recursion above is unrolled onto an explicit stack of alternative
iterators. Each stack frame is one repetition level; a frame emits its
"stop here" alternative after all deeper frames are exhausted. Long runs
therefore cost heap, not Python stack frames.

Zero-width iterations:
    An iteration that consumes no input ends the repetition. It still
    counts. If min_count is not reached yet, the same value fills the
    remaining required slots, since invoking p again from the same cursor
    reproduces the same alternative.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from backtrackparse.diagnostics import ErrorTemplate, GrammarConstructionError
from backtrackparse.syntax.cursor import Cursor, Parser, PartialParse

__all__ = ["many", "many1", "repeat"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Values[T]:
    """Values matched so far, newest first.

    Frames on the stack share their common prefix, so pushing a level is
    O(1) regardless of how many iterations precede it.
    """

    head: T
    tail: "_Values[T] | None"
    count: int

    def to_list(self) -> list[T]:
        items: list[T] = []
        node: _Values[T] | None = self
        while node is not None:
            items.append(node.head)
            node = node.tail
        items.reverse()
        return items


@dataclass(frozen=True, slots=True)
class _Frame[T]:
    """One repetition level: where it started, what precedes it, what is left to try."""

    cursor: Cursor
    values: _Values[T] | None
    alternatives: Iterator[PartialParse[T]]

    @property
    def count(self) -> int:
        return 0 if self.values is None else self.values.count


def _validate_bounds(min_count: int, max_count: int | None) -> None:
    if (
        not isinstance(min_count, int)
        or isinstance(min_count, bool)
        or (max_count is not None and (not isinstance(max_count, int) or isinstance(max_count, bool)))
        or min_count < 0
        or (max_count is not None and max_count < min_count)
    ):
        raise GrammarConstructionError(ErrorTemplate.invalid_repeat_bounds(min_count, max_count))


def repeat[T](parser: Parser[T], min_count: int = 0, max_count: int | None = None) -> Parser[list[T]]:
    """Match parser between min_count and max_count times.

    Args:
        parser: Parser to repeat
        min_count: Fewest repetitions accepted (>= 0)
        max_count: Most repetitions attempted (None = unbounded)

    Returns:
        Parser whose values are lists of parser's values, longest first

    Raises:
        GrammarConstructionError: If min_count < 0 or max_count < min_count

    Example:
        >>> a = repeat(char("a"), 2, 4)
        >>> [len(p.value) for p in a(Cursor("aaaaaa", 0))]
        [4, 3, 2]
    """
    _validate_bounds(min_count, max_count)

    def _alternatives_from(cursor: Cursor, count: int) -> Iterator[PartialParse[T]]:
        if max_count is None or count < max_count:
            return parser(cursor)
        return iter(())

    def _repeat(cursor: Cursor) -> Iterator[PartialParse[list[T]]]:
        stack: list[_Frame[T]] = [_Frame(cursor, None, _alternatives_from(cursor, 0))]
        while stack:
            frame = stack[-1]
            head = next(frame.alternatives, None)
            if head is None:
                stack.pop()
                if frame.count >= min_count:
                    items = [] if frame.values is None else frame.values.to_list()
                    yield PartialParse(items, frame.cursor)
                continue

            values = _Values(head.value, frame.values, frame.count + 1)
            if head.rest.pos == frame.cursor.pos:
                logger.debug(
                    "Zero-width repetition at position %d after %d iteration(s); stopping",
                    frame.cursor.pos,
                    values.count,
                )
                items = values.to_list()
                if len(items) < min_count:
                    items.extend([head.value] * (min_count - len(items)))
                yield PartialParse(items, head.rest)
                continue

            stack.append(_Frame(head.rest, values, _alternatives_from(head.rest, values.count)))

    return _repeat


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more repetitions. Never fails: [] is always the last alternative."""
    return repeat(parser, 0, None)


def many1[T](parser: Parser[T]) -> Parser[list[T]]:
    """One or more repetitions. Fails iff parser fails at the start."""
    return repeat(parser, 1, None)
