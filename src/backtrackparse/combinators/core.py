"""Sequencing, ordered choice, and transformation combinators.

Every combinator returns a plain function Cursor -> Iterator[PartialParse].
The function closes over its sub-parsers and is never mutated afterwards.

Backtracking:
    bind() runs its continuation once per alternative of the first parser,
    in order, and only advances to the next alternative when the consumer
    pulls past everything the current branch produced. When a later stage
    yields nothing for the first alternative, enumeration falls through to
    the second one on its own. Nothing in this module retries explicitly.

Laziness:
    All combinators are generators. A consumer that stops pulling leaves
    the unexplored branches unevaluated.
"""

from collections.abc import Callable, Iterator
from typing import Any, Never

from backtrackparse.diagnostics import ErrorTemplate, GrammarConstructionError
from backtrackparse.syntax.cursor import Cursor, Parser, PartialParse

__all__ = [
    "ForwardParser",
    "and_",
    "bind",
    "choice",
    "fail",
    "forward",
    "keep_left",
    "keep_right",
    "lazy",
    "map_",
    "optional",
    "or_",
    "sequence",
    "succeed",
]


def _require_callable(combinator: str, value: object) -> None:
    if not callable(value):
        raise GrammarConstructionError(ErrorTemplate.invalid_predicate(combinator, value))


def succeed[T](value: T) -> Parser[T]:
    """Parser with exactly one alternative: value, consuming nothing."""

    def _succeed(cursor: Cursor) -> Iterator[PartialParse[T]]:
        yield PartialParse(value, cursor)

    return _succeed


def fail(cursor: Cursor) -> Iterator[PartialParse[Never]]:  # noqa: ARG001
    """Parser with no alternatives."""
    return iter(())


def bind[A, B](parser: Parser[A], continuation: Callable[[A], Parser[B]]) -> Parser[B]:
    """Sequence parser with a parser chosen from its value.

    For each alternative of parser, in order, continuation(value) is run on
    that alternative's rest. The result is the in-order concatenation of all
    branches.

    Args:
        parser: First stage
        continuation: Builds the second stage from the first stage's value

    Returns:
        Parser yielding the second stage's alternatives

    Example:
        >>> digit_then_same = bind(digit, char)
        >>> [p.value for p in digit_then_same(Cursor("11", 0))]
        ['1']
    """
    _require_callable("bind", continuation)

    def _bind(cursor: Cursor) -> Iterator[PartialParse[B]]:
        for head in parser(cursor):
            yield from continuation(head.value)(head.rest)

    return _bind


def map_[A, B](parser: Parser[A], transform: Callable[[A], B]) -> Parser[B]:
    """Apply transform to every alternative's value.

    The number of alternatives, their order, and their rests are unchanged.
    """
    _require_callable("map_", transform)
    return bind(parser, lambda value: succeed(transform(value)))


def and_[A, B](first: Parser[A], second: Parser[B]) -> Parser[tuple[A, B]]:
    """Sequence two parsers, pairing their values positionally."""
    return bind(first, lambda a: bind(second, lambda b: succeed((a, b))))


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Sequence any number of parsers into a flat tuple of values.

    sequence() with no parsers succeeds with () consuming nothing.
    """

    def _sequence(cursor: Cursor) -> Iterator[PartialParse[tuple[Any, ...]]]:
        yield from _sequence_from(0, (), cursor)

    def _sequence_from(
        index: int, values: tuple[Any, ...], cursor: Cursor
    ) -> Iterator[PartialParse[tuple[Any, ...]]]:
        if index == len(parsers):
            yield PartialParse(values, cursor)
            return
        for head in parsers[index](cursor):
            yield from _sequence_from(index + 1, (*values, head.value), head.rest)

    return _sequence


def keep_left[A](first: Parser[A], second: Parser[Any]) -> Parser[A]:
    """Sequence two parsers, keeping the first value."""
    return bind(first, lambda a: bind(second, lambda _: succeed(a)))


def keep_right[B](first: Parser[Any], second: Parser[B]) -> Parser[B]:
    """Sequence two parsers, keeping the second value."""
    return bind(first, lambda _: second)


def or_[T](first: Parser[T], second: Parser[T]) -> Parser[T]:
    """Ordered choice.

    Yields every alternative of first, then every alternative of second.
    Both run against the same original cursor. No ranking by consumption
    length: put the preferred operand first.
    """

    def _or(cursor: Cursor) -> Iterator[PartialParse[T]]:
        yield from first(cursor)
        yield from second(cursor)

    return _or


def choice[T](*parsers: Parser[T]) -> Parser[T]:
    """Ordered choice over any number of parsers.

    Raises:
        GrammarConstructionError: If no parsers are given
    """
    if not parsers:
        raise GrammarConstructionError(ErrorTemplate.empty_choice())

    def _choice(cursor: Cursor) -> Iterator[PartialParse[T]]:
        for parser in parsers:
            yield from parser(cursor)

    return _choice


def optional[T, D](parser: Parser[T], default: D = None) -> Parser[T | D]:  # type: ignore[assignment]
    """parser's alternatives, then default consuming nothing."""
    return or_(parser, succeed(default))


class ForwardParser[T]:
    """Placeholder for a parser that is defined after it is referenced.

    Ties the knot for self-recursive grammars:

        >>> expr = forward("expr")
        >>> parens = surrounded_by(expr, char("("), char(")"))
        >>> expr.define(or_(parens, integer))

    The reference is resolved on each invocation, so define() may be called
    any time before the grammar runs.
    """

    __slots__ = ("_name", "_parser")

    def __init__(self, name: str = "forward") -> None:
        self._name = name
        self._parser: Parser[T] | None = None

    @property
    def name(self) -> str:
        """Display name used in diagnostics."""
        return self._name

    @property
    def is_defined(self) -> bool:
        """True once define() has been called."""
        return self._parser is not None

    def define(self, parser: Parser[T]) -> None:
        """Bind the placeholder to its parser.

        Raises:
            GrammarConstructionError: If already defined or parser is not callable
        """
        if self._parser is not None:
            raise GrammarConstructionError(ErrorTemplate.forward_already_defined(self._name))
        _require_callable("define", parser)
        self._parser = parser

    def __call__(self, cursor: Cursor) -> Iterator[PartialParse[T]]:
        if self._parser is None:
            raise GrammarConstructionError(ErrorTemplate.forward_not_defined(self._name))
        return self._parser(cursor)

    def __repr__(self) -> str:
        state = "defined" if self.is_defined else "undefined"
        return f"<ForwardParser {self._name!r} {state}>"


def forward(name: str = "forward") -> ForwardParser[Any]:
    """Create an undefined forward reference (see ForwardParser)."""
    return ForwardParser(name)


def lazy[T](factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is first invoked.

    factory is called at most once; later invocations reuse its parser.
    Useful when a rule refers to a module-level name bound further down.
    """
    _require_callable("lazy", factory)
    built: list[Parser[T]] = []

    def _lazy(cursor: Cursor) -> Iterator[PartialParse[T]]:
        if not built:
            built.append(factory())
        return built[0](cursor)

    return _lazy
