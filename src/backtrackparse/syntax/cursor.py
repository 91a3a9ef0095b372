"""Immutable cursor and the alternative-enumeration protocol.

A Cursor is a view of the remaining suffix of the source. Parsers never
move a shared position: every step returns a NEW cursor, so trying a second
alternative always starts from the untouched original.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Line:column computed on-demand (O(n) only for errors)

Protocol:
    A Parser[T] maps a Cursor to a lazy iterator of PartialParse[T], most
    preferred alternative first. "No match" is the empty iterator. Pulling
    the next alternative is next(); stopping early is not pulling.

Line Ending Support:
    compute_line_col() uses \\n as the line delimiter. CRLF sources work;
    CR-only sources report incorrect line numbers.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from backtrackparse.diagnostics import ErrorTemplate

__all__ = ["Cursor", "Parser", "PartialParse"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable view of source[pos:].

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.remaining
        'ello'
        >>> cursor.current  # Original unchanged
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos))
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Unconsumed suffix of the source."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None beyond EOF.

        Raises:
            ValueError: If offset is negative

        Example:
            >>> Cursor("ab", 0).peek(1)
            'b'
            >>> Cursor("ab", 0).peek(2) is None
            True
        """
        if offset < 0:
            msg = f"peek offset must be non-negative, got {offset}"
            raise ValueError(msg)
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF).

        Raises:
            ValueError: If count is negative

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(3).pos
            3
            >>> cursor.pos
            0
        """
        if count < 0:
            msg = f"advance count must be non-negative, got {count}"
            raise ValueError(msg)
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, text: str) -> bool:
        """True if the remaining input begins with text.

        Compares in place; no suffix copy is made.
        """
        return self.source.startswith(text, self.pos)

    def count_newlines_before(self) -> int:
        """Number of newline characters before current position."""
        return self.source.count("\n", 0, self.pos)

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only call for error reporting.

        Example:
            >>> source = "line1\\nline2\\nline3"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 3)
        """
        line = self.count_newlines_before() + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class PartialParse[T]:
    """One alternative: the parsed value and the cursor after it.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = PartialParse("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.remaining
        'ello'
    """

    value: T
    rest: Cursor

    @property
    def remaining(self) -> str:
        """Unconsumed input after this alternative."""
        return self.rest.remaining


type Parser[T] = Callable[[Cursor], Iterator[PartialParse[T]]]
