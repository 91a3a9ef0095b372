"""backtrackparse - lazy backtracking parser combinators.

Parsers are plain functions from an immutable Cursor to a lazy iterator of
alternatives (PartialParse). Sequencing runs later stages once per
alternative of earlier ones, so ambiguous prefixes backtrack automatically:

    >>> grammar = and_(many1(digit), and_(many1(digit), and_(char("."), many1(digit))))
    >>> run_parse(grammar, "11.11")
    (['1'], (['1'], ('.', ['1', '1'])))

Public API:
    Cursor, PartialParse, Parser - input view and result protocol
    any_token, satisfy, char, literal, end_of_input - primitives
    digit, upper, lower, letter, alphanumeric, whitespace - character classes
    succeed, fail, bind, map_, and_, sequence, keep_left, keep_right - sequencing
    or_, choice, optional - ordered choice
    repeat, many, many1 - repetition
    separated_by, surrounded_by, text_of, token, line, name, integer - derived
    forward, lazy - recursive grammars
    run_parse, parse_outcome, iter_parses, complete - driver

Exceptions:
    BacktrackParseError - Base exception class
    GrammarConstructionError - Invalid combinator arguments
    NoParseError - Driver found no alternative
"""

from .combinators import (
    ForwardParser,
    alphanumeric,
    and_,
    any_token,
    bind,
    char,
    choice,
    digit,
    end_of_input,
    fail,
    forward,
    integer,
    keep_left,
    keep_right,
    lazy,
    letter,
    line,
    literal,
    lower,
    many,
    many1,
    map_,
    name,
    optional,
    or_,
    repeat,
    satisfy,
    separated_by,
    sequence,
    succeed,
    surrounded_by,
    text_of,
    token,
    upper,
    whitespace,
)
from .diagnostics import BacktrackParseError, GrammarConstructionError, NoParseError
from .driver import (
    ParseFailure,
    ParseOutcome,
    ParseSuccess,
    complete,
    iter_parses,
    parse_outcome,
    run_parse,
)
from .syntax import Cursor, Parser, PartialParse

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("backtrackparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BacktrackParseError",
    "Cursor",
    "ForwardParser",
    "GrammarConstructionError",
    "NoParseError",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "Parser",
    "PartialParse",
    "__version__",
    "alphanumeric",
    "and_",
    "any_token",
    "bind",
    "char",
    "choice",
    "complete",
    "digit",
    "end_of_input",
    "fail",
    "forward",
    "integer",
    "iter_parses",
    "keep_left",
    "keep_right",
    "lazy",
    "letter",
    "line",
    "literal",
    "lower",
    "many",
    "many1",
    "map_",
    "name",
    "optional",
    "or_",
    "parse_outcome",
    "repeat",
    "run_parse",
    "satisfy",
    "separated_by",
    "sequence",
    "succeed",
    "surrounded_by",
    "text_of",
    "token",
    "upper",
    "whitespace",
]
