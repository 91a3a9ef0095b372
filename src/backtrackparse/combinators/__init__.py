"""Parser combinators.

Submodules:
    primitives - single-token parsers and character classes
    core - bind, sequencing, ordered choice, map, forward references
    repetition - repeat, many, many1
    derived - separated_by, surrounded_by, line, name, integer

Python 3.13+.
"""

from .core import (
    ForwardParser,
    and_,
    bind,
    choice,
    fail,
    forward,
    keep_left,
    keep_right,
    lazy,
    map_,
    optional,
    or_,
    sequence,
    succeed,
)
from .derived import integer, line, name, separated_by, surrounded_by, text_of, token
from .primitives import (
    alphanumeric,
    any_token,
    char,
    digit,
    end_of_input,
    letter,
    literal,
    lower,
    satisfy,
    upper,
    whitespace,
)
from .repetition import many, many1, repeat

__all__ = [
    "ForwardParser",
    "alphanumeric",
    "and_",
    "any_token",
    "bind",
    "char",
    "choice",
    "digit",
    "end_of_input",
    "fail",
    "forward",
    "integer",
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
    "repeat",
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
