"""Quickstart - Backtracking Parser Combinators.

Demonstrates:

1. Primitives and the driver
2. Backtracking across an ambiguous prefix
3. Enumerating every alternative
4. Recursive grammars with forward()
5. Failure outcomes and diagnostics

Python 3.13+.
"""

from __future__ import annotations


def example_1_primitives() -> None:
    """Match single tokens and literals."""
    from backtrackparse import and_, char, integer, literal, run_parse

    print("=" * 60)
    print("Example 1: Primitives")
    print("=" * 60)

    print(run_parse(literal("let"), "let x = 1"))
    print(run_parse(and_(char("x"), char("=")), "x="))
    print(run_parse(integer, "1024 bytes"))
    print()


def example_2_backtracking() -> None:
    """The first digits+ gives back a digit so the second can match."""
    from backtrackparse import and_, char, digit, many1, run_parse

    print("=" * 60)
    print("Example 2: Backtracking")
    print("=" * 60)

    digits = many1(digit)
    grammar = and_(digits, and_(digits, and_(char("."), digits)))
    print(run_parse(grammar, "11.11"))
    print()


def example_3_alternatives() -> None:
    """Every alternative, longest first."""
    from backtrackparse import char, iter_parses, repeat

    print("=" * 60)
    print("Example 3: All Alternatives")
    print("=" * 60)

    for alternative in iter_parses(repeat(char("a"), 2, 4), "aaaaaa"):
        print(f"{''.join(alternative.value)!r:8} rest={alternative.remaining!r}")
    print()


def example_4_recursion() -> None:
    """Nested lists via a forward reference."""
    from backtrackparse import (
        char,
        complete,
        forward,
        integer,
        optional,
        or_,
        run_parse,
        separated_by,
        surrounded_by,
    )

    print("=" * 60)
    print("Example 4: Recursive Grammar")
    print("=" * 60)

    value = forward("value")
    items = optional(separated_by(value, char(",")), [])
    value.define(or_(integer, surrounded_by(items, char("["), char("]"))))

    print(run_parse(complete(value), "[1,[2,3],[],[[4]]]"))
    print()


def example_5_failure() -> None:
    """Failures as values instead of exceptions."""
    from backtrackparse import integer, parse_outcome
    from backtrackparse.diagnostics import DiagnosticFormatter, OutputFormat

    print("=" * 60)
    print("Example 5: Failure Outcomes")
    print("=" * 60)

    outcome = parse_outcome(integer, "abc")
    if not outcome:
        print(outcome.format_error())
        json_formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        print(json_formatter.format(outcome.diagnostic))
    print()


if __name__ == "__main__":
    example_1_primitives()
    example_2_backtracking()
    example_3_alternatives()
    example_4_recursion()
    example_5_failure()
