"""Combinator algebra.

Higher-order functions that build new parsers from existing ones.

Backtracking:
    A cursor is never mutated, so "backtracking" is returning the cursor held
    before an attempt. Every combinator that fails after partial progress
    reports the failure on its ENTRY cursor, which lets an enclosing
    ``choice_of`` retry from exactly where the failed branch started.

Failure interception:
    Only ``choice_of``, ``optional``, ``many``/``many1``/``up_to_n``,
    ``map_error`` and ``peek`` look at a failed attempt. Everything else lets
    failures propagate unchanged.

Termination:
    Repetition is iterative. A parser that succeeds without advancing makes
    ``many`` loop forever; grammar authors must only repeat parsers that
    consume input on success.
"""

from collections.abc import Callable
from typing import Any

from seekparse.diagnostics import ErrorTemplate, ParseError
from seekparse.syntax.ast import Span, Token
from seekparse.syntax.cursor import Cursor
from seekparse.syntax.parser.base import Parser

__all__ = [
    "between",
    "chain",
    "choice_of",
    "discard",
    "end_of_input",
    "exactly_n",
    "fail",
    "many",
    "many1",
    "map_error",
    "map_indexed",
    "map_result",
    "optional",
    "peek",
    "pure",
    "sequence_of",
    "start_of_input",
    "start_of_line",
    "tagged",
    "up_to_n",
]


# ============================================================================
# SEQUENCING AND CHOICE
# ============================================================================


def sequence_of(*parsers: Parser, drop_none: bool = False) -> Parser:
    """Run parsers in order, collecting a tuple of their results.

    On the first failure the step's error is returned on the entry cursor.
    The error keeps its own offset, so diagnostics still point at the step
    that failed.

    Args:
        parsers: At least one parser
        drop_none: Omit ``None`` results (e.g. from ``discard``), keeping
            the order of the rest

    Raises:
        ValueError: If no parsers are given

    Example:
        >>> from seekparse import parse_text
        >>> from seekparse.syntax.parser.primitives import literal
        >>> parse_text(sequence_of(literal("a"), literal("b")), "ab").result
        ('a', 'b')
    """
    if not parsers:
        msg = "sequence_of requires at least one parser"
        raise ValueError(msg)

    def run(cursor: Cursor) -> Cursor:
        results: list[Any] = []
        current = cursor
        for parser in parsers:
            current = parser(current)
            if current.is_failure:
                return cursor.with_error(current.error)  # type: ignore[arg-type]
            if drop_none and current.result is None:
                continue
            results.append(current.result)
        return cursor.with_result(tuple(results), current.offset)

    return Parser(run, f"sequence_of({', '.join(p.name for p in parsers)})")


def choice_of(*parsers: Parser) -> Parser:
    """Try alternatives in order from the same cursor; first success wins.

    When every alternative fails the result is a generic "did not match any
    choice" failure at the entry offset. The alternatives' own errors are not
    aggregated; wrap the choice in ``map_error`` for a better message.

    Raises:
        ValueError: If no parsers are given
    """
    if not parsers:
        msg = "choice_of requires at least one parser"
        raise ValueError(msg)

    def run(cursor: Cursor) -> Cursor:
        for parser in parsers:
            attempt = parser(cursor)
            if not attempt.is_failure:
                return attempt
        return cursor.with_error(ErrorTemplate.no_choice_matched(cursor.offset))

    return Parser(run, f"choice_of({', '.join(p.name for p in parsers)})")


def chain(parser: Parser, continuation: Callable[[Any], Parser]) -> Parser:
    """Run parser, then the parser that continuation builds from its result.

    Lets the next match depend on a previous value, e.g. a closing delimiter
    equal to the opening one.
    """

    def run(cursor: Cursor) -> Cursor:
        matched = parser(cursor)
        if matched.is_failure:
            return matched
        return continuation(matched.result)(matched)

    return Parser(run, f"chain({parser.name})")


def between(left: Parser, right: Parser) -> Callable[[Parser], Parser]:
    """``between(left, right)(content)`` keeps only content's result."""

    def wrap(content: Parser) -> Parser:
        return map_result(sequence_of(left, content, right), lambda results: results[1]).named(
            f"between({left.name}, {right.name})({content.name})"
        )

    return wrap


# ============================================================================
# REPETITION
# ============================================================================


def many(parser: Parser) -> Parser:
    """Zero or more repetitions; never fails.

    Stops at the first failing attempt and discards it. Result is a
    possibly empty tuple.
    """

    def run(cursor: Cursor) -> Cursor:
        results, current = _repeat(parser, cursor)
        return current.with_result(tuple(results), current.offset)

    return Parser(run, f"many({parser.name})")


def many1(parser: Parser) -> Parser:
    """One or more repetitions; fails if the first attempt fails."""

    def run(cursor: Cursor) -> Cursor:
        results, current = _repeat(parser, cursor)
        if not results:
            return cursor.with_error(ErrorTemplate.no_repetition(cursor.offset))
        return current.with_result(tuple(results), current.offset)

    return Parser(run, f"many1({parser.name})")


def exactly_n(n: int, parser: Parser) -> Parser:
    """Exactly n consecutive successes.

    Any failure before the n-th success fails the whole match on the entry
    cursor. Result is a tuple of n results.

    Raises:
        ValueError: If n is negative
    """
    _check_count(n)

    def run(cursor: Cursor) -> Cursor:
        results: list[Any] = []
        current = cursor
        for _ in range(n):
            current = parser(current)
            if current.is_failure:
                return cursor.with_error(ErrorTemplate.repetition_count(n, cursor.offset))
            results.append(current.result)
        return cursor.with_result(tuple(results), current.offset)

    return Parser(run, f"exactly_n({n}, {parser.name})")


def up_to_n(n: int, parser: Parser) -> Parser:
    """Between 1 and n consecutive successes.

    Stops after n matches or at the first failure. If the very first attempt
    fails, that failure is returned. ``n == 0`` matches nothing and returns
    the cursor as given.

    Raises:
        ValueError: If n is negative
    """
    _check_count(n)

    def run(cursor: Cursor) -> Cursor:
        if n == 0:
            return cursor
        results: list[Any] = []
        current = cursor
        for _ in range(n):
            attempt = parser(current)
            if attempt.is_failure:
                if not results:
                    return attempt
                break
            results.append(attempt.result)
            current = attempt
        return current.with_result(tuple(results), current.offset)

    return Parser(run, f"up_to_n({n}, {parser.name})")


# ============================================================================
# OPTIONALITY AND LOOKAHEAD
# ============================================================================


def optional(parser: Parser) -> Parser:
    """Attempt parser; on failure return the original cursor, not failed.

    The original cursor still carries the previous result, so an optional
    step that did not match repeats the preceding result inside a sequence.
    """

    def run(cursor: Cursor) -> Cursor:
        attempt = parser(cursor)
        if attempt.is_failure:
            return cursor
        return attempt

    return Parser(run, f"optional({parser.name})")


def peek(parser: Parser) -> Parser:
    """Lookahead: succeed without consuming if parser would match."""

    def run(cursor: Cursor) -> Cursor:
        if parser(cursor).is_failure:
            return cursor.with_error(ErrorTemplate.would_not_match(cursor.offset))
        return cursor

    return Parser(run, f"peek({parser.name})")


# ============================================================================
# RESULT AND ERROR TRANSFORMATION
# ============================================================================


def map_result(parser: Parser, transform: Callable[[Any], Any]) -> Parser:
    """Replace a successful result with ``transform(result)``."""

    def run(cursor: Cursor) -> Cursor:
        matched = parser(cursor)
        if matched.is_failure:
            return matched
        return matched.with_result(transform(matched.result), matched.offset)

    return Parser(run, parser.name)


def map_indexed(parser: Parser, transform: Callable[[Any, int], Any]) -> Parser:
    """Replace a successful result with ``transform(result, start_offset)``."""

    def run(cursor: Cursor) -> Cursor:
        matched = parser(cursor)
        if matched.is_failure:
            return matched
        return matched.with_result(transform(matched.result, cursor.offset), matched.offset)

    return Parser(run, parser.name)


def map_error(parser: Parser, rewrite: Callable[[Cursor], ParseError | str]) -> Parser:
    """Replace a failure's error with ``rewrite(failed_cursor)``.

    The rewrite receives the whole failed cursor, so it can compute a line
    number or embed the previous result in the message. A str result is
    anchored at the failed cursor's offset.

    Example:
        >>> from seekparse import parse_text
        >>> from seekparse.syntax.parser.primitives import literal
        >>> keyword = map_error(literal("from"), lambda c: f"expected FROM at line {c.line_offset()[0]}")
        >>> parse_text(keyword, "to").error.message
        'expected FROM at line 1'
    """

    def run(cursor: Cursor) -> Cursor:
        matched = parser(cursor)
        if not matched.is_failure:
            return matched
        return matched.with_error(rewrite(matched))

    return Parser(run, parser.name)


def discard(parser: Parser) -> Parser:
    """Consume what parser matches and drop its result (becomes None)."""
    return map_result(parser, lambda _: None).named(f"discard({parser.name})")


def tagged(parser: Parser, kind: str) -> Parser:
    """Wrap a successful result in a Token labelled kind, with its span."""

    def run(cursor: Cursor) -> Cursor:
        matched = parser(cursor)
        if matched.is_failure:
            return matched
        token = Token(kind, matched.result, Span(cursor.offset, matched.offset))
        return matched.with_result(token, matched.offset)

    return Parser(run, f"tagged({parser.name}, {kind!r})")


# ============================================================================
# CONSTANT PARSERS
# ============================================================================


def pure(value: Any) -> Parser:
    """Succeed without consuming input, with value as the result."""

    def run(cursor: Cursor) -> Cursor:
        return cursor.with_result(value, cursor.offset)

    return Parser(run, f"pure({value!r})")


def fail(error: ParseError | str) -> Parser:
    """Fail without consuming input.

    Useful as a ``chain`` continuation that rejects a matched value. A str
    message is anchored at the offset where the failure happens.
    """

    def run(cursor: Cursor) -> Cursor:
        return cursor.with_error(error)

    return Parser(run, "fail")


# ============================================================================
# ZERO-WIDTH ASSERTIONS
# ============================================================================


def start_of_input() -> Parser:
    """Succeed only at offset 0."""

    def run(cursor: Cursor) -> Cursor:
        if cursor.offset != 0:
            return cursor.with_error(ErrorTemplate.expected_start_of_input(cursor.offset))
        return cursor

    return Parser(run, "start_of_input")


def end_of_input() -> Parser:
    """Succeed only if reading one byte past the current offset hits end-of-stream.

    The byte at the current offset itself is not examined, so a single
    trailing byte is accepted.
    """

    def run(cursor: Cursor) -> Cursor:
        if cursor.source.read(cursor.offset + 1, 1):
            return cursor.with_error(ErrorTemplate.expected_end_of_input(cursor.offset))
        return cursor

    return Parser(run, "end_of_input")


def start_of_line() -> Parser:
    """Succeed at offset 0 or right after a newline byte."""

    def run(cursor: Cursor) -> Cursor:
        if cursor.offset == 0:
            return cursor
        if cursor.source.read(cursor.offset - 1, 1) != b"\n":
            return cursor.with_error(ErrorTemplate.expected_start_of_line(cursor.offset))
        return cursor

    return Parser(run, "start_of_line")


# ============================================================================
# HELPERS
# ============================================================================


def _repeat(parser: Parser, cursor: Cursor) -> tuple[list[Any], Cursor]:
    """Apply parser until it fails; return results and the last good cursor."""
    results: list[Any] = []
    current = cursor
    while True:
        attempt = parser(current)
        if attempt.is_failure:
            return results, current
        results.append(attempt.result)
        current = attempt


def _check_count(n: int) -> None:
    if n < 0:
        msg = f"Repetition count must be >= 0, got {n}"
        raise ValueError(msg)
