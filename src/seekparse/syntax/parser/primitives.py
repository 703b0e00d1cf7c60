"""Primitive matchers.

Low-level parsers that read runes and literal text straight from the source
through the cursor. Every matcher either advances past exactly what it
matched or fails without advancing.

Classification follows Python's str predicates:
    digit  -> str.isdecimal (Unicode Nd, excludes superscripts like ²)
    letter -> str.isalpha
    space  -> str.isspace
"""

from collections.abc import Callable
from dataclasses import replace
from typing import TypeAlias

from seekparse.diagnostics import ErrorTemplate, ParseError
from seekparse.syntax.cursor import Cursor
from seekparse.syntax.parser.base import Parser

__all__ = [
    "any_rune",
    "digit",
    "letter",
    "letters",
    "literal",
    "literal_insensitive",
    "match_rune",
    "match_runes",
    "rune_n",
    "space",
    "until",
    "until_string",
]

RunePredicate: TypeAlias = Callable[[str], bool]


def match_rune(
    predicate: RunePredicate,
    error: ParseError | str | None = None,
    *,
    what: str = "rune",
) -> Parser:
    """Match one rune satisfying predicate.

    Result is the rune (a one-character str). Advances by the rune's UTF-8
    byte length.

    Args:
        predicate: Test applied to the decoded rune
        error: Failure to report; a str is anchored at the failing offset,
            None uses the default "unable to match <what>" message
        what: Description used by the default message
    """

    def run(cursor: Cursor) -> Cursor:
        decoded = cursor.read_rune()
        if decoded is None or not predicate(decoded[0]):
            return cursor.with_error(
                _error_at(error, cursor.offset) or ErrorTemplate.rune_mismatch(cursor.offset, what)
            )
        rune, width = decoded
        return cursor.with_result(rune, cursor.offset + width)

    return Parser(run, what)


def match_runes(
    predicate: RunePredicate,
    error: ParseError | str | None = None,
    *,
    what: str = "runes",
) -> Parser:
    """Greedily match one or more runes satisfying predicate.

    Result is the matched text as a str. Zero matches is a failure; layer
    ``optional`` or ``many`` on top for zero-or-more semantics.
    """

    def run(cursor: Cursor) -> Cursor:
        runes: list[str] = []
        offset = cursor.offset
        while True:
            decoded = Cursor(cursor.source, offset).read_rune()
            if decoded is None or not predicate(decoded[0]):
                break
            runes.append(decoded[0])
            offset += decoded[1]
        if not runes:
            return cursor.with_error(
                _error_at(error, cursor.offset) or ErrorTemplate.runes_mismatch(cursor.offset, what)
            )
        return cursor.with_result("".join(runes), offset)

    return Parser(run, what)


def any_rune() -> Parser:
    """Match any single rune."""
    return match_rune(lambda _: True, what="any rune")


def rune_n(n: int) -> Parser:
    """Match exactly n runes of any kind; result is a str of n runes.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        msg = f"Rune count must be >= 0, got {n}"
        raise ValueError(msg)

    def run(cursor: Cursor) -> Cursor:
        decoded = cursor.read_runes(n)
        if decoded is None:
            return cursor.with_error(ErrorTemplate.rune_count_mismatch(n, cursor.offset))
        runes, width = decoded
        return cursor.with_result(runes, cursor.offset + width)

    return Parser(run, f"rune_n({n})")


def literal(text: str) -> Parser:
    """Match text exactly (byte comparison).

    Reads exactly ``len(text.encode())`` bytes; result is text.

    Raises:
        ValueError: If text is empty (it would match without advancing)
    """
    expected = _encode_literal(text)

    def run(cursor: Cursor) -> Cursor:
        if cursor.read_bytes(len(expected)) != expected:
            return cursor.with_error(ErrorTemplate.literal_mismatch(text, cursor.offset))
        return cursor.with_result(text, cursor.offset + len(expected))

    return Parser(run, f"literal({text!r})")


def literal_insensitive(text: str) -> Parser:
    """Match text ignoring case.

    Reads the same byte window as ``literal`` and compares after Unicode
    case folding of both sides. Input whose case variant has a different
    UTF-8 length than text (e.g. the Kelvin sign for "k") does not fit the
    window and does not match. Result is text as given, not the input.

    Raises:
        ValueError: If text is empty
    """
    expected = _encode_literal(text)
    folded = text.casefold()

    def run(cursor: Cursor) -> Cursor:
        window = cursor.read_bytes(len(expected))
        if len(window) == len(expected) and _casefold(window) == folded:
            return cursor.with_result(text, cursor.offset + len(expected))
        return cursor.with_error(ErrorTemplate.literal_mismatch(text, cursor.offset))

    return Parser(run, f"literal_insensitive({text!r})")


def digit() -> Parser:
    """Match one Unicode decimal digit; result is the rune."""
    return match_rune(str.isdecimal, what="digit")


def letter() -> Parser:
    """Match one Unicode letter; result is the rune."""
    return match_rune(str.isalpha, what="letter")


def letters() -> Parser:
    """Match one or more Unicode letters; result is a str."""
    return match_runes(str.isalpha, what="letters")


def space() -> Parser:
    """Match one whitespace rune; result is the rune."""
    return match_rune(str.isspace, what="space")


def until(stop: Parser) -> Callable[[Parser], Parser]:
    """Repeat a body parser until stop would match.

    ``until(stop)(body)`` checks stop first, as lookahead. When stop matches,
    the result is the tuple of body results so far and the cursor sits
    BEFORE the stop marker, which is left for an explicit trailing match.
    Otherwise body runs once and the loop retries.

    If body fails, the failure reported is the one from the most recent stop
    check, not the body's own error. Always pair ``until`` with an explicit
    match of the stop marker.

    Example:
        >>> from seekparse.syntax.source import BytesSource
        >>> cursor = until(literal(";"))(any_rune())(Cursor(BytesSource("ab;")))
        >>> cursor.result, cursor.offset
        (('a', 'b'), 2)
    """

    def wrap(body: Parser) -> Parser:
        def run(cursor: Cursor) -> Cursor:
            results: list[object] = []
            current = cursor
            while True:
                stopped = stop(current)
                if not stopped.is_failure:
                    return current.with_result(tuple(results), current.offset)

                current = body(current)
                if current.is_failure:
                    return stopped
                results.append(current.result)

        return Parser(run, f"until({stop.name})({body.name})")

    return wrap


def until_string(stop: Parser, body: Parser) -> Parser:
    """``until(stop)(body)`` with the rune results joined into a str.

    The body must produce str results; joining anything else raises
    TypeError at parse time.
    """
    return (until(stop)(body) >> "".join).named(f"until_string({stop.name})")


def _encode_literal(text: str) -> bytes:
    if not text:
        msg = "Literal text must not be empty"
        raise ValueError(msg)
    return text.encode("utf-8")


def _casefold(window: bytes) -> str | None:
    """Case-folded text of a byte window, or None if it is not valid UTF-8."""
    try:
        return window.decode("utf-8").casefold()
    except UnicodeDecodeError:
        return None


def _error_at(error: ParseError | str | None, offset: int) -> ParseError | None:
    """Resolve a caller-supplied error; None means use the default template."""
    if error is None:
        return None
    if isinstance(error, str):
        return ParseError(error, offset)
    return replace(error, offset=offset)
