"""Escaped string grammar.

Parses a double-quoted string whose backslash escapes are decoded:

    \\"     -> "
    \\\\     -> \\
    \\n     -> newline
    \\t     -> tab
    \\r     -> carriage return
    \\uXXXX -> code point U+XXXX (4 hex digits, surrogates rejected)

Built only from the public combinators, so it doubles as a worked example
of a grammar on top of the engine.

Example:
    >>> from seekparse import parse_text
    >>> parse_text(ESCAPED_STRING, '"tab\\\\there \\\\u00e4"').result
    'tab\\there ä'
"""

from seekparse.diagnostics import ErrorTemplate, ParseError
from seekparse.syntax.cursor import Cursor
from seekparse.syntax.parser import (
    Parser,
    any_rune,
    between,
    chain,
    choice_of,
    discard,
    exactly_n,
    fail,
    literal,
    many,
    map_error,
    map_result,
    match_rune,
    parse_text,
    pure,
    sequence_of,
)

__all__ = ["ESCAPED_STRING", "SIMPLE_ESCAPES", "parse_escaped_string"]

QUOTE = '"'
BACKSLASH = "\\"

SIMPLE_ESCAPES: dict[str, str] = {
    QUOTE: QUOTE,
    BACKSLASH: BACKSLASH,
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# \uXXXX = 4 hex digits (BMP characters U+0000 to U+FFFF)
_UNICODE_ESCAPE_LEN = 4

# UTF-16 surrogate code point range (D800-DFFF), invalid as scalar values.
_SURROGATE_RANGE_START = 0xD800
_SURROGATE_RANGE_END = 0xDFFF


def _first(results: tuple[object, ...]) -> object:
    return results[0]


def _code_point(digits: tuple[str, ...]) -> Parser:
    hex_text = "".join(digits)
    code_point = int(hex_text, 16)
    if _SURROGATE_RANGE_START <= code_point <= _SURROGATE_RANGE_END:
        return fail(f"Invalid surrogate code point: U+{hex_text.upper()}")
    return pure(chr(code_point))


_unicode_escape = chain(
    map_error(
        exactly_n(
            _UNICODE_ESCAPE_LEN, match_rune(_HEX_DIGITS.__contains__, what="hex digit")
        ),
        lambda cursor: ParseError(
            f"Invalid Unicode escape (expected {_UNICODE_ESCAPE_LEN} hex digits)",
            cursor.offset,
            expected=("0-9", "a-f", "A-F"),
        ),
    ),
    _code_point,
)


def _escape_body(rune: str) -> Parser:
    if rune == "u":
        return _unicode_escape
    if rune in SIMPLE_ESCAPES:
        return pure(SIMPLE_ESCAPES[rune])
    return fail(f"Invalid escape sequence: \\{rune}")


_escape = map_result(
    sequence_of(discard(literal(BACKSLASH)), chain(any_rune(), _escape_body), drop_none=True),
    _first,
)

_plain = match_rune(lambda rune: rune not in (QUOTE, BACKSLASH), what="string character")


def _closing_error(cursor: Cursor) -> ParseError:
    """Explain why the body stopped short of a closing quote.

    A backslash at the stop offset means the escape itself was invalid;
    anything else is a missing closing quote.
    """
    at = Cursor(cursor.source, cursor.offset)
    if at.read_bytes(1) == BACKSLASH.encode():
        attempt = _escape(at)
        if attempt.error is not None:
            return attempt.error
    return ParseError("Unterminated string literal", cursor.offset, expected=(QUOTE,))


# Zero or more characters between quotes; result is the decoded str.
ESCAPED_STRING: Parser = between(literal(QUOTE), map_error(literal(QUOTE), _closing_error))(
    map_result(many(choice_of(_escape, _plain)), "".join)
).named("ESCAPED_STRING")

def _at_end(cursor: Cursor) -> Cursor:
    # end_of_input() tolerates one trailing byte; a whole-input match must not
    if not cursor.is_eof:
        return cursor.with_error(ErrorTemplate.expected_end_of_input(cursor.offset))
    return cursor


_WHOLE_INPUT = map_result(sequence_of(ESCAPED_STRING, Parser(_at_end, "at_end")), _first)


def parse_escaped_string(text: str | bytes) -> str:
    """Decode one escaped string that must span the whole input.

    Raises:
        ParseFailedError: If text is not exactly one valid escaped string
    """
    return parse_text(_WHOLE_INPUT, text).unwrap()
