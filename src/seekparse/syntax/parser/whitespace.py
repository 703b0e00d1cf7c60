"""Whitespace handling parsers.

Reusable, stateless parser constants built once at import time. Parsers are
immutable, so sharing these module-level values between grammars and
threads is safe.
"""

from seekparse.syntax.parser.base import Parser
from seekparse.syntax.parser.combinators import discard, many, many1, map_result, sequence_of
from seekparse.syntax.parser.primitives import match_runes, space

__all__ = [
    "IGNORE_WHITESPACE",
    "IGNORE_WHITESPACE1",
    "inline_space",
    "lexeme",
]

# Zero or more whitespace runes, result dropped (None). Never fails.
IGNORE_WHITESPACE: Parser = discard(many(space())).named("IGNORE_WHITESPACE")

# One or more whitespace runes, result dropped (None).
IGNORE_WHITESPACE1: Parser = discard(many1(space())).named("IGNORE_WHITESPACE1")


def _is_inline_space(rune: str) -> bool:
    return rune != "\n" and rune.isspace()


def inline_space() -> Parser:
    """Match one or more whitespace runes other than newline; result is a str."""
    return match_runes(_is_inline_space, what="non-newline whitespace")


def lexeme(parser: Parser) -> Parser:
    """Match parser, then skip trailing whitespace; result is parser's result.

    Example:
        >>> from seekparse import parse_text
        >>> from seekparse.syntax.parser.primitives import letters
        >>> cursor = parse_text(lexeme(letters()), "select   *")
        >>> cursor.result, cursor.offset
        ('select', 9)
    """
    return map_result(sequence_of(parser, IGNORE_WHITESPACE), lambda results: results[0]).named(
        f"lexeme({parser.name})"
    )
