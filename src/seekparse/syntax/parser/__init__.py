"""Parser-combinator engine.

Module Organization:
- base.py: Parser value type and lazy forward declarations
- primitives.py: Rune, literal, and until matchers
- combinators.py: Sequencing, choice, repetition, mapping, assertions
- whitespace.py: Shared whitespace parsers
- core.py: ParseEngine and the parse_text/parse_file entry points
"""

from seekparse.syntax.parser.base import Parser, ParseFn, lazy
from seekparse.syntax.parser.combinators import (
    between,
    chain,
    choice_of,
    discard,
    end_of_input,
    exactly_n,
    fail,
    many,
    many1,
    map_error,
    map_indexed,
    map_result,
    optional,
    peek,
    pure,
    sequence_of,
    start_of_input,
    start_of_line,
    tagged,
    up_to_n,
)
from seekparse.syntax.parser.core import ParseEngine, parse_file, parse_text
from seekparse.syntax.parser.primitives import (
    any_rune,
    digit,
    letter,
    letters,
    literal,
    literal_insensitive,
    match_rune,
    match_runes,
    rune_n,
    space,
    until,
    until_string,
)
from seekparse.syntax.parser.whitespace import (
    IGNORE_WHITESPACE,
    IGNORE_WHITESPACE1,
    inline_space,
    lexeme,
)

__all__ = [
    "IGNORE_WHITESPACE",
    "IGNORE_WHITESPACE1",
    "ParseEngine",
    "ParseFn",
    "Parser",
    "any_rune",
    "between",
    "chain",
    "choice_of",
    "digit",
    "discard",
    "end_of_input",
    "exactly_n",
    "fail",
    "inline_space",
    "lazy",
    "letter",
    "letters",
    "lexeme",
    "literal",
    "literal_insensitive",
    "many",
    "many1",
    "map_error",
    "map_indexed",
    "map_result",
    "match_rune",
    "match_runes",
    "optional",
    "parse_file",
    "parse_text",
    "peek",
    "pure",
    "rune_n",
    "sequence_of",
    "space",
    "start_of_input",
    "start_of_line",
    "tagged",
    "until",
    "until_string",
    "up_to_n",
]
