"""seekparse - parser combinators over random-access byte sources.

A small algebra of composable parsing primitives: rune and literal matchers,
sequencing, choice, repetition, lookahead, and result/error mapping, with
backtracking built on an immutable cursor. Scannerless: grammars are written
directly against UTF-8 bytes.

Public API:
    parse_text - Run a parser over a str or bytes
    parse_file - Run a parser over a file
    ParseEngine - Entry points with configurable limits
    Parser - Immutable parser value (``|`` for choice, ``>>`` for map)
    Cursor - Parse state: offset, result, error

Exceptions:
    SeekparseError - Base exception class
    SourceUnavailableError - File could not be opened
    ParseFailedError - Raised by Cursor.unwrap() on a failed parse

Submodules:
    seekparse.syntax.parser.primitives - Rune, literal, until matchers
    seekparse.syntax.parser.combinators - Combinator algebra
    seekparse.syntax.parser.whitespace - Shared whitespace parsers
    seekparse.lang.escaped_string - Quoted string grammar
    seekparse.diagnostics - Error records, codes, templates
"""

from .diagnostics import (
    ParseError,
    ParseFailedError,
    SeekparseError,
    SourceUnavailableError,
)
from .syntax import Cursor, Span, Token
from .syntax.parser import (
    IGNORE_WHITESPACE,
    IGNORE_WHITESPACE1,
    ParseEngine,
    Parser,
    any_rune,
    between,
    chain,
    choice_of,
    digit,
    discard,
    end_of_input,
    exactly_n,
    fail,
    inline_space,
    lazy,
    letter,
    letters,
    lexeme,
    literal,
    literal_insensitive,
    many,
    many1,
    map_error,
    map_indexed,
    map_result,
    match_rune,
    match_runes,
    optional,
    parse_file,
    parse_text,
    peek,
    pure,
    rune_n,
    sequence_of,
    space,
    start_of_input,
    start_of_line,
    tagged,
    until,
    until_string,
    up_to_n,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("seekparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "IGNORE_WHITESPACE",
    "IGNORE_WHITESPACE1",
    "Cursor",
    "ParseEngine",
    "ParseError",
    "ParseFailedError",
    "Parser",
    "SeekparseError",
    "SourceUnavailableError",
    "Span",
    "Token",
    "__version__",
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
