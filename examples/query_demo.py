"""Query Demo - A Tagged Grammar Built From Combinators.

Parses a tiny select-style query:

    select this "this is a quoted string"   from table

into a keyword token, a whitespace token and the list of words that follow
(bare words or double-quoted strings).

Demonstrates:

1. Case-insensitive keywords with literal_insensitive
2. Labelling results with tagged (kind + byte span)
3. Ordered choice between a quoted string and a bare word
4. Skipping whitespace with discard/IGNORE_WHITESPACE
5. Reporting a failure with line, column and source context
6. Parsing the same grammar from a file

Run:
    python examples/query_demo.py

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from seekparse import (
    IGNORE_WHITESPACE,
    Parser,
    any_rune,
    between,
    choice_of,
    discard,
    end_of_input,
    letters,
    literal,
    literal_insensitive,
    many,
    map_error,
    parse_file,
    parse_text,
    sequence_of,
    space,
    tagged,
    until_string,
)

CORPUS = 'select this "this is a quoted string"   from table'


def build_query_parser() -> Parser:
    """Build the select-query grammar."""
    quoted = between(literal('"'), literal('"'))(until_string(literal('"'), any_rune()))

    word = (
        sequence_of(choice_of(quoted, letters()), IGNORE_WHITESPACE, drop_none=True)
        >> (lambda results: results[0])
    ).named("word")

    keyword = map_error(
        tagged(literal_insensitive("select"), "SELECT"),
        lambda cursor: f"query must start with SELECT (line {cursor.line_offset()[0]})",
    )

    return sequence_of(
        keyword,
        tagged(many(space()), "WHITE-SPACE"),
        many(word),
        discard(end_of_input()),
        drop_none=True,
    ).named("query")


QUERY = build_query_parser()


def example_1_parse_query() -> None:
    """Parse the demo corpus and show each part of the result."""
    print("=" * 60)
    print("Example 1: Parse a Query")
    print("=" * 60)

    cursor = parse_text(QUERY, CORPUS)
    keyword, whitespace, words = cursor.result

    print(CORPUS)
    print(f"keyword:    {keyword.kind} {keyword.value!r} at {keyword.span}")
    print(f"whitespace: {whitespace.kind} {len(whitespace.value)} rune(s) at {whitespace.span}")
    print(f"words:      {list(words)}")
    print(f"offset:     {cursor.offset} of {len(CORPUS.encode())} bytes")


def example_2_case_insensitive() -> None:
    """Keywords match in any case; the result is the canonical spelling."""
    print("\n" + "=" * 60)
    print("Example 2: Case-Insensitive Keyword")
    print("=" * 60)

    cursor = parse_text(QUERY, "SeLeCt name FROM people")
    keyword, _, words = cursor.result
    print(f"keyword value: {keyword.value!r}")
    print(f"words:         {list(words)}")


def example_3_error_report() -> None:
    """A failed parse is a value; format it with context."""
    print("\n" + "=" * 60)
    print("Example 3: Error Reporting")
    print("=" * 60)

    source = "select name\n  age, email from people"
    cursor = parse_text(QUERY, source)
    print(f"failed:   {cursor.is_failure}")
    print(f"describe: {cursor.describe_error()}")
    print()
    print(cursor.format_with_context())


def example_4_parse_file() -> None:
    """The same grammar reads from a file through random access."""
    print("\n" + "=" * 60)
    print("Example 4: Parse a File")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "query.txt"
        path.write_text(CORPUS, encoding="utf-8")
        cursor = parse_file(QUERY, path)

    _, _, words = cursor.result
    print(f"words from file: {list(words)}")


def main() -> None:
    example_1_parse_query()
    example_2_case_insensitive()
    example_3_error_report()
    example_4_parse_file()


if __name__ == "__main__":
    main()
