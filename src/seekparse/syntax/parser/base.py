"""Parser value type.

A Parser is an immutable wrapper around a pure ``Cursor -> Cursor`` function.
All primitives and combinators return Parser objects, so the set of parsers
is closed under combination.

Architecture:
    - Calling a parser on a failed cursor returns that cursor unchanged;
      failures flow through nested parsers without any checks at the call
      sites. Only combinators that deliberately inspect failures (choice,
      optional, repetition, map_error, peek) call the wrapped function on a
      cursor whose attempt may fail.
    - Parsers capture only immutable configuration, so one parser value can
      be shared across parses and threads.
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import cache
from typing import Any, TypeAlias

from seekparse.syntax.cursor import Cursor

__all__ = ["Parser", "ParseFn", "lazy"]

ParseFn: TypeAlias = Callable[[Cursor], Cursor]


@dataclass(frozen=True, slots=True)
class Parser:
    """Immutable parser value.

    Attributes:
        fn: Pure function mapping a successful cursor to a new cursor
        name: Display name used in repr and debugging

    Operators:
        ``a | b`` is ``choice_of(a, b)``; ``a >> fn`` is ``map_result(a, fn)``.

    Example:
        >>> from seekparse.syntax.source import BytesSource
        >>> from seekparse.syntax.parser.primitives import literal
        >>> greeting = literal("hi") | literal("hello")
        >>> greeting(Cursor(BytesSource("hello"))).result
        'hello'
    """

    fn: ParseFn
    name: str = "parser"

    def __call__(self, cursor: Cursor) -> Cursor:
        if cursor.is_failure:
            return cursor
        return self.fn(cursor)

    def named(self, name: str) -> "Parser":
        """Return the same parser under another display name."""
        return Parser(self.fn, name)

    def __or__(self, other: "Parser") -> "Parser":
        from seekparse.syntax.parser.combinators import choice_of  # noqa: PLC0415

        return choice_of(self, other)

    def __rshift__(self, transform: Callable[[Any], Any]) -> "Parser":
        from seekparse.syntax.parser.combinators import map_result  # noqa: PLC0415

        return map_result(self, transform)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"


def lazy(factory: Callable[[], Parser], name: str = "lazy") -> Parser:
    """Forward declaration for recursive grammars.

    The factory is called once, on first use, and the parser it returns is
    reused afterwards. The factory must be pure: under concurrent first use
    it may run more than once, and every run must build an equivalent parser.

    Example:
        >>> from seekparse.syntax.parser.combinators import between, choice_of
        >>> from seekparse.syntax.parser.primitives import literal
        >>> nested = lazy(lambda: choice_of(between(literal("("), literal(")"))(nested), literal("x")))
    """
    resolve = cache(factory)

    def run(cursor: Cursor) -> Cursor:
        parser = resolve()
        if not isinstance(parser, Parser):
            msg = f"lazy factory must return a Parser, got {type(parser).__name__}"
            raise TypeError(msg)
        return parser(cursor)

    return Parser(run, name)
