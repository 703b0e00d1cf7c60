"""Parse entry points.

Builds the initial cursor over a string or a file and runs a composed
parser exactly once.

Architecture:
    The engine owns no grammar. It builds a :class:`~seekparse.syntax.source.Source`,
    wraps it in a :class:`~seekparse.syntax.cursor.Cursor` at offset 0, calls
    the parser, and hands the final cursor back. Success or failure, result,
    offset and error are all read from that cursor; line/column lookup is a
    separate, explicit call.

Security:
    Includes a configurable input size limit. Diagnostics scan the source
    from its start, so unbounded inputs make every error report O(n).

See Also:
    - :mod:`seekparse.syntax.parser.primitives` - Rune and literal matchers
    - :mod:`seekparse.syntax.parser.combinators` - Combinator algebra
"""

import logging
from dataclasses import replace
from os import PathLike

from seekparse.constants import MAX_SOURCE_SIZE
from seekparse.diagnostics import ErrorTemplate, SourceUnavailableError
from seekparse.syntax.cursor import Cursor
from seekparse.syntax.parser.base import Parser
from seekparse.syntax.source import BytesSource, FileSource, Source

__all__ = ["ParseEngine", "parse_file", "parse_text"]

logger = logging.getLogger(__name__)


class ParseEngine:
    """Runs parsers over in-memory text or files.

    Design:
    - One Source and one Cursor per call; nothing is shared between calls
    - Parsers are immutable, so one engine and one parser can serve many
      threads at once

    Security:
    - Configurable max_source_size rejects oversized inputs before parsing
    - Default limit: 10 MB

    Attributes:
        max_source_size: Maximum allowed source size in bytes (default: 10 MB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize engine with an optional size limit.

        Args:
            max_source_size: Maximum source size in bytes (default: 10 MB).
                            Set to 0 to disable the limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in bytes."""
        return self._max_source_size

    def parse_text(self, parser: Parser, text: str | bytes) -> Cursor:
        """Run parser once over in-memory text.

        Args:
            parser: Composed parser to run
            text: str (encoded as UTF-8) or raw bytes

        Returns:
            The final cursor; inspect ``is_failure``, ``result``, ``offset``
            and ``error``.

        Raises:
            ValueError: If text exceeds max_source_size

        Example:
            >>> from seekparse.syntax.parser.primitives import literal_insensitive
            >>> cursor = ParseEngine().parse_text(literal_insensitive("select"), "SELECT ")
            >>> cursor.result, cursor.offset
            ('select', 6)
        """
        return self._run(parser, BytesSource(text), "<text>")

    def parse_file(self, parser: Parser, path: str | PathLike[str]) -> Cursor:
        """Run parser once over a file.

        The file is opened in binary mode and closed before this returns, on
        every exit path. The returned cursor is re-bound to an in-memory copy
        of the file, so diagnostics and unwrap() work after the file is closed.

        Returns:
            The final cursor. A grammar mismatch is a failed cursor, never an
            exception.

        Raises:
            SourceUnavailableError: If the file cannot be opened
            ValueError: If the file exceeds max_source_size
        """
        try:
            file = open(path, "rb")  # noqa: SIM115 - closed by the with block below
        except OSError as e:
            logger.error("Failed to open source %s: %s", path, e)
            raise SourceUnavailableError(
                ErrorTemplate.source_unavailable(str(path), e.strerror or str(e)), str(path)
            ) from e

        with file:
            source = FileSource(file)
            cursor = self._run(parser, source, str(path))
            # Snapshot so the returned cursor outlives the handle
            return replace(cursor, source=BytesSource(source.read_all()))

    def _run(self, parser: Parser, source: Source, label: str) -> Cursor:
        size = source.size()
        if self._max_source_size > 0 and size > self._max_source_size:
            raise ValueError(ErrorTemplate.source_too_large(size, self._max_source_size))

        logger.debug("Parsing %s (%d bytes) with %r", label, size, parser)
        cursor = parser(Cursor(source))
        if cursor.is_failure:
            logger.debug("Parse of %s failed at offset %d: %s", label, cursor.offset, cursor.error)
        else:
            logger.debug("Parse of %s succeeded at offset %d", label, cursor.offset)
        return cursor


_DEFAULT_ENGINE = ParseEngine()


def parse_text(parser: Parser, text: str | bytes) -> Cursor:
    """Run parser once over text with the default engine.

    Example:
        >>> from seekparse.syntax.parser.combinators import many
        >>> from seekparse.syntax.parser.primitives import space
        >>> parse_text(many(space()), "   x").offset
        3
    """
    return _DEFAULT_ENGINE.parse_text(parser, text)


def parse_file(parser: Parser, path: str | PathLike[str]) -> Cursor:
    """Run parser once over a file with the default engine."""
    return _DEFAULT_ENGINE.parse_file(parser, path)
