"""Immutable cursor infrastructure for combinator parsing.

The cursor is the whole state of a parse: where we are, what the last
parser produced, and whether it failed. Python 3.13+. Zero external
dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Every change returns a NEW cursor, so a cursor held before an attempt
      stays valid and backtracking is just "keep using the old one"
    - Failure is a state (``error is not None``), not an exception
    - A failed cursor keeps the offset/result it had when it failed, for
      building diagnostics
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter)
    - CR-only (Classic Mac, \\r): NOT supported

Pattern Reference:
    - Haskell Parsec
    - arcsecond (JavaScript)
"""

from dataclasses import dataclass
from typing import Any

from seekparse.constants import MAX_RUNE_BYTES, REPLACEMENT_RUNE
from seekparse.diagnostics import ParseError, ParseFailedError
from seekparse.syntax.position import LineOffsetCache, line_column
from seekparse.syntax.source import Source

__all__ = ["Cursor", "ParseError", "decode_rune"]


def decode_rune(window: bytes) -> tuple[str, int] | None:
    """Decode the first code point of a byte window.

    Returns:
        (rune, byte_length) if the window starts with a complete code point,
        (U+FFFD, 1) if it starts with bytes that can never form one, or
        None if the window is a valid but incomplete prefix.

    Example:
        >>> decode_rune(b"\\xc3\\xa9")
        ('é', 2)
        >>> decode_rune(b"\\xc3") is None
        True
        >>> decode_rune(b"\\xff")
        ('\\ufffd', 1)
    """
    try:
        text = window.decode("utf-8")
    except UnicodeDecodeError as e:
        if e.start == 0 and e.reason == "unexpected end of data":
            return None
        if e.start > 0:
            # Window holds one complete rune followed by the start of the next
            rune = window[: e.start].decode("utf-8")
            return (rune[0], len(rune[0].encode("utf-8")))
        return (REPLACEMENT_RUNE, 1)
    if not text:
        return None
    return (text[0], len(text[0].encode("utf-8")))


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable parse state over a byte source.

    Attributes:
        source: Random-access byte source (borrowed, never owned)
        offset: Byte offset into the source
        result: Payload produced by the last parser that ran
        error: None on success, the ParseError on failure

    Example:
        >>> from seekparse.syntax.source import BytesSource
        >>> cursor = Cursor(BytesSource("héllo"))
        >>> cursor.read_rune()
        ('h', 1)
        >>> advanced = cursor.with_result("h", 1)
        >>> advanced.read_rune()
        ('é', 2)
        >>> cursor.offset  # Original unchanged (immutability)
        0
    """

    source: Source
    offset: int = 0
    result: Any = None
    error: ParseError | None = None

    @property
    def is_failure(self) -> bool:
        """True if the last parser failed."""
        return self.error is not None

    @property
    def is_eof(self) -> bool:
        """True if no bytes remain at the current offset."""
        return not self.source.read(self.offset, 1)

    def with_result(self, result: Any, offset: int) -> "Cursor":
        """Return a cursor with a new result and offset.

        The only sanctioned way to advance. Status and source are kept.
        """
        return Cursor(self.source, offset, result, self.error)

    def with_error(self, error: ParseError | str) -> "Cursor":
        """Return a failed cursor carrying error.

        Offset and result are retained for diagnostics. A plain message is
        anchored at this cursor's offset.
        """
        if isinstance(error, str):
            error = ParseError(error, self.offset)
        return Cursor(self.source, self.offset, self.result, error)

    def read_bytes(self, n: int) -> bytes:
        """Read up to n bytes at the current offset without advancing."""
        return self.source.read(self.offset, n)

    def read_rune(self) -> tuple[str, int] | None:
        """Decode one UTF-8 code point at the current offset.

        Probes windows of 1, 2, 3, then 4 bytes until a complete code point
        decodes.

        Returns:
            (rune, byte_length), or None if the source ends before a
            complete code point.
        """
        for width in range(1, MAX_RUNE_BYTES + 1):
            window = self.source.read(self.offset, width)
            if len(window) < width:
                return None
            decoded = decode_rune(window)
            if decoded is not None:
                return decoded
        # Four bytes that still do not decode can only be an invalid sequence
        return (REPLACEMENT_RUNE, 1)

    def read_runes(self, n: int) -> tuple[str, int] | None:
        """Decode n consecutive runes.

        Returns:
            (runes, total_byte_length), or None if fewer than n remain.
        """
        runes: list[str] = []
        offset = self.offset
        for _ in range(n):
            decoded = Cursor(self.source, offset).read_rune()
            if decoded is None:
                return None
            rune, width = decoded
            runes.append(rune)
            offset += width
        return ("".join(runes), offset - self.offset)

    def line_offset(self) -> tuple[int, int]:
        """Compute 1-based (line, column) for the current offset.

        Performance:
            O(n) where n = current offset. Only call for error reporting!
        """
        return line_column(self.source, self.offset)

    def describe_error(self) -> str:
        """Format the carried error as ``line:col: message``.

        The position is taken from the error's own offset, which can be ahead
        of the cursor offset when a sequence rewound to its entry.

        Raises:
            ValueError: If the cursor did not fail
        """
        if self.error is None:
            msg = "Cursor did not fail; nothing to describe"
            raise ValueError(msg)
        line, column = line_column(self.source, self.error.offset)
        return self.error.format_error(line, column)

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format the carried error with source context and pointer.

        Shows the problematic line and a caret under the error column.
        Undecodable bytes in the shown lines are replaced, and the caret
        counts bytes, so it can drift on lines with multi-byte runes.

        Example:
            >>> from seekparse.syntax.source import BytesSource
            >>> source = BytesSource("hello = Hi\\nworld = { $name\\nfoo = Bar")
            >>> cursor = Cursor(source).with_error(ParseError("Expected '}'", 26))
            >>> print(cursor.format_with_context())
            2:16: Expected '}'
            <BLANKLINE>
               1 | hello = Hi
               2 | world = { $name
                 |                ^
               3 | foo = Bar
        """
        if self.error is None:
            msg = "Cursor did not fail; nothing to describe"
            raise ValueError(msg)
        cache = LineOffsetCache(self.source)
        line, column = cache.get_line_col(self.error.offset)
        result_lines = [self.error.format_error(line, column), ""]

        start_line = max(1, line - context_lines)
        end_line = min(cache.line_count, line + context_lines)
        for i in range(start_line, end_line + 1):
            start, end = cache.line_bounds(i)
            text = self.source.read(start, end - start).decode("utf-8", "replace")
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + text)
            if i == line:
                result_lines.append(" " * (len(line_num_str) - 2) + "| " + " " * (column - 1) + "^")

        return "\n".join(result_lines)

    def unwrap(self) -> Any:
        """Return the result, or raise ParseFailedError if the parse failed."""
        if self.error is None:
            return self.result
        line, column = line_column(self.source, self.error.offset)
        raise ParseFailedError(self.error, line, column)
