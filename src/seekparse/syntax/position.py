"""Position utilities for byte sources.

Converts byte offsets into line/column positions for error reporting.
Lines are delimited by ``\\n``; columns count bytes, not runes.
"""

from bisect import bisect_right

from seekparse.constants import NEWLINE
from seekparse.syntax.source import Source

__all__ = ["LineOffsetCache", "line_column"]


def line_column(source: Source, offset: int) -> tuple[int, int]:
    """Get 1-based line and column for a byte offset.

    Reads every byte from the start of the source up to offset, so the cost
    is proportional to offset. Only call this for error reporting, not during
    normal parsing; use LineOffsetCache for many lookups in one source.

    Args:
        source: Source being parsed
        offset: Byte offset (clamped to the source size)

    Returns:
        (line, column) tuple, both 1-based

    Raises:
        ValueError: If offset is negative

    Example:
        >>> from seekparse.syntax.source import BytesSource
        >>> source = BytesSource("line1\\nline2")
        >>> line_column(source, 0)
        (1, 1)
        >>> line_column(source, 8)
        (2, 3)
    """
    if offset < 0:
        msg = f"Offset must be >= 0, got {offset}"
        raise ValueError(msg)

    head = source.read(0, offset)
    line = head.count(NEWLINE) + 1
    # rfind returns -1 when there is no newline, which yields a 1-based column
    column = len(head) - head.rfind(NEWLINE)
    return (line, column)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in a single pass, then answers lookups
    with a binary search. More efficient than calling line_column() for
    each position when formatting several errors from the same source.

    Example:
        >>> from seekparse.syntax.source import BytesSource
        >>> cache = LineOffsetCache(BytesSource("abc\\ndef\\nghi"))
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(4)
        (2, 1)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_size")

    def __init__(self, source: Source) -> None:
        data = source.read_all()
        offsets = [0]
        start = data.find(NEWLINE)
        while start != -1:
            offsets.append(start + 1)
            start = data.find(NEWLINE, start + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._size = len(data)

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing newline starts an empty last line)."""
        return len(self._offsets)

    def get_line_col(self, offset: int) -> tuple[int, int]:
        """Get 1-based (line, column) for a byte offset, clamped to the source."""
        offset = min(max(offset, 0), self._size)
        index = bisect_right(self._offsets, offset) - 1
        return (index + 1, offset - self._offsets[index] + 1)

    def line_bounds(self, line: int) -> tuple[int, int]:
        """Byte range [start, end) of a 1-based line, excluding its newline."""
        start = self._offsets[line - 1]
        if line < len(self._offsets):
            end = self._offsets[line] - 1
        else:
            end = self._size
        return (start, end)
