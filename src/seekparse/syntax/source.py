"""Random-access byte sources.

A Source is the only input a parse reads from. It is addressed by absolute
offset, so a cursor can jump back to any earlier position without the source
keeping track of a read head.

Implementations:
    - BytesSource: in-memory buffer (str input is encoded as UTF-8)
    - FileSource: binary file object, read by seek + read

The cursor references a source but never owns it; whoever builds the source
(usually an entry point in :mod:`seekparse.syntax.parser.core`) controls its
lifetime.
"""

import os
from abc import ABC, abstractmethod
from typing import BinaryIO

__all__ = ["BytesSource", "FileSource", "Source"]


class Source(ABC):
    """Abstract random-access byte provider."""

    __slots__ = ()

    @abstractmethod
    def read(self, offset: int, length: int) -> bytes:
        """Read up to length bytes starting at offset.

        Returns:
            At most ``length`` bytes. A shorter result means the stream ends
            inside the window; an empty result means end-of-stream.
        """

    @abstractmethod
    def size(self) -> int:
        """Total number of bytes in the source."""

    def read_all(self) -> bytes:
        """Read the whole source (used for diagnostics only)."""
        return self.read(0, self.size())


class BytesSource(Source):
    """In-memory source.

    Example:
        >>> source = BytesSource("héllo")
        >>> source.read(1, 2)
        b'\\xc3\\xa9'
        >>> source.read(10, 1)
        b''
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | memoryview | str) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data: bytes = bytes(data)

    def read(self, offset: int, length: int) -> bytes:
        if offset < 0 or length <= 0:
            return b""
        return self._data[offset : offset + length]

    def size(self) -> int:
        return len(self._data)

    def read_all(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"BytesSource(<{len(self._data)} bytes>)"


class FileSource(Source):
    """Source backed by an open binary file.

    The file object is borrowed: FileSource never closes it. Reads seek to
    the requested offset every time, so interleaved reads at arbitrary
    offsets are always correct.

    Thread Safety:
        Not thread-safe (seek + read on a shared handle). Entry points create
        one FileSource per parse, which is never shared.
    """

    __slots__ = ("_file", "_name", "_size")

    def __init__(self, file: BinaryIO) -> None:
        self._file = file
        self._name = getattr(file, "name", "<file>")
        self._size = os.fstat(file.fileno()).st_size

    def read(self, offset: int, length: int) -> bytes:
        if offset < 0 or length <= 0 or offset >= self._size:
            return b""
        self._file.seek(offset)
        return self._file.read(length)

    def size(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"FileSource({self._name!r})"
