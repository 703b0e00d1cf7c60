"""seekparse exception hierarchy.

Parse failures are values (failed cursors), not exceptions. Exceptions are
reserved for I/O problems and for callers that explicitly ask for a result
via ``Cursor.unwrap()``.

Python 3.13+. Zero external dependencies.
"""

from .codes import DiagnosticCode, ParseError


class SeekparseError(Exception):
    """Base exception for all seekparse errors.

    Attributes:
        code: Diagnostic code identifying the failure (optional)
    """

    def __init__(self, message: str, code: DiagnosticCode | None = None) -> None:
        super().__init__(message)
        self.code = code


class SourceUnavailableError(SeekparseError):
    """The backing source could not be opened or read.

    Distinguishes "unable to open" from "unable to parse": a parse that
    runs to completion always returns a cursor, failed or not.

    Attributes:
        path: Path that was being opened
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message, DiagnosticCode.SOURCE_UNAVAILABLE)
        self.path = path


class ParseFailedError(SeekparseError):
    """Raised by ``Cursor.unwrap()`` when the cursor carries a failure.

    Attributes:
        error: The ParseError carried by the failed cursor
        line: 1-based line of the error offset
        column: 1-based byte column of the error offset
    """

    def __init__(self, error: ParseError, line: int, column: int) -> None:
        super().__init__(error.format_error(line, column), error.code)
        self.error = error
        self.line = line
        self.column = column
