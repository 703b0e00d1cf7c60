"""Diagnostic system for parse failures.

Provides the parse error record, diagnostic codes, message templates, and
the exception hierarchy.

Python 3.13+. Zero external dependencies.
"""

from .codes import DiagnosticCode, ParseError
from .errors import ParseFailedError, SeekparseError, SourceUnavailableError
from .templates import ErrorTemplate

__all__ = [
    "DiagnosticCode",
    "ErrorTemplate",
    "ParseError",
    "ParseFailedError",
    "SeekparseError",
    "SourceUnavailableError",
]
