"""Syntax package: sources, cursors, positions, and the parser engine.

Python 3.13+.
"""

from .ast import Span, Token
from .cursor import Cursor, ParseError
from .parser import ParseEngine, Parser
from .position import LineOffsetCache, line_column
from .source import BytesSource, FileSource, Source

__all__ = [
    "BytesSource",
    "Cursor",
    "FileSource",
    "LineOffsetCache",
    "ParseEngine",
    "ParseError",
    "Parser",
    "Source",
    "Span",
    "Token",
    "line_column",
]
