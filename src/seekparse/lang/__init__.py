"""Grammars built on the combinator engine."""

from .escaped_string import ESCAPED_STRING, parse_escaped_string

__all__ = ["ESCAPED_STRING", "parse_escaped_string"]
